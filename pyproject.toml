[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordadt"
version = "0.1.0"
description = "Word frequency counting on top of small ordered containers: a sorted list, a binary search tree and a heap"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "word count",
    "frequency",
    "sorted list",
    "binary search tree",
    "heap",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
word-count = "wordadt.word_count:main"
word-count-interactive = "wordadt.interactive:main"
word-count-tree = "wordadt.interactive:tree_main"
int-heap-demo = "wordadt.heap_demo:int_main"
word-heap-demo = "wordadt.heap_demo:word_main"

[tool.hatch.build.targets.wheel]
packages = ["wordadt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["wordadt"]
