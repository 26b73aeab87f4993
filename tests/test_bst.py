import random

import pytest

from wordadt.bst import BinarySearchTree


def cmp(a, b):
    return (a > b) - (a < b)


def make(values):
    tree = BinarySearchTree(cmp)
    for v in values:
        tree.insert(v)
    return tree


def test_inorder_and_reverse():
    values = [50, 30, 70, 20, 40, 60, 80]
    tree = make(values)
    assert list(tree) == sorted(values)
    assert list(reversed(tree)) == sorted(values, reverse=True)
    assert len(tree) == len(values)


def test_duplicate_calls_callback():
    tree = make(["m", "c"])
    seen = []
    assert tree.insert("c", seen.append) is False
    assert seen == ["c"]
    assert len(tree) == 2


def test_search():
    tree = make([5, 2, 8])
    assert tree.search(8) == 8
    assert tree.search(7) is None


def test_delete_leaf_one_child_two_children():
    tree = make([50, 30, 70, 20, 40, 60, 80, 65])
    assert tree.delete(20) == 20
    assert tree.delete(60) == 60
    assert tree.delete(50) == 50
    assert list(tree) == [30, 40, 65, 70, 80]
    assert len(tree) == 5


def test_delete_missing_raises():
    tree = make([1, 2])
    with pytest.raises(KeyError):
        tree.delete(3)
    assert len(tree) == 2


def test_delete_everything_random_order():
    rng = random.Random(7)
    values = rng.sample(range(1000), 200)
    tree = make(values)
    remaining = set(values)
    for v in rng.sample(values, len(values)):
        assert tree.delete(v) == v
        remaining.discard(v)
        assert list(tree) == sorted(remaining)
    assert len(tree) == 0


def test_sorted_input_does_not_overflow_stack():
    tree = make(range(5000))
    assert list(tree) == list(range(5000))
    assert tree.search(4999) == 4999


def test_render_layout():
    tree = make([2, 1, 3])
    assert tree.render(str) == "    3\n2\n    1\n"


def test_render_empty():
    assert BinarySearchTree(cmp).render(str) == ""


def test_clear():
    tree = make([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []