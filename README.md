# wordadt

Count how often each word occurs in a text file, and explore the result
through a handful of small ordered containers: a sorted list, an unbalanced
binary search tree and a binary max-heap. Each container is ordered by a
comparison function that returns a negative number, zero or a positive
number, in the same way as `strcmp`.

A word is any run of characters that are not whitespace. Files are read as
UTF-8 (undecodable bytes are replaced), and words are compared character by
character, so `Apple` and `apple` count as two different words.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `word-count`

```
word-count -w FILE     # words in dictionary order
word-count -f FILE     # most frequent first, ties in dictionary order
```

Prints one `word<TAB>count` line for each distinct word. An unknown option,
a wrong number of arguments or a file that cannot be opened is reported on
standard error, and the command exits with status 1.

### `word-count-interactive` and `word-count-tree`

```
word-count-interactive FILE
word-count-tree FILE
```

Both load the words of `FILE` and then read one-letter commands from
standard input (upper or lower case):

| Key | Action                                            |
|-----|---------------------------------------------------|
| `P` | print every word and its count, in order          |
| `B` | print every word and its count, in reverse order  |
| `S` | ask for a word and print its count                |
| `D` | ask for a word, delete it and print what was removed |
| `C` | print the number of distinct words                |
| `Q` | quit                                              |

A word that is searched for or deleted but not stored is reported as
`WORD not found`. Other characters, such as the newline after each command,
are ignored. The end of standard input quits as `Q` does.

`word-count-interactive` keeps the words in a sorted list.
`word-count-tree` keeps them in a binary search tree and also accepts `T`,
which prints the tree sideways: the root at the left margin, right subtrees
above, left subtrees below, each level indented four more spaces, each word
followed by a blank line.

Prompts go to standard error, so the results on standard output can be
redirected on their own. A wrong number of arguments exits with status 1, a
file that cannot be opened with status 2.

### `int-heap-demo`

```
int-heap-demo
```

Inserts twenty random integers between 1 and 60 into a max-heap, printing
them in the order they were inserted, then prints the heap array as stored,
then removes them one by one, largest first.

### `word-heap-demo`

```
word-heap-demo FILE
```

Reads alternating word and count tokens (for instance the `word<TAB>count`
lines of `word-count`), pushes each word onto a max-heap ordered by the word
itself, prints the heap array, and then removes up to 100 entries, the
alphabetically largest word first, printing each as `word<TAB>count`. A
word without a following count, or a count that is not an integer, raises
`ValueError`. A file that cannot be opened exits with status 2.

## Library use

The containers take any comparison function, so they work for more than
words:

```python
from wordadt.dlist import SortedList
from wordadt.bst import BinarySearchTree
from wordadt.heap import Heap


def compare(a, b):
    return (a > b) - (a < b)


items = SortedList(compare)
for name in ["pear", "apple", "fig"]:
    items.add(name, None)
print(list(items))            # ['apple', 'fig', 'pear']
print(list(reversed(items)))  # ['pear', 'fig', 'apple']
print(len(items))             # 3

tree = BinarySearchTree(compare)
for name in ["pear", "apple", "fig"]:
    tree.insert(name, None)
print(list(tree))             # ['apple', 'fig', 'pear']
print(tree.search("fig"))     # fig
print(tree.render(str))       # sideways drawing of the tree

heap = Heap(compare)
for n in [3, 9, 1, 7]:
    heap.push(n)
print([heap.pop() for _ in range(len(heap))])  # [9, 7, 3, 1]
```

`SortedList.add` and `BinarySearchTree.insert` return `True` when the item
was added. Their second argument is called with the stored item when an
equal item is already present; the new item is then not added and `False` is
returned. This is how repeated words raise the count of the word already
stored, through `Word.increase` in `wordadt.words`.

`search` returns the stored item or `None`. `SortedList.remove` and
`BinarySearchTree.delete` return the removed item and raise `KeyError` when
there is none. `Heap.pop` raises `IndexError` on an empty heap, and iterating
a `Heap` yields its items in array order, not sorted order. None cannot be
stored in a `SortedList` or a `Heap`.

`wordadt.words` holds the `Word` record (`word`, `freq`, `format()` giving
`word<TAB>freq`), `compare_by_word` and `compare_by_freq` for the two orders
used by the commands, and `read_words`, which yields the words of an open
text stream.

For the plain counting job, `wordadt.word_count.count_words` reads a stream
into a `WordDictionary`, which iterates in dictionary order and offers
`by_frequency()` for the frequency order. `binary_search` in the same module
returns `(index, found)` for a key in a sorted sequence, the index being the
insertion point when the key is absent.

## Limits

Everything is kept in memory and nothing is saved: deletions made in the
interactive commands do not change the file. The binary search tree is not
balanced, so words inserted in sorted order make it as deep as a list.