# algolab

A small collection of classic data structures and algorithms in plain
Python, with a few command-line tools for trying them out. There are no
runtime dependencies.

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `algolab.search`      | `binary_search` and `linear_search` (return an index or `None`), and `time_search`, which returns the processor time one search took |
| `algolab.recursion`   | `hanoi_moves`, a generator of `(disk, from_rod, to_rod)` moves, and `factorial` |
| `algolab.linked_list` | a singly linked `Node` and functions on a list's head: `from_iterable`, `to_list`, `append`, `last`, `length`, `list_sum`, `find_node`, `delete` (warns when the value is absent), `insert_ordered`, `format_list` |
| `algolab.account`     | `Account`, opened with a zero balance, with `deposit`, `withdraw` (returns whether it succeeded) and a read-only `balance` |
| `algolab.fifo`        | `Queue` with `enqueue`, `dequeue`, `peek` and `len()`; `dequeue` and `peek` raise `IndexError` when empty |
| `algolab.stack`       | `Stack` with `push`, `pop`, `peek` and `len()`, raising `IndexError` when empty, plus `brackets_balanced` for `()`, `[]` and `{}` |
| `algolab.sorting`     | in-place `selection_sort`, `bubble_sort`, `insertion_sort`, `shell_sort`, `merge_sort`, `naive_quick_sort`, `median_of_three_quick_sort` and `randomised_quick_sort`; `sort_items` returns a sorted copy using a `SortMethod` |
| `algolab.radix`       | `radix_sort` for keys of at most 8 letters `a`–`z`, and `generate_keys` for random 8-letter keys |
| `algolab.generate`    | `generate(count, order, seed)` returning 1..count in an `Order`: ascending, descending or shuffled |
| `algolab.bst`         | an unbalanced binary search tree of `Node`s: `insert`, `search`, `join`, `delete`, `size`, `height` (-1 for an empty tree), `prune`, `in_order`, `pre_order`, `post_order` and an ASCII `render` |
| `algolab.sets`        | integer sets `ArraySet` and `OrderedArraySet` (bounded, default capacity 64, raising `SetFullError` when full) and the unbounded `OrderedListSet` |
| `algolab.bst_shell`   | `BstShell`, a line-by-line command interpreter over a BST |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algolab.recursion import factorial, hanoi_moves
from algolab.stack import Stack, brackets_balanced
from algolab.fifo import Queue
from algolab.sets import OrderedListSet
from algolab.sorting import SortMethod, sort_items

factorial(5)                           # 120
list(hanoi_moves(2, "A", "C", "B"))    # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
brackets_balanced("{[()]}")            # True
brackets_balanced("([)]")              # False

stack = Stack()
stack.push(3)
stack.push(1)
stack.pop()                            # 1
len(stack)                             # 1

queue = Queue()
queue.enqueue(3)
queue.enqueue(1)
queue.dequeue()                        # 3

numbers = OrderedListSet()
for n in (5, 3, 9, 3):
    numbers.insert(n)
str(numbers)                           # "{3,5,9}"

sort_items([28, 19, 47, 46], SortMethod.MERGE)   # [19, 28, 46, 47]
sort_items([3, 1, 2], "shell")                   # methods by label or code
```

Binary search trees are built from `algolab.bst.Node` values; every
operation that changes the shape of a tree returns the new root:

```python
from algolab import bst

tree = None
for value in (10, 5, 14, 30):
    tree = bst.insert(tree, value)

bst.search(tree, 14)         # True
bst.in_order(tree)           # [5, 10, 14, 30]
tree = bst.delete(tree, 10)
print(bst.render(tree), end="")
```

## Command-line tools

Generate integers 1..N for the sorting tool: a count, an ordering
(`A` ascending, `D` descending, `R` random) and an optional seed.

```
algolab-generate 10 R 42
```

Sort integers read from standard input with a method given by label
(`selection`, `bubble`, `insertion`, `shell`, `merge`, `naive-quick`,
`median-of-three-quick`, `randomised-quick`) or one-letter code
(`s b i h m N M R`). `--strings` sorts words of up to 9 characters instead;
`--seed` seeds the randomised quicksort.

```
algolab-generate 1000 R | algolab-sort merge
```

Radix-sort lower-case keys, or print random keys:

```
algolab-radix gen 100 --seed 1 > keys.txt
algolab-radix sort < keys.txt
```

Check whether the brackets in standard input are balanced:

```
echo "{[()]}" | algolab-brackets
```

Search an array read from standard input (its size, its values, then the
value to look for), or time a search for a value that is not present:

```
echo "5 1 3 5 7 9 7" | algolab-search find binary
algolab-search time linear 1000000
```

Explore a binary search tree interactively. Enter `?` for the list of
commands (`+`, `-`, `f`, `p`, `s`, `h`, `r`, `I`, `P`, `O`) and `q` to
quit; start with `-e` to echo each command, which helps when feeding a
script on standard input.

```
algolab-bst -e < commands.txt
```