# dsakit

A small library of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `ternary_search` (both for ascending sequences) and `linear_search`. Each returns the index of the key, or `None` when the key is absent |
| `dsakit.sorting` | `bubble_sort`, `quick_sort`, `merge_sort`, and `sort_abc`, a counting sort that puts `'a'`s, then `'b'`s, then `'c'`s; any other character is written back as `'c'`. Each returns a new list |
| `dsakit.graphs` | `bfs` and `dfs` over a square adjacency matrix, returning the visited vertices in order |
| `dsakit.trees` | `Node`, `height`, `level_order` (a flat list) and `diagonal_traversal` (a list of diagonals) for binary trees |
| `dsakit.hanoi` | `tower_of_hanoi`, which yields `Move` steps, and the `dsakit-hanoi` command |
| `dsakit.stacks` | `LinkedStack`, `BoundedStack`, `sort_stack`, `reverse_with_stack`, `reverse_recursive`, and the errors `StackUnderflowError` and `StackOverflowError` |
| `dsakit.queues` | `LinkedQueue`, `BoundedQueue`, `reverse_first_k`, and the errors `QueueEmptyError` and `QueueFullError` |
| `dsakit.linked_lists` | `LinkedList` with `push`, `delete_at` (1-based), `reverse` and `split_and_reverse`, and `CircularList` of `(key, data)` pairs |
| `dsakit.expressions` | `check_parentheses`, `is_balanced`, `is_valid_brackets`, `evaluate_postfix` and `UnbalancedError` |

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import quick_sort
from dsakit.trees import Node, level_order, diagonal_traversal
from dsakit.expressions import evaluate_postfix, is_balanced

binary_search([1, 3, 5, 7, 9], 5)        # 2
binary_search([1, 3, 5, 7, 9], 4)        # None
quick_sort([10, 7, 8, 9, 1, 5])          # [1, 5, 7, 8, 9, 10]

root = Node(1, Node(2, Node(4), Node(5)), Node(3))
level_order(root)                        # [1, 2, 3, 4, 5]
diagonal_traversal(root)                 # [[1, 3], [2, 5], [4]]

evaluate_postfix("231*+9-")              # -4
is_balanced("(()())")                    # True
```

`evaluate_postfix` takes single-digit operands and the operators `+ - * /`;
division truncates toward zero and whitespace is skipped. A malformed
expression raises `ValueError`. `check_parentheses` raises `UnbalancedError`,
whose `index` attribute marks an unmatched `)` or, when a `(` is left open,
the length of the text.

The stacks and queues use ordinary Python protocols. They support `len()`
and iteration, and taking from an empty container or adding to a full one
raises an exception:

```python
from dsakit.stacks import BoundedStack, sort_stack

stack = BoundedStack(100)
for value in (30, -5, 18, 14, -3):
    stack.push(value)
sorted_stack = sort_stack(stack)         # `stack` is left empty
sorted_stack.pop()                       # 30, the largest value is on top
```

```python
from dsakit.queues import BoundedQueue, reverse_first_k

queue = BoundedQueue(100)
for value in range(10, 101, 10):
    queue.push(value)
list(reverse_first_k(queue, 5))          # [50, 40, 30, 20, 10, 60, 70, 80, 90, 100]
```

`reverse_first_k` returns a new queue and leaves the one given unchanged.

## Tower of Hanoi from the command line

```
dsakit-hanoi 3
```

This prints one line for each move needed to carry three disks from peg `A`
to peg `C`, with peg `B` as the spare. An example line is
`Move disk 1 from A to C`. Without an argument the command asks for the
number of disks.

## What it does not do

Apart from `dsakit-hanoi` there are no commands or interactive menus: the
stacks, queues and lists are used from Python code only.

## Running the tests

```
pip install dsakit[test]
pytest
```