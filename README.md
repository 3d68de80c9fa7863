# dsakit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.errors`

- `StructureError`: base class for container errors.
- `CapacityError`: raised when adding to a full container (also an
  `OverflowError`).
- `EmptyError`: raised when removing from or inspecting an empty container
  (also an `IndexError`).

### `dsakit.queues`

Every queue takes a `capacity` (at least 1, otherwise `ValueError`) and
supports `is_full()`, `is_empty()`, `len()` and iteration.

- `CircularQueue(capacity=5)`: FIFO queue whose slots are reused;
  `enqueue(item)`, `dequeue()`.
- `LinearQueue(capacity=5)`: FIFO queue whose slots are never reused. Once
  `capacity` items have been enqueued it stays full, even after dequeues.
- `Deque(capacity=100)`: `push_left`, `push_right`, `pop_left`, `pop_right`.
- `PriorityQueue(capacity=5)`: `dequeue()` returns the smallest item; among
  equal smallest items the earliest enqueued leaves first. Iteration is in
  arrival order.
- `TwoStackQueue(capacity=40)`: FIFO queue built from an inbox and an outbox
  stack. The capacity limits the inbox; iteration is in dequeue order.
  `TwoStackQueue` has no `is_full()` beyond the inbox check used by
  `enqueue`.

### `dsakit.stacks`

- `BoundedStack(capacity=5)`: `push`, `pop`, `peek`, `is_full`, `is_empty`;
  iteration runs bottom to top.
- `QueueStack(capacity=5)`: a stack made of two FIFO queues; `push`, `pop`,
  `is_empty`; iteration runs top to bottom.

### `dsakit.expressions`

Expressions are strings of single characters with no spaces.

- `infix_to_postfix(infix)`: letters are operands; `+ - * / % ^` and
  parentheses are understood. Operators of equal strength are grouped from
  the right, so `"a-b-c"` becomes `"abc--"`. An unmatched `)` raises
  `ExpressionError`.
- `infix_to_prefix(infix)`: letters are operands; `+ - * / ^` and
  parentheses. An unmatched parenthesis raises `ExpressionError`.
- `postfix_to_infix(expression)`: returns a fully parenthesised infix string,
  e.g. `"ab+c*"` becomes `"((a+b)*c)"`.
- `evaluate_postfix(expression)` and `evaluate_prefix(expression)`: every
  character other than `+ - * /` is a single-digit operand; division
  truncates toward zero and division by zero raises `ZeroDivisionError`. Too
  few operands raise `ExpressionError`.
- `is_balanced(expression)`: checks `()`, `[]` and `{}`.
- `is_operand(ch)` and `precedence(op)`: the helpers the conversions use.

`ExpressionError` is a subclass of `ValueError`.

### `dsakit.recursion`

- `tower_of_hanoi(n, source="S", auxiliary="A", destination="D")`: list of
  `(from_peg, to_peg)` moves, `2**n - 1` of them; `n < 1` raises
  `ValueError`.
- `binary_search(items, key)`: index of `key` in a sorted sequence, or `-1`.
- `copy_string(text)`, `reverse_string(text)`.
- `find_first_capital(text)`: first ASCII capital letter, or `None`.
- `is_palindrome(text)`: case-sensitive.
- `selection_sort(items)`: returns a new sorted list.

### `dsakit.trees`

Binary trees made of `Node(data, left=None, right=None)` objects, handled by
plain functions that take and return root nodes.

- Building: `build_bst(values)`, `insert(root, key)` (equal keys go right),
  `build_from_preorder(values)` (a `0` marks a missing child).
- Search tree operations: `search`, `min_node`, `max_node`,
  `delete(root, key)` (a node with two children takes its inorder
  successor's value; a missing key changes nothing).
- `ancestors(root, key)`: values above `key`, nearest first; raises
  `KeyError` if the key is absent.
- `copy_tree`, `trees_equal`, `height` (empty tree is 0), `count_nodes`,
  `count_leaves`.
- Traversals yielding values: `inorder`, `preorder`, `postorder`,
  `level_order`.

### `dsakit.threaded`

- `ThreadedBST(values=())`: a double-threaded binary search tree of
  `ThreadedNode` objects with unique keys. `insert(key)` returns the new node
  and raises `ValueError` on a duplicate; `successor(node)` and
  `predecessor(node)` follow the threads; `inorder()` and iteration yield
  keys in ascending order without recursion or a stack.

## Example

```python
from dsakit.queues import CircularQueue
from dsakit.expressions import infix_to_postfix, evaluate_postfix
from dsakit.trees import build_bst, inorder, delete

queue = CircularQueue(5)
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()        # 10
list(queue)            # [20]

infix_to_postfix("a+b*c")   # "abc*+"
evaluate_postfix("23*4+")   # 10

root = build_bst([20, 10, 40, 50, 30, 60])
root = delete(root, 30)
list(inorder(root))         # [10, 20, 40, 50, 60]
```

## What it does not do

dsakit is a library only: it has no command-line program and does not read
input from the keyboard. Trees are not balanced, and `ThreadedBST` has no
deletion or search.