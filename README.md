# dsalgo

Small, readable implementations of classic data structures and algorithms.

## Contents

- `dsalgo.stack` — `Stack`, a stack holding at most `capacity` items (100 by default).
  `push` raises `StackOverflowError` when the stack is full; `pop` and `peek` raise
  `StackUnderflowError` when it is empty. `is_full`, `is_empty` and `len()` report its state.
- `dsalgo.postfix` — `tokenize` splits an expression on spaces; `evaluate_postfix`
  evaluates a space-separated postfix expression with `+ - * /` and returns a float.
  Too few operands, division by zero, a stack deeper than 100 or leftover operands raise
  `PostfixError`. A token that is not an operator is read as its leading number, or 0.0.
- `dsalgo.recursion` — `gcd` (Euclid's algorithm), `sum_natural(n)`, `factorial(n)` and
  `fibonacci(n)` (with `fibonacci(1) == fibonacci(2) == 1`); the last three raise
  `ValueError` for `n < 1`. `tower_of_hanoi(n, source="A", target="C", spare="B")` yields
  `Move` records (`disk`, `source`, `target`) whose `str()` reads
  `Move disc 1 from A to C`.
- `dsalgo.bst` — `BinarySearchTree` of distinct values: `insert` and `delete` return
  whether the tree changed, `search` returns the `Node` or `None`, and the tree supports
  `in`, `len()` and iteration in sorted order. `minimum` and `maximum` raise `ValueError`
  on an empty tree; `inorder`, `preorder` and `postorder` are generators.
- `dsalgo.sorting` — `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`,
  `quick_sort` and `selection_sort`, each taking any iterable and returning a new sorted
  list.

## Installation

```
pip install .
```

## Library use

```python
from dsalgo.bst import BinarySearchTree
from dsalgo.postfix import evaluate_postfix
from dsalgo.recursion import tower_of_hanoi
from dsalgo.sorting import merge_sort

tree = BinarySearchTree([8, 3, 10, 1, 6, 14, 4, 7, 13])
print(list(tree.inorder()))     # [1, 3, 4, 6, 7, 8, 10, 13, 14]
print(6 in tree, tree.minimum(), tree.maximum())   # True 1 14

print(evaluate_postfix("2 3 4 * +"))   # 14.0

for move in tower_of_hanoi(2, "A", "C", "B"):
    print(move)

print(merge_sort([5, 2, 9, 1]))   # [1, 2, 5, 9]
```

## Commands

- `dsalgo-postfix [EXPRESSION...]` — evaluates the expression given as arguments, or
  prompts for one, prints its tokens and the result to two decimal places. Errors go to
  standard error with exit status 1.
- `dsalgo-bst` — an interactive menu on standard input for inserting, deleting,
  searching, traversing and finding the minimum and maximum of a binary search tree;
  choice 9 inserts the values 8, 3, 10, 1, 6, 14, 4, 7, 13 and choice 10 exits.
- `dsalgo-sort [n] [-a ALGORITHM] [--seed SEED]` — sorts `n` random integers
  (0 to 100000 of them; prompted for if not given) with `bubble`, `heap`, `insertion`,
  `merge`, `quick` (the default) or `selection`, printing the numbers before and after
  and the time taken.

## Running the tests

```
pip install .[test]
pytest
```