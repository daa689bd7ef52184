"""Binary search tree of distinct values with parent links."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

DEFAULT_VALUES = (8, 3, 10, 1, 6, 14, 4, 7, 13)

_MENU = (
    "1.INSERT\n2.DELETE\n3.SEARCH\n4.INORDER\n"
    "5.PREORDER\n6.POSTORDER\n7.FIND MAX\n8.FIND MIN\n"
    "9.CREATE\n10.EXIT"
)


@dataclass(eq=False)
class Node:
    """A tree node linked to its children and its parent."""

    data: Any
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    parent: Node | None = field(default=None, repr=False)


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value, parent=node)
                    break
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = Node(value, parent=node)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present."""
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = self._leftmost(node.right)
            node.data = successor.data
            node = successor
        self._splice(node)
        self._size -= 1
        return True

    def _splice(self, node: Node) -> None:
        """Replace a node having at most one child by that child."""
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def search(self, key: Any) -> Node | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None and key != node.data:
            node = node.left if key < node.data else node.right
        return node

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size

    @staticmethod
    def _leftmost(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def minimum(self) -> Any:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("the tree is empty")
        return self._leftmost(self.root).data

    def maximum(self) -> Any:
        """Return the largest value in the tree."""
        if self.root is None:
            raise ValueError("the tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree."""
        pending: list[Node] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node, left subtree, right subtree."""
        pending = [self.root] if self.root is not None else []
        while pending:
            node = pending.pop()
            yield node.data
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, node."""
        pending = [self.root] if self.root is not None else []
        reversed_order = []
        while pending:
            node = pending.pop()
            reversed_order.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(reversed_order)


def _ask_int(prompt: str) -> int | None:
    """Read an integer; None if the line is not one. EOFError propagates."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        print("INVALID INPUT!")
        return None


def _line(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tree menu on standard input."""
    tree = BinarySearchTree()
    try:
        while True:
            print(_MENU)
            choice = _ask_int("Enter your choice ")
            match choice:
                case 1:
                    element = _ask_int("Enter the element to insert ")
                    if element is not None:
                        tree.insert(element)
                        print(f"{element} INSERTED!")
                case 2:
                    element = _ask_int("Enter the element to delete ")
                    if element is not None:
                        tree.delete(element)
                        print(f"{element} DELETED!")
                case 3:
                    element = _ask_int("Enter the element to search ")
                    if element is not None:
                        if element in tree:
                            print(f"{element} FOUND!")
                        else:
                            print(f"{element} NOT FOUND!!")
                case 4:
                    print(_line(tree.inorder()))
                case 5:
                    print(_line(tree.preorder()))
                case 6:
                    print(_line(tree.postorder()))
                case 7:
                    if len(tree):
                        print(f"{tree.maximum()} IS THE LARGEST ELEMENT IN THE BST")
                case 8:
                    if len(tree):
                        print(f"{tree.minimum()} IS THE SMALLEST ELEMENT IN THE BST")
                case 9:
                    for value in DEFAULT_VALUES:
                        tree.insert(value)
                    print("All elements inserted sucessfully!")
                case 10:
                    print("Bye!")
                    return 0
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())