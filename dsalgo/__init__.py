"""Classic data structures and algorithms: stack, postfix evaluation, BST, recursion and sorting."""

__version__ = "0.1.0"
__all__ = ["stack", "postfix", "recursion", "bst", "sorting"]