"""Linked lists, circular lists, pattern search, graphs, binary trees, BSTs and AVL trees."""

__version__ = "0.1.0"

__all__ = ["avl", "binarytree", "bst", "circular", "graph", "linkedlist", "search"]