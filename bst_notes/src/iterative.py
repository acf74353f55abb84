"""
Loop based versions of the operations in tree.py.

The recursive versions recurse once per level, so a tree built from sorted keys
(a linked list leaning one way) runs out of stack around a thousand keys. These
keep their own stack on the heap instead and give the same answers for every
tree.
"""

import logging
from collections.abc import Iterable, Iterator

from bst_notes.src.base.node import (
    EMPTY,
    EmptyResult,
    Node,
    SupportsOrdering,
    Tree,
)
from bst_notes.src.tree import goes_left


def insert[T: SupportsOrdering](root: Tree[T], key: T) -> Node[T]:
    if root is None:
        logging.debug(f"placing {key = } in empty slot")
        return Node(key)

    node = root
    while True:
        if goes_left(key, node.data):
            if node.left is None:
                node.left = Node(key)
                break
            node = node.left
        else:
            if node.right is None:
                node.right = Node(key)
                break
            node = node.right

    logging.debug(f"placed {key = } under {node.data = }")
    return root


def from_keys[T: SupportsOrdering](
    keys: Iterable[T], root: Tree[T] = None
) -> Tree[T]:
    for key in keys:
        root = insert(root, key)
    return root


def minimum[T: SupportsOrdering](root: Tree[T]) -> T | EmptyResult:
    if root is None:
        return EMPTY

    node = root
    while node.left is not None:
        node = node.left
    return node.data


def count(root: Tree) -> int:
    total = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        total += 1
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return total


def in_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    stack: list[Node[T]] = []
    node = root
    while stack or node is not None:
        # slide down the left spine, then take the lowest unvisited node
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def pre_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        # right first so left comes off the stack first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    stack: list[Node[T]] = []
    last_visited: Node[T] | None = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue

        top = stack[-1]
        if top.right is not None and top.right is not last_visited:
            node = top.right
        else:
            yield top.data
            last_visited = stack.pop()
