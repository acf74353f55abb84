import logging
from collections.abc import Iterable, Iterator

from bst_notes.src.base.node import (
    EMPTY,
    EmptyResult,
    InvalidKeyError,
    Node,
    SupportsOrdering,
    Tree,
)


def goes_left[T: SupportsOrdering](key: T, existing: T) -> bool:
    # ties go left so duplicates keep a deterministic spot
    try:
        return key <= existing
    except TypeError as e:
        raise InvalidKeyError(key, existing) from e


def insert[T: SupportsOrdering](root: Tree[T], key: T) -> Node[T]:
    if root is None:
        logging.debug(f"placing {key = } in empty slot")
        return Node(key)

    if goes_left(key, root.data):
        root.left = insert(root.left, key)
    else:
        root.right = insert(root.right, key)

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
    if root is None:
        return 0
    return 1 + count(root.left) + count(root.right)


def in_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    if root is None:
        return
    yield from in_order(root.left)
    yield root.data
    yield from in_order(root.right)


def pre_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    if root is None:
        return
    yield root.data
    yield from pre_order(root.left)
    yield from pre_order(root.right)


def post_order[T: SupportsOrdering](root: Tree[T]) -> Iterator[T]:
    if root is None:
        return
    yield from post_order(root.left)
    yield from post_order(root.right)
    yield root.data
