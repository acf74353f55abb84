from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class SupportsOrdering(Protocol):
    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


@dataclass(eq=False)
class Node[T: SupportsOrdering]:
    data: T
    left: "Node[T] | None" = None
    right: "Node[T] | None" = None

    def __repr__(self) -> str:
        return f"Node(data={self.data!r})"


class EmptyResult(Enum):
    """Answer to a query on an empty tree. Never equal to a key and never None."""

    EMPTY = "empty"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = EmptyResult.EMPTY


class InvalidKeyError(TypeError):
    def __init__(self, key: object, existing: object):
        self.key = key
        self.existing = existing
        super().__init__(
            f"key {key!r} ({type(key).__name__}) can't be ordered against "
            f"{existing!r} ({type(existing).__name__})"
        )


type Tree[T: SupportsOrdering] = Node[T] | None
