from collections.abc import Iterator
from enum import Enum
from types import ModuleType

from bst_notes.src import iterative, tree
from bst_notes.src.base.node import SupportsOrdering, Tree


STRATEGIES: dict[str, ModuleType] = {
    "recursive": tree,
    "iterative": iterative,
}


def get_strategy(name: str) -> ModuleType:
    if name not in STRATEGIES:
        raise ValueError(
            f"unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        )
    return STRATEGIES[name]


class TraversalOrder(Enum):
    IN_ORDER = "in_order"
    PRE_ORDER = "pre_order"
    POST_ORDER = "post_order"

    def walk[T: SupportsOrdering](
        self, root: Tree[T], strategy: str = "recursive"
    ) -> Iterator[T]:
        walker = getattr(get_strategy(strategy), self.value)
        return walker(root)
