import logging
import sys
from pathlib import Path

from bst_notes.src.base.config_loader import DemoConfig, get_demo_config_from_file
from bst_notes.src.base.node import EMPTY
from bst_notes.src.traversal import get_strategy


def render(config: DemoConfig) -> str:
    strategy = get_strategy(config.strategy)
    root = strategy.from_keys(config.keys)

    smallest = strategy.minimum(root)
    if smallest is EMPTY:
        headline = "BST is empty"
    else:
        headline = f"Minimum value in BST is {smallest}"

    walked = " ".join(map(str, config.traversal.walk(root, config.strategy)))
    return "\n".join(
        [
            headline,
            f"count: {strategy.count(root)}",
            f"{config.traversal.value}: {walked}",
        ]
    )


def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]
    config_path = Path(argv[0]) if argv else None
    config = get_demo_config_from_file(config_path)
    logging.basicConfig(level=config.log_level)
    logging.debug(f"{config = }")
    print(render(config))


if __name__ == "__main__":
    main()
