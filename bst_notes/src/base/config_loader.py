import json
import logging
from dataclasses import dataclass
from pathlib import Path

from bst_notes.src.traversal import STRATEGIES, TraversalOrder


@dataclass(frozen=True)
class DemoConfig:
    keys: list
    traversal: TraversalOrder = TraversalOrder.IN_ORDER
    strategy: str = "recursive"
    log_level: str = "WARNING"


def get_demo_config(json_data_from_file: dict) -> DemoConfig:
    if "keys" not in json_data_from_file:
        raise ValueError("config is missing 'keys'")
    keys = json_data_from_file["keys"]
    if not isinstance(keys, list):
        raise ValueError(f"'keys' must be a list, got {type(keys).__name__}")

    traversal_name = json_data_from_file.get(
        "traversal", TraversalOrder.IN_ORDER.value
    )
    try:
        traversal = TraversalOrder(traversal_name)
    except ValueError as e:
        raise ValueError(f"unknown 'traversal' {traversal_name!r}") from e

    strategy = json_data_from_file.get("strategy", "recursive")
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown 'strategy' {strategy!r}")

    log_level = str(json_data_from_file.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"unknown 'log_level' {log_level!r}")

    return DemoConfig(
        keys=keys, traversal=traversal, strategy=strategy, log_level=log_level
    )


DEMO_CONFIG_FILE = "bst_config.json"


def get_demo_config_from_file(config_path: Path | None = None) -> DemoConfig:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / DEMO_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_demo_config(json_data_from_file)
