"""Define functions to read grasp configurations from and write grasp candidates to YAML files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from pathlib import Path


def export_yaml_data(data: dict[str, Any] | list[Any], filepath: Path) -> None:
    """Write the given data to a YAML file, preserving the order of dictionary keys.

    :param data: Plain Python data (dictionaries, lists, strings, and numbers)
    :param filepath: Destination file, overwritten if it exists (parent directories are created)
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w") as yaml_file:
        yaml.safe_dump(data, yaml_file, sort_keys=False, default_flow_style=None)


def load_yaml_data(yaml_path: Path, required_keys: set[str] | None = None) -> Any:
    """Read plain Python data from a YAML file.

    :param yaml_path: Path to the YAML file
    :param required_keys: Top-level keys that must be present in the loaded mapping (optional)
    :return: Loaded data (a dictionary, list, or scalar)
    :raises FileNotFoundError: If the file doesn't exist
    :raises RuntimeError: If the file isn't valid YAML
    :raises KeyError: If the data lacks any required key
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to parse YAML file: {yaml_path}") from error

    if required_keys:
        present = set(yaml_data) if isinstance(yaml_data, dict) else set()
        missing = sorted(required_keys - present)
        if missing:
            raise KeyError(f"Keys {missing} are missing from data loaded from {yaml_path}")

    return yaml_data
