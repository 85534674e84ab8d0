"""Load sync options from tailwind-sync.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from tailwind_sync.paths import config_path as _default_config_path


@dataclass
class SyncOptions:
    """Options recognised by the sync run."""

    additional_style_paths: list[str] = field(default_factory=list)


def load_config(path: Path | str | None = None, required: bool | None = None) -> SyncOptions:
    """Load tailwind-sync.yaml.

    Args:
        path: Path to the config file. Defaults to the workspace root.
        required: Whether a missing file is an error. Defaults to True for
            an explicit path and False for the default location.

    Returns:
        Parsed SyncOptions.

    Raises:
        FileNotFoundError: If a required file doesn't exist.
        ValueError: If the YAML is malformed, not a mapping, or a value has
            the wrong type.
    """
    cfg_path = Path(path) if path is not None else _default_config_path()
    if required is None:
        required = path is not None
    if not required and not cfg_path.is_file():
        return SyncOptions()

    with open(cfg_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{cfg_path}: {e}") from e

    if data is None:
        return SyncOptions()
    if not isinstance(data, dict):
        raise ValueError(f"{cfg_path} is not a YAML mapping")

    paths = data.get("additional_style_paths", data.get("additionalStylePaths", []))
    if paths is None:
        paths = []
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ValueError(f"{cfg_path}: additional_style_paths must be a list of strings")

    return SyncOptions(additional_style_paths=list(paths))
