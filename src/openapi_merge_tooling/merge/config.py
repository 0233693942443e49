"""Merge config loading.

Config YAML format:
- input_spec_root_directory: directory holding the specs (relative to base_dir)
- merge_file_name (optional): base name of the merged spec, without extension
- strict (optional): fail on duplicate path keys / security scheme names
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from openapi_merge_tooling.merge.errors import ConfigurationError

DEFAULT_MERGE_FILE_NAME = "_merged_spec"


@dataclass
class MergeConfig:
    root_dir: Path
    merge_file_name: str = DEFAULT_MERGE_FILE_NAME
    strict: bool = False


def load_merge_config(config_path: Path, base_dir: Path | None = None) -> MergeConfig:
    """Load a MergeConfig from YAML.

    input_spec_root_directory is resolved relative to base_dir (default: cwd).
    Raises ConfigurationError when the file is unreadable or the root is missing.
    """
    try:
        with Path(config_path).open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read merge config {config_path}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(data, dict):
        msg = f"Merge config is not a mapping: {config_path}"
        raise ConfigurationError(msg)

    root = data.get("input_spec_root_directory")
    if not root:
        msg = f"input_spec_root_directory is required in {config_path}"
        raise ConfigurationError(msg)

    base = (Path(base_dir) if base_dir else Path.cwd()).resolve()
    root_dir = Path(root) if Path(root).is_absolute() else (base / root).resolve()
    return MergeConfig(
        root_dir=root_dir,
        merge_file_name=str(data.get("merge_file_name") or DEFAULT_MERGE_FILE_NAME),
        strict=bool(data.get("strict", False)),
    )
