"""Serialize and write the merged spec to <root>/<merge_file_name>.(json|yaml)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from openapi_merge_tooling.merge.errors import WriteError

log = logging.getLogger(__name__)

OUTPUT_EXTENSIONS = ("json", "yaml")


def merged_file_path(root_dir: Path, merge_file_name: str, is_json: bool) -> Path:
    ext = "json" if is_json else "yaml"
    return Path(root_dir) / f"{merge_file_name}.{ext}"


def remove_previous_output(
    root_dir: Path, merge_file_name: str, logger: logging.Logger | None = None
) -> None:
    """Best-effort delete of a merged spec from an earlier run, at either extension.

    A missing file is not an error. Any other OSError is logged and ignored.
    """
    logger = logger or log
    for ext in OUTPUT_EXTENSIONS:
        stale = Path(root_dir) / f"{merge_file_name}.{ext}"
        try:
            stale.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning("Could not remove previous merged spec %s: %s", stale, e)
        else:
            logger.debug("Removed previous merged spec %s", stale)


def serialize_document(document: dict[str, Any], is_json: bool) -> str:
    if is_json:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    return yaml.dump(
        document,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=120,
    )


def write_merged_spec(
    document: dict[str, Any], root_dir: Path, merge_file_name: str, is_json: bool
) -> Path:
    """Write document and return the resolved output path. Raises WriteError on failure."""
    out = merged_file_path(root_dir, merge_file_name, is_json)
    try:
        text = serialize_document(document, is_json)
        out.write_text(text, encoding="utf-8")
    except (TypeError, ValueError, yaml.YAMLError) as e:
        msg = f"Failed to serialize merged spec: {e}"
        raise WriteError(msg) from e
    except OSError as e:
        msg = f"Failed to write merged spec {out}: {e}"
        raise WriteError(msg) from e
    return out.resolve()
