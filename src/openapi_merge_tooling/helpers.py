"""Shared helpers for openapi_merge_tooling (spec load, JSON Pointer, path).

Used by merge and cli.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

# --- Spec / file ---


def is_json_path(p: str | Path) -> bool:
    """True when the file name ends in .json (case-insensitive)."""
    return str(p).lower().endswith(".json")


def load_spec_document(p: Path) -> Any:
    """Load a JSON or YAML spec from path; flavour picked by extension."""
    text = p.read_text(encoding="utf-8-sig")
    if is_json_path(p):
        return json.loads(text)
    return yaml.safe_load(text)


# --- JSON Pointer ---


def decode_pointer_token(token: str) -> str:
    """RFC 6901 token decoding (~1 -> /, then ~0 -> ~)."""
    return token.replace("~1", "/").replace("~0", "~")


def split_pointer(pointer: str) -> list[str]:
    """Split a '/a/b' fragment into decoded tokens. '' is the whole document."""
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        msg = f"Unsupported JSON pointer {pointer!r} (expected '' or '/...')"
        raise ValueError(msg)
    return [decode_pointer_token(t) for t in pointer[1:].split("/")]


def pointer_get(doc: Any, tokens: list[str]) -> Any:
    """Walk decoded pointer tokens through dicts and lists. Raises KeyError if absent."""
    cur = doc
    for token in tokens:
        if isinstance(cur, dict):
            if token not in cur:
                raise KeyError(token)
            cur = cur[token]
        elif isinstance(cur, list):
            try:
                cur = cur[int(token)]
            except (ValueError, IndexError) as e:
                raise KeyError(token) from e
        else:
            raise KeyError(token)
    return cur


# --- Path ---


def relative_posix(path: Path, root: Path) -> str:
    """path relative to root, with '/' separators on every platform."""
    return path.relative_to(root).as_posix()
