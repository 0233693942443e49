"""Shared CLI argument parsing for --flag value pairs and boolean switches."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any


def parse_flags(
    argv: list[str],
    *specs: tuple[str, str, Callable[[str], Any] | None],
) -> tuple[dict[str, Any], list[str]]:
    """Pick --flag value pairs out of argv; flags not given map to None.

    Each spec is (key, flag_str, converter), e.g. ("input_dir", "--input-dir", path_resolver).
    A None converter keeps the raw string. Returns (key -> value, unmatched argv).
    """
    converters = {flag: (key, conv) for key, flag, conv in specs}
    result: dict[str, Any] = dict.fromkeys((key for key, _flag, _conv in specs), None)
    rest: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg not in converters:
            rest.append(arg)
            continue
        value = next(args, None)
        if value is None:
            rest.append(arg)
            continue
        key, conv = converters[arg]
        result[key] = conv(value) if conv else value
    return result, rest


def pop_switches(argv: list[str], *switches: str) -> tuple[dict[str, bool], list[str]]:
    """Split boolean switches (e.g. --strict) out of argv. Returns (switch -> present, rest)."""
    present = {s: s in argv for s in switches}
    rest = [a for a in argv if a not in switches]
    return present, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --input-dir, --config)."""
    return Path(s).resolve()
