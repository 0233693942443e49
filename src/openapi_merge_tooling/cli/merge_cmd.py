"""CLI for merging: openapi-merge merge."""

from __future__ import annotations

import logging
import sys
from typing import Any

from openapi_merge_tooling.cli.parse_common import parse_flags, path_resolver, pop_switches
from openapi_merge_tooling.merge import (
    MergeConfig,
    MergedSpecBuilder,
    MergeError,
    load_merge_config,
)

USAGE = (
    "Usage: openapi-merge merge [--input-dir <path>] [--merge-file-name <name>] "
    "[--config <path>] [--strict] [--verbose]"
)


def _resolve_config(parsed: dict[str, Any], strict: bool) -> MergeConfig:
    """Config file values first, then flags on top. --input-dir is required without --config."""
    if parsed["config"] is not None:
        config = load_merge_config(parsed["config"])
    elif parsed["input_dir"] is not None:
        config = MergeConfig(root_dir=parsed["input_dir"])
    else:
        print("Error: --input-dir <path> or --config <path> is required", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if parsed["input_dir"] is not None:
        config.root_dir = parsed["input_dir"]
    if parsed["merge_file_name"] is not None:
        config.merge_file_name = parsed["merge_file_name"]
    if strict:
        config.strict = True
    return config


def run_merge_argv() -> None:
    """Parse argv for openapi-merge merge and run."""
    # argv: [script, merge, ...] -> skip first 2
    switches, args = pop_switches(sys.argv[2:], "--strict", "--verbose")
    parsed, rest = parse_flags(
        args,
        ("input_dir", "--input-dir", path_resolver),
        ("merge_file_name", "--merge-file-name", None),
        ("config", "--config", path_resolver),
    )
    if rest:
        print(f"Error: Unknown argument: {rest[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if switches["--verbose"] else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(parsed, switches["--strict"])
        out_path = MergedSpecBuilder(
            config.root_dir,
            config.merge_file_name,
            strict=config.strict,
        ).build_merged_spec()
    except (MergeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Merged spec: {out_path}")
