"""Main CLI entry point for openapi-merge tooling."""

import sys

from openapi_merge_tooling.cli import merge_cmd


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: openapi-merge <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  merge                 - Merge a directory of OpenAPI specs into one $ref-based spec",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "merge":
        merge_cmd.run_merge_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
