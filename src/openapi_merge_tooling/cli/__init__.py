"""CLI for openapi_merge_tooling (openapi-merge <command> ...)."""
