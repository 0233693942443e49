"""Fixed envelope (openapi, info, servers) for the merged spec."""

from __future__ import annotations

from typing import Any

MERGED_INFO = {"title": "merged spec", "description": "merged spec", "version": "1.0.0"}
MERGED_SERVER_URL = "http://localhost:8080"


def generate_header(openapi_version: str | None) -> dict[str, Any]:
    """Header of the merged spec; only the openapi version comes from the inputs."""
    return {
        "openapi": openapi_version,
        "info": dict(MERGED_INFO),
        "servers": [{"url": MERGED_SERVER_URL}],
    }
