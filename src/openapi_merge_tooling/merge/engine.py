"""Fold loaded specs into one merged spec of $ref pointers and reduced security schemes.

Each path key becomes {"$ref": "./<relative path>#/paths/<key with / as ~1>"}.
Later specs overwrite earlier ones on the same path key or scheme name unless
strict is set, in which case CollisionError is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from openapi_merge_tooling.merge.errors import CollisionError
from openapi_merge_tooling.merge.header import generate_header
from openapi_merge_tooling.merge.models import SecurityScheme, SourceSpec

log = logging.getLogger(__name__)


def escape_path_key(path: str) -> str:
    """Escape a path key for use as a JSON Pointer token.

    Only '/' is escaped (as ~1). A literal '~' is not turned into ~0, so keys
    containing '~' produce pointers that do not round-trip; existing consumers
    rely on this form.
    """
    return path.replace("/", "~1")


def build_path_ref(relative_path: str, path: str) -> dict[str, str]:
    """{"$ref": "./spec1.yaml#/paths/~1a~1b"} for path /a/b in spec1.yaml."""
    return {"$ref": f"./{relative_path}#/paths/{escape_path_key(path)}"}


def _collision(kind: str, key: str, previous: str, current: str) -> CollisionError:
    msg = f"Duplicate {kind} {key!r}: declared in {previous} and {current}"
    return CollisionError(msg)


def merge_specs(
    specs: Iterable[SourceSpec],
    openapi_version: str | None,
    strict: bool = False,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Build the merged spec from specs in order.

    Returns a dict with openapi, info, servers, paths and, when any spec declares
    security schemes, components.securitySchemes ({type, scheme?} per scheme).
    """
    logger = logger or log
    merged = generate_header(openapi_version)

    all_paths: dict[str, dict[str, str]] = {}
    path_owner: dict[str, str] = {}
    all_schemes: dict[str, SecurityScheme] = {}
    scheme_owner: dict[str, str] = {}

    for spec in specs:
        for path in spec.paths:
            previous = path_owner.get(path)
            if previous is not None:
                if strict:
                    raise _collision("path", path, previous, spec.relative_path)
                logger.debug("Path %s from %s overrides %s", path, spec.relative_path, previous)
            all_paths[path] = build_path_ref(spec.relative_path, path)
            path_owner[path] = spec.relative_path

        if spec.security_schemes is None:
            continue
        for name, scheme in spec.security_schemes.items():
            previous = scheme_owner.get(name)
            if previous is not None:
                if strict:
                    raise _collision("security scheme", name, previous, spec.relative_path)
                logger.debug(
                    "Security scheme %s from %s overrides %s", name, spec.relative_path, previous
                )
            all_schemes[name] = scheme
            scheme_owner[name] = spec.relative_path

    merged["paths"] = dict(sorted(all_paths.items()))
    if all_schemes:
        merged["components"] = {
            "securitySchemes": {
                name: scheme.to_dict() for name, scheme in sorted(all_schemes.items())
            }
        }
    return merged
