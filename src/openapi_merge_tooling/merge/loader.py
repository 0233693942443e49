"""Load one spec file into a SourceSpec: parse, resolve in-file $refs, extract paths and schemes."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from openapi_merge_tooling.helpers import load_spec_document, pointer_get, split_pointer
from openapi_merge_tooling.merge.errors import SpecParseError
from openapi_merge_tooling.merge.models import SECURITY_SCHEME_TYPES, SecurityScheme, SourceSpec

log = logging.getLogger(__name__)


def resolve_internal_refs(document: Any) -> Any:
    """Return a copy of document with every '#/...' $ref replaced by its target.

    Refs to other files are kept. A ref that points back into its own chain of
    expansion (recursive schemas) and a ref whose target does not exist are both
    left as the original {"$ref": ...} object. A container that contains itself
    (YAML anchor cycles) is kept as the original object at the point it repeats.
    Containers shared through YAML aliases are resolved once per ref chain.
    """
    resolved: dict[tuple[int, tuple[str, ...]], Any] = {}
    active: set[int] = set()

    def resolve(node: Any, chain: tuple[str, ...]) -> Any:
        if not isinstance(node, (dict, list)):
            return node
        key = (id(node), chain)
        if key in resolved:
            return resolved[key]
        if id(node) in active:
            return node
        active.add(id(node))
        try:
            out = _resolve_container(node, chain)
        finally:
            active.discard(id(node))
        resolved[key] = out
        return out

    def _resolve_container(node: Any, chain: tuple[str, ...]) -> Any:
        if isinstance(node, list):
            return [resolve(it, chain) for it in node]
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#"):
            if ref in chain:
                return dict(node)
            try:
                target = pointer_get(document, split_pointer(ref[1:]))
            except (KeyError, ValueError):
                log.debug("Unresolvable reference %s left in place", ref)
                return dict(node)
            return resolve(target, (*chain, ref))
        return {k: resolve(v, chain) for k, v in node.items()}

    return resolve(document, ())


def _extract_security_schemes(
    relative_path: str, spec: dict[str, Any]
) -> dict[str, SecurityScheme] | None:
    components = spec.get("components")
    if components is None:
        return None
    if not isinstance(components, dict):
        raise SpecParseError(relative_path, "components is not a mapping")
    raw = components.get("securitySchemes")
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise SpecParseError(relative_path, "components.securitySchemes is not a mapping")

    schemes: dict[str, SecurityScheme] = {}
    for name, definition in raw.items():
        if not isinstance(definition, dict):
            raise SpecParseError(relative_path, f"security scheme {name!r} is not a mapping")
        kind = definition.get("type")
        if kind not in SECURITY_SCHEME_TYPES:
            msg = f"security scheme {name!r} has unsupported type {kind!r}"
            raise SpecParseError(relative_path, msg)
        schemes[str(name)] = SecurityScheme.from_definition(definition)
    return schemes


def load_source_spec(root_dir: Path, relative_path: str) -> SourceSpec:
    """Parse root_dir/relative_path and extract version, path keys and security schemes.

    Raises SpecParseError for unreadable files, malformed JSON/YAML, and documents
    without an openapi version string or a paths mapping.
    """
    spec_path = Path(root_dir) / relative_path
    try:
        raw = load_spec_document(spec_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise SpecParseError(relative_path, str(e)) from e
    except RecursionError as e:
        raise SpecParseError(relative_path, "document is nested too deeply") from e

    if not isinstance(raw, dict):
        raise SpecParseError(relative_path, "document is not a mapping")
    try:
        spec = resolve_internal_refs(raw)
    except RecursionError as e:
        raise SpecParseError(relative_path, "references are nested too deeply") from e

    version = spec.get("openapi")
    if not isinstance(version, str):
        raise SpecParseError(relative_path, "missing openapi version string")

    paths = spec.get("paths")
    if not isinstance(paths, dict):
        raise SpecParseError(relative_path, "missing paths mapping")

    return SourceSpec(
        relative_path=relative_path,
        version=version,
        paths=tuple(str(p) for p in paths),
        security_schemes=_extract_security_schemes(relative_path, spec),
    )
