"""Records passed between loader, engine and writer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from openapi_merge_tooling.helpers import is_json_path

# Security scheme kinds accepted by OpenAPI 3.x.
SECURITY_SCHEME_TYPES = frozenset({"apiKey", "http", "oauth2", "openIdConnect", "mutualTLS"})


@dataclass(frozen=True)
class SecurityScheme:
    """A security scheme reduced to the two fields carried into the merged spec."""

    type: str
    scheme: str | None = None

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> SecurityScheme:
        scheme = definition.get("scheme")
        return cls(type=str(definition["type"]), scheme=str(scheme) if scheme is not None else None)

    def to_dict(self) -> dict[str, str]:
        out = {"type": self.type}
        if self.scheme is not None:
            out["scheme"] = self.scheme
        return out


@dataclass(frozen=True)
class SourceSpec:
    """One successfully loaded spec file.

    relative_path is both the lookup key under the root and the prefix of every
    $ref built from this spec.
    """

    relative_path: str
    version: str
    paths: tuple[str, ...]
    security_schemes: dict[str, SecurityScheme] | None = field(default=None)


@dataclass(frozen=True)
class ResolvedFormat:
    """Version and output flavour, fixed by the first spec that loads."""

    version: str | None
    is_json: bool

    @classmethod
    def from_source(cls, spec: SourceSpec) -> ResolvedFormat:
        return cls(version=spec.version, is_json=is_json_path(spec.relative_path))

    @property
    def extension(self) -> str:
        return "json" if self.is_json else "yaml"


# Used when no spec loads at all: no version, YAML output.
UNRESOLVED_FORMAT = ResolvedFormat(version=None, is_json=False)
