"""Exceptions raised by the merge pipeline.

Only discovery, configuration, collision and write failures abort a merge;
SpecParseError is recovered per file by the builder.
"""

from __future__ import annotations


class MergeError(Exception):
    """Base class for merge failures."""


class ConfigurationError(MergeError, ValueError):
    """Bad merge setup, e.g. the spec root directory holds no files."""


class DiscoveryError(MergeError, OSError):
    """The spec root directory cannot be walked."""


class SpecParseError(MergeError, ValueError):
    """A single spec file could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class WriteError(MergeError, OSError):
    """The merged spec could not be serialized or written."""


class CollisionError(MergeError, ValueError):
    """Two specs declare the same path key or security scheme name (strict mode only)."""
