"""Merged spec builder: one $ref-based OpenAPI spec from a directory of specs."""

from openapi_merge_tooling.merge.builder import MergedSpecBuilder, build_merged_spec
from openapi_merge_tooling.merge.config import MergeConfig, load_merge_config
from openapi_merge_tooling.merge.discovery import discover_spec_files
from openapi_merge_tooling.merge.engine import build_path_ref, escape_path_key, merge_specs
from openapi_merge_tooling.merge.errors import (
    CollisionError,
    ConfigurationError,
    DiscoveryError,
    MergeError,
    SpecParseError,
    WriteError,
)
from openapi_merge_tooling.merge.header import generate_header
from openapi_merge_tooling.merge.loader import load_source_spec, resolve_internal_refs
from openapi_merge_tooling.merge.models import ResolvedFormat, SecurityScheme, SourceSpec
from openapi_merge_tooling.merge.writer import (
    merged_file_path,
    remove_previous_output,
    write_merged_spec,
)

__all__ = [
    "CollisionError",
    "ConfigurationError",
    "DiscoveryError",
    "MergeConfig",
    "MergeError",
    "MergedSpecBuilder",
    "ResolvedFormat",
    "SecurityScheme",
    "SourceSpec",
    "SpecParseError",
    "WriteError",
    "build_merged_spec",
    "build_path_ref",
    "discover_spec_files",
    "escape_path_key",
    "generate_header",
    "load_merge_config",
    "load_source_spec",
    "merge_specs",
    "merged_file_path",
    "remove_previous_output",
    "resolve_internal_refs",
    "write_merged_spec",
]
