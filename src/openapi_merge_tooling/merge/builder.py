"""Orchestrate a merge: clean stale output, discover, load, merge, write."""

from __future__ import annotations

import logging
from pathlib import Path

from openapi_merge_tooling.merge.discovery import discover_spec_files
from openapi_merge_tooling.merge.engine import merge_specs
from openapi_merge_tooling.merge.errors import ConfigurationError, SpecParseError
from openapi_merge_tooling.merge.loader import load_source_spec
from openapi_merge_tooling.merge.models import UNRESOLVED_FORMAT, ResolvedFormat, SourceSpec
from openapi_merge_tooling.merge.writer import remove_previous_output, write_merged_spec

log = logging.getLogger(__name__)


class MergedSpecBuilder:
    """Merge every spec under root_dir into root_dir/<merge_file_name>.(json|yaml).

    The first spec that loads fixes the openapi version and the output flavour
    (JSON when its name ends in .json, YAML otherwise). Specs that fail to load
    are logged and skipped.
    """

    def __init__(
        self,
        root_dir: Path | str,
        merge_file_name: str,
        strict: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.merge_file_name = merge_file_name
        self.strict = strict
        self.logger = logger or log

    def build_merged_spec(self) -> Path:
        """Run the merge and return the path of the written spec.

        Raises:
            DiscoveryError: root_dir cannot be walked.
            ConfigurationError: root_dir holds no files.
            CollisionError: strict mode and a path key or scheme name repeats.
            WriteError: the merged spec cannot be written.
        """
        remove_previous_output(self.root_dir, self.merge_file_name, logger=self.logger)

        spec_paths = discover_spec_files(self.root_dir)
        if not spec_paths:
            msg = f"Spec directory doesn't contain any specification: {self.root_dir}"
            raise ConfigurationError(msg)
        self.logger.info("In spec root directory %s found specs %s", self.root_dir, spec_paths)

        specs, fmt = self._load_specs(spec_paths)

        merged = merge_specs(specs, fmt.version, strict=self.strict, logger=self.logger)
        out = write_merged_spec(merged, self.root_dir, self.merge_file_name, fmt.is_json)
        self.logger.info("Merged %d spec(s) into %s", len(specs), out)
        return out

    def _load_specs(self, spec_paths: list[str]) -> tuple[list[SourceSpec], ResolvedFormat]:
        specs: list[SourceSpec] = []
        fmt: ResolvedFormat | None = None
        for rel in spec_paths:
            spec_path = self.root_dir / rel
            self.logger.info("Reading spec: %s", spec_path)
            try:
                spec = load_source_spec(self.root_dir, rel)
            except SpecParseError as e:
                self.logger.error(
                    "Failed to read file: %s. It would be ignored (%s)", spec_path, e.reason
                )
                continue
            if fmt is None:
                fmt = ResolvedFormat.from_source(spec)
            specs.append(spec)

        if fmt is None:
            self.logger.warning(
                "No spec under %s could be read; merged spec has no paths", self.root_dir
            )
            fmt = UNRESOLVED_FORMAT
        return specs, fmt


def build_merged_spec(root_dir: Path | str, merge_file_name: str, strict: bool = False) -> Path:
    """Shortcut for MergedSpecBuilder(root_dir, merge_file_name, strict).build_merged_spec()."""
    return MergedSpecBuilder(root_dir, merge_file_name, strict=strict).build_merged_spec()
