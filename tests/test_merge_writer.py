"""Tests for openapi_merge_tooling.merge.writer."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from openapi_merge_tooling.merge.errors import WriteError
from openapi_merge_tooling.merge.writer import (
    merged_file_path,
    remove_previous_output,
    serialize_document,
    write_merged_spec,
)

DOC = {
    "openapi": "3.0.3",
    "info": {"title": "merged spec"},
    "paths": {"/a": {"$ref": "./a.yaml#/paths/~1a"}},
}


class TestMergedFilePath:
    def test_json(self, spec_root: Path) -> None:
        assert merged_file_path(spec_root, "merged", True) == spec_root / "merged.json"

    def test_yaml(self, spec_root: Path) -> None:
        assert merged_file_path(spec_root, "merged", False) == spec_root / "merged.yaml"


class TestRemovePreviousOutput:
    def test_removes_both_extensions(self, spec_root: Path) -> None:
        (spec_root / "merged.json").write_text("{}")
        (spec_root / "merged.yaml").write_text("{}")
        (spec_root / "other.yaml").write_text("{}")
        remove_previous_output(spec_root, "merged")
        assert sorted(p.name for p in spec_root.iterdir()) == ["other.yaml"]

    def test_missing_files_ignored(self, spec_root: Path) -> None:
        remove_previous_output(spec_root, "merged")
        remove_previous_output(spec_root / "nosuch", "merged")

    def test_other_errors_logged_not_raised(
        self, spec_root: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="openapi_merge_tooling")
        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            remove_previous_output(spec_root, "merged")
        assert "Could not remove previous merged spec" in caplog.text


class TestWriteMergedSpec:
    def test_writes_json(self, spec_root: Path) -> None:
        out = write_merged_spec(DOC, spec_root, "merged", True)
        assert out == (spec_root / "merged.json").resolve()
        assert json.loads(out.read_text()) == DOC

    def test_writes_yaml_in_insertion_order(self, spec_root: Path) -> None:
        out = write_merged_spec(DOC, spec_root, "merged", False)
        assert out.name == "merged.yaml"
        text = out.read_text()
        assert yaml.safe_load(text) == DOC
        assert text.index("openapi") < text.index("info") < text.index("paths")

    def test_missing_dir_raises_write_error(self, tmp_path: Path) -> None:
        with pytest.raises(WriteError):
            write_merged_spec(DOC, tmp_path / "nosuch", "merged", True)

    def test_unserializable_raises_write_error(self, spec_root: Path) -> None:
        with pytest.raises(WriteError):
            write_merged_spec({"x": object()}, spec_root, "merged", True)

    def test_serialize_json_ends_with_newline(self) -> None:
        assert serialize_document(DOC, True).endswith("}\n")
