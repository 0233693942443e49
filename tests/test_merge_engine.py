"""Tests for openapi_merge_tooling.merge.engine and header."""

import logging

import pytest

from openapi_merge_tooling.merge.engine import build_path_ref, escape_path_key, merge_specs
from openapi_merge_tooling.merge.errors import CollisionError
from openapi_merge_tooling.merge.header import generate_header
from openapi_merge_tooling.merge.models import SecurityScheme, SourceSpec


def _spec(rel: str, *paths: str, schemes: dict | None = None) -> SourceSpec:
    return SourceSpec(relative_path=rel, version="3.0.3", paths=paths, security_schemes=schemes)


class TestPathRefs:
    def test_escape_slashes(self) -> None:
        assert escape_path_key("/users/{id}") == "~1users~1{id}"

    def test_tilde_not_escaped(self) -> None:
        assert escape_path_key("/a~b") == "~1a~b"

    def test_build_path_ref(self) -> None:
        assert build_path_ref("spec1.yaml", "/a/b") == {"$ref": "./spec1.yaml#/paths/~1a~1b"}

    def test_build_path_ref_nested_file(self) -> None:
        ref = build_path_ref("v1/users.json", "/users")
        assert ref == {"$ref": "./v1/users.json#/paths/~1users"}


class TestGenerateHeader:
    def test_header_constants(self) -> None:
        header = generate_header("3.0.3")
        assert header == {
            "openapi": "3.0.3",
            "info": {"title": "merged spec", "description": "merged spec", "version": "1.0.0"},
            "servers": [{"url": "http://localhost:8080"}],
        }

    def test_header_info_not_shared(self) -> None:
        generate_header("3.0.3")["info"]["title"] = "changed"
        assert generate_header("3.0.3")["info"]["title"] == "merged spec"


class TestMergeSpecs:
    def test_disjoint_paths_union(self) -> None:
        merged = merge_specs([_spec("a.yaml", "/a", "/a/b"), _spec("b.yaml", "/b")], "3.0.3")
        assert merged["openapi"] == "3.0.3"
        assert merged["paths"] == {
            "/a": {"$ref": "./a.yaml#/paths/~1a"},
            "/a/b": {"$ref": "./a.yaml#/paths/~1a~1b"},
            "/b": {"$ref": "./b.yaml#/paths/~1b"},
        }
        assert "components" not in merged

    def test_path_collision_last_wins(self) -> None:
        merged = merge_specs([_spec("a.yaml", "/x"), _spec("b.yaml", "/x")], "3.0.3")
        assert merged["paths"] == {"/x": {"$ref": "./b.yaml#/paths/~1x"}}

    def test_path_collision_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="openapi_merge_tooling")
        merge_specs([_spec("a.yaml", "/x"), _spec("b.yaml", "/x")], "3.0.3")
        assert "/x" in caplog.text and "b.yaml" in caplog.text

    def test_security_schemes_reduced_and_last_wins(self) -> None:
        merged = merge_specs(
            [
                _spec("a.yaml", "/a", schemes={"auth": SecurityScheme("http", "basic")}),
                _spec("b.yaml", "/b"),
                _spec(
                    "c.yaml",
                    "/c",
                    schemes={
                        "auth": SecurityScheme("http", "bearer"),
                        "key": SecurityScheme("apiKey"),
                    },
                ),
            ],
            "3.0.3",
        )
        assert merged["components"] == {
            "securitySchemes": {
                "auth": {"type": "http", "scheme": "bearer"},
                "key": {"type": "apiKey"},
            }
        }

    def test_no_specs(self) -> None:
        merged = merge_specs([], None)
        assert merged["openapi"] is None
        assert merged["paths"] == {}
        assert "components" not in merged

    def test_strict_path_collision_raises(self) -> None:
        with pytest.raises(CollisionError) as exc_info:
            merge_specs([_spec("a.yaml", "/x"), _spec("b.yaml", "/x")], "3.0.3", strict=True)
        msg = str(exc_info.value)
        assert "/x" in msg and "a.yaml" in msg and "b.yaml" in msg

    def test_strict_scheme_collision_raises(self) -> None:
        specs = [
            _spec("a.yaml", "/a", schemes={"auth": SecurityScheme("http", "basic")}),
            _spec("b.yaml", "/b", schemes={"auth": SecurityScheme("http", "bearer")}),
        ]
        with pytest.raises(CollisionError) as exc_info:
            merge_specs(specs, "3.0.3", strict=True)
        assert "security scheme 'auth'" in str(exc_info.value)

    def test_strict_without_collisions(self) -> None:
        merged = merge_specs([_spec("a.yaml", "/a"), _spec("b.yaml", "/b")], "3.0.3", strict=True)
        assert set(merged["paths"]) == {"/a", "/b"}
