"""Tests for source map preparation."""

from __future__ import annotations

import json

import pytest

from tsbridge.errors import ParseError, TsBridgeError
from tsbridge.sourcemap import prepare_source_map

SINGLE = json.dumps({"version": 3, "file": "app.js", "sources": ["app.ts"], "mappings": "AAAA"})
MULTI = json.dumps(
    {
        "version": 3,
        "file": "bundle.js",
        "sources": ["a.ts", "b.ts", "c.ts"],
        "sourcesContent": ["a", "b", "c"],
        "mappings": "AAAA;ACAA",
    }
)


class TestPrepareSourceMap:
    def test_points_at_single_source(self) -> None:
        result = prepare_source_map(SINGLE, "let x = 1;", "/src/app.ts")
        assert result["sources"] == ["/src/app.ts"]
        assert result["sourcesContent"] == ["let x = 1;"]

    def test_collapses_multiple_sources(self) -> None:
        result = prepare_source_map(MULTI, "content", "bundle.ts")
        assert result["sources"] == ["bundle.ts"]
        assert result["sourcesContent"] == ["content"]

    def test_keeps_other_fields(self) -> None:
        result = prepare_source_map(MULTI, "content", "bundle.ts")
        assert result["version"] == 3
        assert result["file"] == "bundle.js"
        assert result["mappings"] == "AAAA;ACAA"

    def test_malformed_json(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            prepare_source_map("{not json", "content", "app.ts")
        assert excinfo.value.source == "app.ts"
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_non_object_json(self) -> None:
        with pytest.raises(ParseError, match="JSON object"):
            prepare_source_map("[1, 2]", "content", "app.ts")

    def test_parse_error_is_library_error(self) -> None:
        with pytest.raises(TsBridgeError):
            prepare_source_map("", "content", "app.ts")
