from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from sherpify.errors import SchemaError, SchemaValidationError, SchemaVersionError
from sherpify.loader import _is_url, load_sherpadoc


class TestLoadSherpadoc:
    def test_loads_json_file(self, tmp_path: Path, item_sherpadoc_document: dict[str, object]) -> None:
        path = tmp_path / "sherpa.json"
        path.write_text(json.dumps(item_sherpadoc_document), encoding="utf-8")
        document = load_sherpadoc(path)
        assert document.root.name == "Items"
        assert document.root.functions[0].name == "get"

    def test_loads_path_string(self, tmp_path: Path, item_sherpadoc_document: dict[str, object]) -> None:
        path = tmp_path / "sherpa.json"
        path.write_text(json.dumps(item_sherpadoc_document), encoding="utf-8")
        assert load_sherpadoc(str(path)).root.structs[0].name == "Item"

    def test_loads_stream(self, item_sherpadoc_document: dict[str, object]) -> None:
        document = load_sherpadoc(io.StringIO(json.dumps(item_sherpadoc_document)))
        assert document.root.docs == "Items API."

    def test_loads_mapping(self, example_sherpadoc_document: dict[str, object]) -> None:
        document = load_sherpadoc(example_sherpadoc_document)
        assert document.version == "1.2.3"

    @pytest.mark.parametrize(
        "version",
        [
            pytest.param(None, id="missing"),
            pytest.param(0, id="zero"),
            pytest.param(2, id="newer"),
            pytest.param("1", id="string"),
            pytest.param(True, id="bool"),
        ],
    )
    def test_unsupported_version(self, minimal_sherpadoc_document: dict[str, object], version: object) -> None:
        if version is None:
            del minimal_sherpadoc_document["SherpadocVersion"]
        else:
            minimal_sherpadoc_document["SherpadocVersion"] = version
        with pytest.raises(SchemaVersionError) as excinfo:
            load_sherpadoc(minimal_sherpadoc_document)
        assert excinfo.value.found == version
        assert excinfo.value.expected == 1

    def test_version_is_checked_before_shape(self) -> None:
        with pytest.raises(SchemaVersionError):
            load_sherpadoc({"SherpadocVersion": 2, "Structs": "not a list"})

    def test_non_object_document(self) -> None:
        with pytest.raises(SchemaError, match="must be an object"):
            load_sherpadoc(io.StringIO("[]"))

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaError, match="parsing sherpadoc json"):
            load_sherpadoc(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaError, match="missing.json"):
            load_sherpadoc(tmp_path / "missing.json")

    def test_loads_yaml_file(self, tmp_path: Path, item_sherpadoc_document: dict[str, object]) -> None:
        yaml = pytest.importorskip("yaml")
        path = tmp_path / "sherpa.yaml"
        path.write_text(yaml.safe_dump(item_sherpadoc_document), encoding="utf-8")
        document = load_sherpadoc(path)
        assert document.root.structs[0].fields[0].typewords == ("int64s",)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        pytest.importorskip("yaml")
        path = tmp_path / "sherpa.yml"
        path.write_text("Name: [unclosed", encoding="utf-8")
        with pytest.raises(SchemaError, match="parsing sherpadoc yaml"):
            load_sherpadoc(path)

    def test_validation_can_be_skipped(self, item_sherpadoc_document: dict[str, object]) -> None:
        item_sherpadoc_document["Structs"] = []
        with pytest.raises(SchemaValidationError, match="unknown type 'Item'"):
            load_sherpadoc(item_sherpadoc_document)
        document = load_sherpadoc(item_sherpadoc_document, check=False)
        assert document.root.structs == ()


class TestLoadFromURL:
    def test_is_url_detects_http(self) -> None:
        assert _is_url("http://localhost:8080/example/_docs") is True
        assert _is_url("https://example.com/api/_docs") is True
        assert _is_url("./sherpa.json") is False
        assert _is_url("/absolute/sherpa.json") is False
        assert _is_url("sherpa.json") is False

    def test_loads_json_from_url(self, item_sherpadoc_document: dict[str, object]) -> None:
        with patch("sherpify.loader._fetch_url", return_value=json.dumps(item_sherpadoc_document)) as fetch:
            document = load_sherpadoc("https://example.com/items/_docs")
        fetch.assert_called_once_with("https://example.com/items/_docs")
        assert document.root.name == "Items"

    def test_loads_yaml_from_url(self, item_sherpadoc_document: dict[str, object]) -> None:
        yaml = pytest.importorskip("yaml")
        with patch("sherpify.loader._fetch_url", return_value=yaml.safe_dump(item_sherpadoc_document)):
            document = load_sherpadoc("https://example.com/items/sherpa.yaml")
        assert document.root.name == "Items"

    def test_url_fetch_failure_raises_schema_error(self) -> None:
        with patch("sherpify.loader._fetch_url", side_effect=SchemaError("Failed to fetch URL: test")):
            with pytest.raises(SchemaError, match="Failed to fetch URL"):
                load_sherpadoc("https://example.com/items/_docs")

    def test_url_returns_non_object_raises_schema_error(self) -> None:
        with patch("sherpify.loader._fetch_url", return_value='"just a string"'):
            with pytest.raises(SchemaError, match="must be an object"):
                load_sherpadoc("https://example.com/items/_docs")
