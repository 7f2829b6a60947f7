"""Unit tests for job file schema, loader and adapter.

These tests verify:
- Valid job files load into domain objects
- Schema errors are collected with JSON paths
- Loader error categories (file_not_found, file_read_error, json_parse, validation)
- Palette colors for integer ids and explicit color pass-through
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from sheetfit.application.config import (
    ConfigError,
    ItemConfig,
    PackingJobConfiguration,
    config_to_items,
    config_to_sheet,
    load_config,
    load_config_from_dict,
)
from sheetfit.application.config.adapter import ITEM_PALETTE, color_for
from sheetfit.application.config.loader import _format_json_path


@pytest.fixture
def job_data() -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "sheet": {"width": 200, "height": 100},
        "items": [
            {"id": 1, "label": "Caja A", "width": 30, "height": 20, "quantity": 5},
            {"id": "lid", "width": 40, "height": 40, "color": "#123abc"},
        ],
    }


class TestSchema:
    def test_valid_job(self, job_data: dict[str, Any]) -> None:
        config = PackingJobConfiguration.model_validate(job_data)
        assert config.sheet.width == 200
        assert config.items[1].quantity == 1

    def test_version_defaults(self) -> None:
        config = PackingJobConfiguration.model_validate(
            {"sheet": {"width": 1, "height": 1}}
        )
        assert config.schema_version == "1.0"
        assert config.items == []

    def test_unsupported_version(self, job_data: dict[str, Any]) -> None:
        job_data["schema_version"] = "2.0"
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            PackingJobConfiguration.model_validate(job_data)

    def test_unknown_field_rejected(self, job_data: dict[str, Any]) -> None:
        job_data["items"][0]["depth"] = 3
        with pytest.raises(PydanticValidationError):
            PackingJobConfiguration.model_validate(job_data)

    def test_duplicate_ids_rejected(self, job_data: dict[str, Any]) -> None:
        job_data["items"][1]["id"] = 1
        with pytest.raises(PydanticValidationError, match="Duplicate item id"):
            PackingJobConfiguration.model_validate(job_data)

    def test_bad_color_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ItemConfig(id=1, width=1, height=1, color="red")

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_item_dimension_rejected(self, value: float) -> None:
        with pytest.raises(PydanticValidationError):
            ItemConfig(id=1, width=value, height=1)

    def test_display_label_default(self) -> None:
        assert ItemConfig(id=4, width=1, height=1).display_label == "Item 4"


class TestLoader:
    def test_load_config(self, tmp_path: Path, job_data: dict[str, Any]) -> None:
        path = tmp_path / "job.json"
        path.write_text(json.dumps(job_data))
        assert len(load_config(path).items) == 2

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_json_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"sheet": ')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(
            b'{"sheet": {"width": 1, "height": 1}, '
            b'"items": [{"id": 1, "label": "Ca\xf1a", "width": 1, "height": 1}]}'
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_read_error"

    def test_infinite_dimension_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "inf.json"
        path.write_text('{"sheet": {"width": Infinity, "height": 10}, "items": []}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "sheet.width"

    def test_validation_details(self, job_data: dict[str, Any]) -> None:
        job_data["sheet"]["width"] = 0
        job_data["items"][0]["quantity"] = -2
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(job_data)

        error = exc_info.value
        assert error.error_type == "validation"
        paths = {d["path"] for d in error.details}
        assert paths == {"sheet.width", "items[0].quantity"}
        assert "sheet.width" in error.message

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("sheet", "width"), "sheet.width"),
            (("items", 2, "quantity"), "items[2].quantity"),
            ((0,), "[0]"),
        ],
    )
    def test_format_json_path(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected


class TestAdapter:
    def test_sheet_and_items(self, job_data: dict[str, Any]) -> None:
        config = load_config_from_dict(job_data)
        sheet = config_to_sheet(config)
        items = config_to_items(config)

        assert (sheet.width, sheet.height) == (200, 100)
        assert [i.id for i in items] == [1, "lid"]
        assert items[0].label == "Caja A"
        assert items[1].label == "Item lid"

    def test_colors(self, job_data: dict[str, Any]) -> None:
        items = config_to_items(load_config_from_dict(job_data))
        assert items[0].color == ITEM_PALETTE[1]
        assert items[1].color == "#123abc"

    def test_palette_cycles(self) -> None:
        assert color_for(9) == color_for(1)
        assert color_for("a") is None
