"""Job file loader with error reporting.

Loads JSON packing job files and turns file system, JSON syntax and
schema problems into a single ConfigError carrying an error category
and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sheetfit.application.config.schema import PackingJobConfiguration


class ConfigError(Exception):
    """Exception raised for job file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the job file (if applicable)
        details: Additional error details (line/column for JSON, field errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("sheet", "width"))
        'sheet.width'
        >>> _format_json_path(("items", 2, "quantity"))
        'items[2].quantity'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details: list[dict[str, Any]] = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]

    lines = ["Configuration validation failed:"]
    for detail in details:
        where = detail["path"] or "(root)"
        value = detail["value"]
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {where}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {where}: {detail['message']}")

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> PackingJobConfiguration:
    """Load and validate a packing job from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )
    except UnicodeDecodeError as e:
        raise ConfigError(
            message=f"Config file is not valid UTF-8: {path} (byte {e.start})",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        return PackingJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path)


def load_config_from_dict(data: dict[str, Any]) -> PackingJobConfiguration:
    """Load and validate a packing job from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return PackingJobConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e)
