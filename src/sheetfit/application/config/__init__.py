"""Job file schema and loading.

Public API:
    - PackingJobConfiguration: Root job model
    - SheetConfig: Stock sheet model
    - ItemConfig: Item request model
    - load_config: Load a job from a JSON file
    - load_config_from_dict: Load a job from a dictionary
    - ConfigError: Exception for job file errors
    - config_to_sheet / config_to_items: Convert to domain objects

Example:
    >>> from pathlib import Path
    >>> from sheetfit.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     job = load_config(Path("job.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sheetfit.application.config.adapter import (
    ITEM_PALETTE,
    color_for,
    config_to_items,
    config_to_sheet,
    item_config_to_request,
)
from sheetfit.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetfit.application.config.schema import (
    SUPPORTED_VERSIONS,
    ItemConfig,
    PackingJobConfiguration,
    SheetConfig,
)

__all__ = [
    "ITEM_PALETTE",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ItemConfig",
    "PackingJobConfiguration",
    "SheetConfig",
    "color_for",
    "config_to_items",
    "config_to_sheet",
    "item_config_to_request",
    "load_config",
    "load_config_from_dict",
]
