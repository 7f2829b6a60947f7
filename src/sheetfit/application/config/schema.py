"""Pydantic models for packing job files.

A job file names the stock sheet and the items to cut from it:

    {
      "schema_version": "1.0",
      "sheet": {"width": 200, "height": 100},
      "items": [
        {"id": 1, "label": "Caja A", "width": 30, "height": 20, "quantity": 5}
      ]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SheetConfig(BaseModel):
    """Stock sheet dimensions."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet width")
    height: float = Field(..., gt=0, allow_inf_nan=False, description="Sheet height")


class ItemConfig(BaseModel):
    """One requested item.

    Attributes:
        id: Identity echoed back in results.
        label: Display label; defaults to "Item <id>".
        width: Item width, same unit as the sheet.
        height: Item height, same unit as the sheet.
        quantity: Units to cut (0 skips the item).
        color: Optional hex display color passed through to results.
    """

    model_config = ConfigDict(extra="forbid")

    id: int | str
    label: str | None = None
    width: float = Field(..., gt=0, allow_inf_nan=False)
    height: float = Field(..., gt=0, allow_inf_nan=False)
    quantity: int = Field(default=1, ge=0)
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")

    @property
    def display_label(self) -> str:
        return self.label or f"Item {self.id}"


class PackingJobConfiguration(BaseModel):
    """Root model of a packing job file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    sheet: SheetConfig
    items: list[ItemConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_item_ids(self) -> "PackingJobConfiguration":
        seen: set[str] = set()
        for item in self.items:
            key = str(item.id)
            if key in seen:
                raise ValueError(f"Duplicate item id: {item.id}")
            seen.add(key)
        return self
