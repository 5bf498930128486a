"""
Accessor component models.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TypographyOptions(BaseModel):
    """Per-call overrides for a typography variant."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    weight: str | None = None
    size: int | float | None = None
    color: str | None = None
    italic: bool = False


class TextStyle(BaseModel):
    """
    Flattened typography record ready for a text component.

    Attribute names are snake_case; `as_style()` gives the camelCase style
    dict that presentational code consumes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    font_family: str
    font_size: int | float
    font_weight: str
    letter_spacing: int | float
    line_height: int | float
    color: str
    font_style: Literal["normal", "italic"]

    def as_style(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
