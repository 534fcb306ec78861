"""Style configuration for round image views.

Supplied once at construction, the equivalent of the widget's style
attributes: a border width in pixels and an ARGB border color.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import OPAQUE_WHITE, parse_color


class RoundImageStyle(BaseModel):
    """Border configuration for a round image view."""

    model_config = ConfigDict(frozen=True)

    border_width: int = Field(
        default=0,
        ge=0,
        description="Ring border width in pixels (0 = no border)",
    )
    border_color: int = Field(
        default=OPAQUE_WHITE,
        description="Ring color as ARGB integer or #RRGGBB / #AARRGGBB string",
        examples=["#FFFFFFFF", "#CD7F32"],
    )

    @field_validator("border_color", mode="before")
    @classmethod
    def _normalize_color(cls, value: int | str) -> int:
        return parse_color(value)
