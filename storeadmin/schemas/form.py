"""Admin form relation field API schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class OptionItem(BaseModel):
    """One selectable option of a relation field."""

    value: Any = Field(..., description="Primary key of the related record")
    label: Any = Field(None, description="Display label")


class RelationOptionsResponse(BaseModel):
    """Response for GET /forms/{form}/fields/{field}/options."""

    field: str
    label: str | None = None
    mode: Literal["single", "multiple"] = Field(
        ..., description="single for belongsTo/hasOne, multiple otherwise"
    )
    widget_mode: Literal["radio", "checkbox"]
    options: list[OptionItem] = Field(default_factory=list)
    value: Any = Field(None, description="Currently selected key(s)")
    placeholder: str | None = None


class SaveValueRequest(BaseModel):
    """Request body for POST /forms/{form}/fields/{field}/save-value."""

    value: Any = None


class SaveValueResponse(BaseModel):
    """Normalized save value; save is False when the field must not be saved."""

    save: bool
    value: Any = None
