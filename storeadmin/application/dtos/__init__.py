"""Application DTOs (no ORM dependency)."""

from storeadmin.application.dtos.form import (
    NO_SAVE_DATA,
    FormField,
    RelationWidgetConfig,
)
from storeadmin.application.dtos.relation import (
    OptionList,
    RelationOptions,
    RelationResolution,
    RelationshipDescriptor,
)

__all__ = [
    "NO_SAVE_DATA",
    "FormField",
    "OptionList",
    "RelationOptions",
    "RelationResolution",
    "RelationWidgetConfig",
    "RelationshipDescriptor",
]
