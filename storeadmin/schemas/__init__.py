"""API request/response schemas (pydantic)."""

from storeadmin.schemas.form import (
    OptionItem,
    RelationOptionsResponse,
    SaveValueRequest,
    SaveValueResponse,
)
from storeadmin.schemas.health import HealthResponse

__all__ = [
    "HealthResponse",
    "OptionItem",
    "RelationOptionsResponse",
    "SaveValueRequest",
    "SaveValueResponse",
]
