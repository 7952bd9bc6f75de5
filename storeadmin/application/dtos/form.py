"""DTOs for admin form fields and the relation widget configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final


class _NoSaveData:
    """Marker returned by widgets when a field must be left out of the save payload."""

    def __repr__(self) -> str:
        return "NO_SAVE_DATA"

    def __bool__(self) -> bool:
        return False


NO_SAVE_DATA: Final = _NoSaveData()


@dataclass
class FormField:
    """One field of an admin form, as rendered by the form layer.

    value_from names the model attribute the value is read from when it
    differs from name.
    """

    name: str
    label: str | None = None
    type: str = "relation"
    config: dict[str, Any] = field(default_factory=dict)
    value: Any = None
    options: dict[Any, Any] = field(default_factory=dict)
    placeholder: str | None = None
    disabled: bool = False
    hidden: bool = False
    value_from: str | None = None


@dataclass(frozen=True)
class RelationWidgetConfig:
    """Configuration of a relation widget (from a form field definition).

    The ``select`` config key maps to sql_select.
    """

    relation_from: str | None = None
    name_from: str = "name"
    sql_select: str | None = None
    empty_option: str | None = None
    scope: str | None = None
    order: str | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RelationWidgetConfig":
        """Build from a raw field config dict (keys: relationFrom/relation_from, nameFrom/name_from, select, ...)."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if config.get(key) is not None:
                    return config[key]
            return None

        return cls(
            relation_from=pick("relation_from", "relationFrom"),
            name_from=pick("name_from", "nameFrom") or "name",
            sql_select=pick("select", "sql_select", "sqlSelect"),
            empty_option=pick("empty_option", "emptyOption"),
            scope=pick("scope"),
            order=pick("order"),
        )
