"""Domain enumerations for the store admin.

Enums represent fixed sets of domain values (relation kinds, selection modes).
"""

from enum import Enum


class RelationType(str, Enum):
    """Kind of association between two record types.

    Values keep the names admin form definitions and API clients use.
    """

    BELONGS_TO = "belongsTo"
    HAS_ONE = "hasOne"
    HAS_MANY = "hasMany"
    BELONGS_TO_MANY = "belongsToMany"
    MORPH_TO_MANY = "morphToMany"
    MORPHED_BY_MANY = "morphedByMany"

    @property
    def is_many_to_many(self) -> bool:
        """Return True for kinds resolved through a pivot table."""
        return self in _MANY_TO_MANY

    @property
    def selection_mode(self) -> "SelectionMode":
        """Return how many related records a field for this kind can select."""
        if self in (RelationType.BELONGS_TO, RelationType.HAS_ONE):
            return SelectionMode.SINGLE
        return SelectionMode.MULTIPLE

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid relation type values as strings."""
        return [kind.value for kind in cls]


_MANY_TO_MANY = frozenset(
    {
        RelationType.BELONGS_TO_MANY,
        RelationType.MORPH_TO_MANY,
        RelationType.MORPHED_BY_MANY,
    }
)


class SelectionMode(str, Enum):
    """Selection control mode for a relation field.

    SINGLE renders as a radio list (empty selection allowed), MULTIPLE as checkboxes.
    """

    SINGLE = "single"
    MULTIPLE = "multiple"

    @property
    def widget_mode(self) -> str:
        """Return the select list widget mode ('radio' or 'checkbox')."""
        return "radio" if self is SelectionMode.SINGLE else "checkbox"
