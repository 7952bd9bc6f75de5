"""DTOs for relation fields: relationship metadata, resolver options and results.

No dependency on the ORM: model types and pivot tables are carried as opaque
values produced by the persistence layer.
"""

from dataclasses import dataclass, field
from typing import Any

from storeadmin.domain.enums import RelationType, SelectionMode


@dataclass(frozen=True)
class RelationshipDescriptor:
    """Metadata of one named relationship on a model.

    secondary and secondary_join are set for many-to-many kinds only:
    the pivot table and the condition joining it to the target table.
    """

    name: str
    kind: RelationType
    owner: type
    target: type
    key_name: str
    secondary: Any = None
    secondary_join: Any = None


@dataclass(frozen=True)
class RelationOptions:
    """Options of one relation resolve call (usually from a form field config).

    Attributes:
        relation_from: Relation name when the field name is not the relation name.
        name_from: Target column used as option label.
        sql_select: Raw SQL expression used as label; overrides name_from.
        empty_option: Placeholder label used when the field has none.
        order: Raw ORDER BY expression; overrides the target's sorted scope.
        scope: Name of a registered scope applied with the owner as argument.
        value: Current raw field value to normalize into selected key(s).
        placeholder: Placeholder already set on the field.
    """

    relation_from: str | None = None
    name_from: str = "name"
    sql_select: str | None = None
    empty_option: str | None = None
    order: str | None = None
    scope: str | None = None
    value: Any = None
    placeholder: str | None = None


@dataclass(frozen=True)
class OptionList:
    """Ordered key -> label mapping for a selection control, plus placeholder."""

    options: dict[Any, Any] = field(default_factory=dict)
    placeholder: str | None = None

    def __len__(self) -> int:
        return len(self.options)

    def __contains__(self, key: object) -> bool:
        return key in self.options

    def keys(self) -> list[Any]:
        return list(self.options)


@dataclass(frozen=True)
class RelationResolution:
    """Result of resolving a relation field (what the form layer renders)."""

    mode: SelectionMode
    option_list: OptionList
    value: Any
    relation: RelationshipDescriptor

    @property
    def placeholder(self) -> str | None:
        return self.option_list.placeholder
