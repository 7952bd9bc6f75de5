"""Relation resolver: turns a relation field into a selection mode and option list.

Given an owner record and a relationship attribute, builds an unconstrained
query over the related model (every candidate, not only linked records),
narrows it by location, ordering, self-exclusion and an optional scope, and
plucks key -> label options from one SELECT. The field's current value is
normalized to related key(s).
"""

import logging
from typing import Any

from storeadmin.application.dtos.relation import (
    OptionList,
    RelationOptions,
    RelationResolution,
    RelationshipDescriptor,
)
from storeadmin.application.interfaces.repositories import (
    IRelationQuery,
    IRelationRepository,
)
from storeadmin.application.interfaces.services import ILocationContext
from storeadmin.domain.exceptions import RelationNotFoundException
from storeadmin.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

# Virtual column holding the label when options come from a raw SQL select.
SELECTION_COLUMN = "selection"

SORTED_SCOPE = "sorted"


class RelationResolver:
    """Resolve relation fields of admin forms (single resolve call per field render)."""

    def __init__(
        self,
        relations: IRelationRepository,
        location: ILocationContext | None = None,
    ) -> None:
        self.relations = relations
        self.location = location

    async def resolve_model_attribute(
        self, model: Any, attribute: str, relation_from: str | None = None
    ) -> tuple[Any, str]:
        """Return the owner record and relation name for a (possibly nested) field name."""
        return await self.relations.resolve_model_attribute(model, relation_from or attribute)

    @traced("relation.resolve")
    async def resolve(
        self,
        model: Any,
        attribute: str,
        options: RelationOptions | None = None,
    ) -> RelationResolution:
        """Resolve the relation field `attribute` of `model`.

        Args:
            model: Owner record (new or persisted).
            attribute: Field name; may be a nested HTML array name (customer[group]).
            options: Label, ordering, scope and value options.

        Returns:
            RelationResolution with selection mode, options, normalized value.

        Raises:
            RelationNotFoundException: attribute is not a relationship of the resolved model.
            ScopeNotFoundException: options.scope is not registered on the related model.
        """
        options = options or RelationOptions()
        owner, name = await self.resolve_model_attribute(model, attribute, options.relation_from)
        if owner is None or not self.relations.has_relation(owner, name):
            raise RelationNotFoundException(type(model).__name__, options.relation_from or attribute)

        relation = self.relations.get_relation(owner, name)
        query = self.relations.new_query(relation)
        if self.location is not None:
            query = self.location.apply_scope(query)

        mode = relation.kind.selection_mode

        if options.order:
            query.order_by_raw(options.order)
        elif self.relations.has_scope(relation.target, SORTED_SCOPE):
            query.apply_scope(SORTED_SCOPE)

        value = self.normalize_value(options.value)

        # A record of the same class as the related model cannot be related to itself.
        if type(owner) is relation.target and self.relations.is_persisted(owner):
            query.where(relation.key_name, "<>", self.relations.record_key(owner))

        # Many-to-many traversal joins the pivot table; keeping it would
        # duplicate rows and drop records without pivot rows.
        query.strip_joins()

        if options.scope:
            query.apply_scope(options.scope, owner)

        option_list = OptionList(
            options=await self._fetch_options(query, relation, options),
            placeholder=options.placeholder or options.empty_option,
        )
        add_span_attributes(
            **{"relation.name": name, "relation.kind": relation.kind.value, "relation.options": len(option_list)}
        )
        logger.debug(
            "Resolved relation %s.%s (%s): %d options",
            type(owner).__name__,
            name,
            relation.kind.value,
            len(option_list),
        )
        return RelationResolution(
            mode=mode,
            option_list=option_list,
            value=value,
            relation=relation,
        )

    def normalize_value(self, value: Any) -> Any:
        """Normalize a raw field value into selected key(s).

        Empty string and empty collections become None; records (or
        collections of records) become their keys; anything else is unchanged.
        """
        if isinstance(value, str) and not value:
            return None
        if self.relations.is_record(value):
            return self.relations.record_key(value)
        if isinstance(value, (list, tuple, set, dict)):
            if not value:
                return None
            if isinstance(value, (list, tuple)) and any(
                self.relations.is_record(item) for item in value
            ):
                return [
                    self.relations.record_key(item) if self.relations.is_record(item) else item
                    for item in value
                ]
        return value

    async def _fetch_options(
        self,
        query: IRelationQuery,
        relation: RelationshipDescriptor,
        options: RelationOptions,
    ) -> dict[Any, Any]:
        """Run the option query and pluck key -> label.

        sql_select takes precedence over name_from: its result is read from the
        virtual "selection" column. Rows without the label column fall back to
        the primary key as label.
        """
        key = relation.key_name
        if options.sql_select:
            label = SELECTION_COLUMN
            query.select(key, query.select_raw(options.sql_select, SELECTION_COLUMN))
        else:
            label = options.name_from
        rows = await self.relations.fetch_rows(query)
        return {row[key]: (row[label] if label in row else row[key]) for row in rows}
