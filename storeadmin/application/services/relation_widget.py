"""Relation form widget.

Renders a field prepopulated from a belongsTo, hasOne, hasMany or
many-to-many relation as a select list: radio for singular relations,
checkboxes for the others.
"""

import logging
from dataclasses import replace
from typing import Any

from storeadmin.application.dtos.form import (
    NO_SAVE_DATA,
    FormField,
    RelationWidgetConfig,
)
from storeadmin.application.dtos.relation import RelationOptions, RelationResolution
from storeadmin.application.services.relation_resolver import RelationResolver

logger = logging.getLogger(__name__)


class RelationWidget:
    """Relation widget bound to one form field and one owner record."""

    default_alias = "relation"

    def __init__(
        self,
        form_field: FormField,
        model: Any,
        resolver: RelationResolver,
        config: RelationWidgetConfig | None = None,
    ) -> None:
        self.form_field = form_field
        self.model = model
        self.resolver = resolver
        self.config = config or RelationWidgetConfig()
        self.resolution: RelationResolution | None = None
        self.cloned_form_field: FormField | None = None

    @property
    def value_from(self) -> str:
        return self.form_field.value_from or self.form_field.name

    async def resolve_model_attribute(self, attribute: str) -> tuple[Any, str]:
        """Return the final model and attribute name of a nested HTML array attribute.

        relation_from replaces the attribute when the field name is not the
        relation name.
        """
        return await self.resolver.resolve_model_attribute(
            self.model, attribute, self.config.relation_from
        )

    async def load_value(self) -> Any:
        """Return the field value, reading the relation from the model when unset."""
        if self.form_field.value is not None:
            return self.form_field.value
        owner, attribute = await self.resolve_model_attribute(self.value_from)
        if owner is None or not self.resolver.relations.has_relation(owner, attribute):
            return None
        return await self.resolver.relations.load_value(owner, attribute)

    async def make_form_field(self) -> FormField:
        """Return a copy of the form field turned into a populated select list."""
        resolution = await self.resolver.resolve(
            self.model,
            self.value_from,
            RelationOptions(
                relation_from=self.config.relation_from,
                name_from=self.config.name_from,
                sql_select=self.config.sql_select,
                empty_option=self.config.empty_option,
                order=self.config.order,
                scope=self.config.scope,
                value=await self.load_value(),
                placeholder=self.form_field.placeholder,
            ),
        )
        self.resolution = resolution
        self.cloned_form_field = replace(
            self.form_field,
            type="selectlist",
            config={**self.form_field.config, "mode": resolution.mode.widget_mode},
            value=resolution.value,
            options=dict(resolution.option_list.options),
            placeholder=resolution.placeholder,
        )
        return self.cloned_form_field

    def get_save_value(self, value: Any) -> Any:
        """Return the value to save for this field.

        Disabled or hidden fields return NO_SAVE_DATA (left out of the save);
        an empty string or empty list saves as None.
        """
        if self.form_field.disabled or self.form_field.hidden:
            logger.debug("Skipping save of %s field %s", self.default_alias, self.form_field.name)
            return NO_SAVE_DATA
        if isinstance(value, str) and not value:
            return None
        if isinstance(value, (list, tuple)) and not value:
            return None
        return value
