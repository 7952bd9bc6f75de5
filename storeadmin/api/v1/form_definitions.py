"""Admin form definitions: relation fields per form.

Field configs live on the server only. Raw SQL in ``select`` and ``order``
is trusted configuration and never comes from the request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storeadmin.application.dtos.form import FormField, RelationWidgetConfig
from storeadmin.core.config import get_settings
from storeadmin.domain.exceptions import ResourceNotFoundException
from storeadmin.infrastructure.persistence.models import (
    Category,
    Customer,
    Location,
    Menu,
    Order,
    Staff,
)


@dataclass(frozen=True)
class RelationFieldDefinition:
    """A relation field of an admin form."""

    label: str
    config: dict[str, Any] = field(default_factory=dict)
    placeholder: str | None = None
    disabled: bool = False
    hidden: bool = False

    @property
    def widget_config(self) -> RelationWidgetConfig:
        """Widget config; the label column defaults to settings.relation_default_name_from."""
        defaults = {"nameFrom": get_settings().relation_default_name_from}
        return RelationWidgetConfig.from_config({**defaults, **self.config})

    def make_form_field(self, name: str) -> FormField:
        return FormField(
            name=name,
            label=self.label,
            config=dict(self.config),
            placeholder=self.placeholder,
            disabled=self.disabled,
            hidden=self.hidden,
        )


@dataclass(frozen=True)
class FormDefinition:
    """An admin form: the model it edits and its relation fields."""

    name: str
    model: type
    fields: dict[str, RelationFieldDefinition]

    def get_field(self, name: str) -> RelationFieldDefinition:
        definition = self.fields.get(name)
        if definition is None:
            raise ResourceNotFoundException("field", f"{self.name}.{name}")
        return definition


FORMS: dict[str, FormDefinition] = {
    form.name: form
    for form in (
        FormDefinition(
            name="orders",
            model=Order,
            fields={
                "customer": RelationFieldDefinition(
                    label="Customer",
                    config={
                        "select": "CONCAT(first_name, ' ', last_name)",
                        "scope": "is_enabled",
                        "emptyOption": "Guest",
                    },
                ),
                "location": RelationFieldDefinition(
                    label="Location",
                    config={"nameFrom": "location_name", "scope": "is_enabled"},
                ),
            },
        ),
        FormDefinition(
            name="menus",
            model=Menu,
            fields={
                "categories": RelationFieldDefinition(
                    label="Categories",
                    config={"nameFrom": "name"},
                ),
                "allergens": RelationFieldDefinition(
                    label="Allergens",
                    config={"nameFrom": "name", "scope": "is_enabled", "order": "name asc"},
                ),
                "locations": RelationFieldDefinition(
                    label="Locations",
                    config={"nameFrom": "location_name"},
                ),
            },
        ),
        FormDefinition(
            name="categories",
            model=Category,
            fields={
                "parent": RelationFieldDefinition(
                    label="Parent category",
                    config={
                        "nameFrom": "name",
                        "scope": "excluding_children_of",
                        "emptyOption": "No parent",
                    },
                ),
                "locations": RelationFieldDefinition(
                    label="Locations",
                    config={"nameFrom": "location_name"},
                ),
            },
        ),
        FormDefinition(
            name="customers",
            model=Customer,
            fields={
                "group": RelationFieldDefinition(
                    label="Customer group",
                    config={"nameFrom": "group_name"},
                    placeholder="Select a group",
                ),
                # orders carry no name column; labels fall back to the order id
                "orders": RelationFieldDefinition(
                    label="Orders",
                    config={"order": "order_id desc"},
                ),
            },
        ),
        FormDefinition(
            name="staff",
            model=Staff,
            fields={
                "groups": RelationFieldDefinition(
                    label="Staff groups",
                    config={"nameFrom": "staff_group_name"},
                ),
                "locations": RelationFieldDefinition(
                    label="Locations",
                    config={"nameFrom": "location_name"},
                ),
                "user": RelationFieldDefinition(
                    label="User account",
                    config={"nameFrom": "username"},
                ),
            },
        ),
        FormDefinition(
            name="locations",
            model=Location,
            fields={
                "menus": RelationFieldDefinition(
                    label="Menus",
                    config={"nameFrom": "menu_name"},
                ),
                # assigned from the staff form
                "staffs": RelationFieldDefinition(
                    label="Staff",
                    config={"nameFrom": "staff_name"},
                    disabled=True,
                ),
            },
        ),
    )
}


def get_form(name: str) -> FormDefinition:
    """Return the form definition named `name` or raise ResourceNotFoundException."""
    form = FORMS.get(name)
    if form is None:
        raise ResourceNotFoundException("form", name)
    return form
