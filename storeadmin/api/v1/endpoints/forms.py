"""Admin forms API: relation field options and save values."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from storeadmin.api.v1.dependencies import get_relation_resolver
from storeadmin.api.v1.form_definitions import get_form
from storeadmin.application.dtos.form import NO_SAVE_DATA
from storeadmin.application.services.relation_resolver import RelationResolver
from storeadmin.application.services.relation_widget import RelationWidget
from storeadmin.domain.exceptions import ResourceNotFoundException
from storeadmin.schemas.form import (
    OptionItem,
    RelationOptionsResponse,
    SaveValueRequest,
    SaveValueResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{form}/fields/{field}/options",
    response_model=RelationOptionsResponse,
)
async def get_field_options(
    form: str,
    field: str,
    resolver: Annotated[RelationResolver, Depends(get_relation_resolver)],
    record_id: Annotated[int | None, Query(ge=1)] = None,
) -> RelationOptionsResponse:
    """Return the options, mode and current value of a relation field.

    Without record_id the field is rendered for a new record.
    """
    definition = get_form(form)
    field_definition = definition.get_field(field)

    if record_id is None:
        record = definition.model()
    else:
        record = await resolver.relations.get_record(definition.model, record_id)
        if record is None:
            raise ResourceNotFoundException(form, str(record_id))

    widget = RelationWidget(
        field_definition.make_form_field(field),
        record,
        resolver,
        field_definition.widget_config,
    )
    form_field = await widget.make_form_field()
    return RelationOptionsResponse(
        field=field,
        label=form_field.label,
        mode=widget.resolution.mode.value,
        widget_mode=form_field.config["mode"],
        options=[
            OptionItem(value=key, label=label)
            for key, label in form_field.options.items()
        ],
        value=form_field.value,
        placeholder=form_field.placeholder,
    )


@router.post(
    "/{form}/fields/{field}/save-value",
    response_model=SaveValueResponse,
)
async def get_field_save_value(
    form: str,
    field: str,
    body: SaveValueRequest,
    resolver: Annotated[RelationResolver, Depends(get_relation_resolver)],
) -> SaveValueResponse:
    """Return the value the form would save for this field."""
    definition = get_form(form)
    field_definition = definition.get_field(field)
    widget = RelationWidget(
        field_definition.make_form_field(field),
        definition.model(),
        resolver,
        field_definition.widget_config,
    )
    value = widget.get_save_value(body.value)
    if value is NO_SAVE_DATA:
        logger.debug("Field %s.%s is not saved", form, field)
        return SaveValueResponse(save=False)
    return SaveValueResponse(save=True, value=value)
