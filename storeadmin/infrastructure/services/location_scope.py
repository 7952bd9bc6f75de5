"""AdminLocation: location (tenant) scoping for relation queries.

When the admin works inside one location (location context set by
LocationContextMiddleware), option lists only offer records of that
location: the Location model is pinned to the current location, and
locationable models keep records attached to it or to no location at all.
"""

import logging

from storeadmin.core.location_context import get_location_id
from storeadmin.infrastructure.persistence.models.location import Location
from storeadmin.infrastructure.persistence.models.mixins import Locationable
from storeadmin.infrastructure.persistence.relation_query import RelationQuery
from storeadmin.shared.telemetry.tracing import add_span_event

logger = logging.getLogger(__name__)


class AdminLocation:
    """ILocationContext implementation backed by the request's location context."""

    def is_active(self) -> bool:
        return get_location_id() is not None

    def current_location_id(self) -> int | None:
        return get_location_id()

    def is_location_type(self, model: type) -> bool:
        return isinstance(model, type) and issubclass(model, Location)

    def supports_location_scoping(self, model: type) -> bool:
        return isinstance(model, type) and issubclass(model, Locationable)

    def apply_scope(self, query: RelationQuery) -> RelationQuery:
        """Apply location scoping to query; no-op when no location is active."""
        location_id = self.current_location_id()
        if location_id is None:
            return query
        if self.is_location_type(query.model):
            logger.debug("Pinning %s query to location %s", query.model.__name__, location_id)
            return query.where_key(location_id)
        if not self.supports_location_scoping(query.model):
            return query
        add_span_event(
            "location.scoped",
            {"location_id": location_id, "model": query.model.__name__},
        )
        return query.apply_scope("where_has_or_doesnt_have_location", location_id)
