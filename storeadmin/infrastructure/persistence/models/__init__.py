"""Persistence models: ORM entities, pivot tables and mixins.

Import models from here so every mapped class is registered before mappers
are configured (relationships refer to each other by name).
"""

from storeadmin.infrastructure.persistence.models.customer import (
    Customer,
    CustomerGroup,
)
from storeadmin.infrastructure.persistence.models.location import (
    Location,
    locationables,
    locations_relationship,
)
from storeadmin.infrastructure.persistence.models.menu import (
    Allergen,
    Category,
    Menu,
    allergenables,
    menu_categories,
)
from storeadmin.infrastructure.persistence.models.mixins import (
    Locationable,
    TimestampMixin,
)
from storeadmin.infrastructure.persistence.models.order import Order
from storeadmin.infrastructure.persistence.models.staff import (
    Staff,
    StaffGroup,
    User,
    staffs_groups,
)

__all__ = [
    "Allergen",
    "Category",
    "Customer",
    "CustomerGroup",
    "Location",
    "Menu",
    "Order",
    "Staff",
    "StaffGroup",
    "User",
    "allergenables",
    "locationables",
    "menu_categories",
    "staffs_groups",
    "Locationable",
    "TimestampMixin",
    "locations_relationship",
]
