"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.restaurant.app.command import (
    cancel_reservation_use_case,
    create_customer_use_case,
    create_reservation_use_case,
    modify_reservation_use_case,
    update_table_status_use_case,
)
from src.service.restaurant.app.query import (
    get_customer_use_case,
    get_statistics_use_case,
    list_customer_reservations_use_case,
    list_reservations_use_case,
    list_tables_use_case,
    list_time_slots_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_reservation_use_case,
    modify_reservation_use_case,
    cancel_reservation_use_case,
    update_table_status_use_case,
    create_customer_use_case,
    list_customer_reservations_use_case,
    list_reservations_use_case,
    list_time_slots_use_case,
    get_statistics_use_case,
    list_tables_use_case,
    get_customer_use_case,
]
