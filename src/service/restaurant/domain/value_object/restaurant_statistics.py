import attrs


@attrs.define(frozen=True)
class RestaurantStatistics:
    total_reservations: int = 0
    active_reservations: int = 0
    average_party_size: float = 0.0
    table_utilization: float = 0.0  # percent of today's slot capacity booked
