from prometheus_client import Counter, Histogram


class ReservationMetrics:
    """
    Restaurant Reservation Core Metrics Collector

    Tracks reservation command outcomes and availability engine performance
    """

    def __init__(self):
        # ========== Reservation Lifecycle Metrics ==========
        self.reservation_requests = Counter(
            'reservation_requests_total',
            'Total reservation commands',
            ['operation', 'result'],  # operation: create/modify/cancel
        )

        self.reservation_duration = Histogram(
            'reservation_command_duration_seconds',
            'Reservation command processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Availability Engine Metrics ==========
        self.availability_lookup_duration = Histogram(
            'availability_lookup_duration_seconds',
            'Best-fit table lookup latency',
            buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
        )

        self.availability_lookups = Counter(
            'availability_lookups_total',
            'Best-fit table lookups',
            ['result'],  # found/none
        )

        self.slot_scan_results = Counter(
            'availability_slot_scan_slots_total',
            'Slots returned by day scans',
            ['available'],
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, operation: str, result: str, duration: float):
        self.reservation_requests.labels(operation=operation, result=result).inc()
        self.reservation_duration.labels(operation=operation).observe(duration)

    def record_availability_lookup(self, *, found: bool, duration: float):
        self.availability_lookups.labels(result='found' if found else 'none').inc()
        self.availability_lookup_duration.observe(duration)

    def record_slot_scan(self, *, available: int, unavailable: int):
        self.slot_scan_results.labels(available='true').inc(available)
        self.slot_scan_results.labels(available='false').inc(unavailable)


# Global metrics instance
metrics = ReservationMetrics()
