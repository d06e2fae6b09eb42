from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Cinema Booking Core Metrics Collector

    Tracks reservation and payment outcomes so that seat contention
    (seat_unavailable) and duplicate payments (already_paid) are visible
    on the dashboard.
    """

    def __init__(self):
        # ========== Reservation Metrics ==========
        self.reservation_requests = Counter(
            'booking_reservation_requests_total',
            'Total seat reservation requests',
            ['result'],  # result: success or the error_code of the failure
        )

        self.reservation_duration = Histogram(
            'booking_reservation_duration_seconds',
            'Seat reservation processing time',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Payment Metrics ==========
        self.payment_requests = Counter(
            'booking_payment_requests_total',
            'Total booking payment requests',
            ['result'],
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, result: str, duration: float):
        self.reservation_requests.labels(result=result).inc()
        self.reservation_duration.observe(duration)

    def record_payment(self, *, result: str):
        self.payment_requests.labels(result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
