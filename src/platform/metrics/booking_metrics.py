from prometheus_client import Counter, Histogram


class BookingMetrics:
    """Business metrics for the booking pipeline, exposed on /metrics."""

    def __init__(self) -> None:
        self.booking_requests = Counter(
            'booking_requests_total',
            'Booking creation requests by outcome',
            ['result'],  # success / validation / not_found / past_event / capacity / payment
        )

        self.booking_seats = Counter(
            'booking_seats_total',
            'Seats sold through successful bookings',
            ['event_id'],
        )

        self.payment_duration = Histogram(
            'booking_payment_duration_seconds',
            'Payment gateway call duration',
            ['gateway'],
            buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
        )

    def record_outcome(self, *, result: str) -> None:
        self.booking_requests.labels(result=result).inc()

    def record_seats_sold(self, *, event_id: int, seats: int) -> None:
        self.booking_seats.labels(event_id=str(event_id)).inc(seats)


booking_metrics = BookingMetrics()
