"""
Prometheus Metrics

Counters and histograms for the demo workloads and the contact relay.
"""

from prometheus_client import Counter, Histogram
import structlog

logger = structlog.get_logger()

# Singleton metrics instance
_metrics: "Metrics | None" = None


class Metrics:
    """
    Prometheus metrics for the homepage service.

    Tracks:
    - Synthetic workload runs by kind and outcome
    - Workload duration
    - Contact relay deliveries
    """

    def __init__(self):
        self.workloads_total = Counter(
            "homepage_workloads_total",
            "Total synthetic workload requests",
            ["kind", "outcome"],
        )

        self.workload_duration_seconds = Histogram(
            "homepage_workload_duration_seconds",
            "Synthetic workload execution time in seconds",
            ["kind"],
            buckets=[0.001, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
        )

        self.relay_messages_total = Counter(
            "homepage_relay_messages_total",
            "Total contact messages handled by the relay",
            ["outcome"],
        )

        logger.debug("Prometheus metrics initialized")

    def track_workload(self, kind: str, outcome: str, duration: float | None = None) -> None:
        """Track one workload request. Rejected requests carry no duration."""
        self.workloads_total.labels(kind=kind, outcome=outcome).inc()
        if duration is not None:
            self.workload_duration_seconds.labels(kind=kind).observe(duration)

    def track_relay(self, outcome: str) -> None:
        self.relay_messages_total.labels(outcome=outcome).inc()


def get_metrics() -> Metrics:
    """Get or create the singleton metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = Metrics()
    return _metrics
