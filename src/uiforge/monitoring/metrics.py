"""
Metrics Collection
Prometheus metrics for generation pipeline tracking
"""

from prometheus_client import Counter, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the service.
    """

    def __init__(self) -> None:
        self.generate_requests_total = Counter(
            "uiforge_generate_requests_total",
            "Total number of generation requests",
            ["status", "plan_type"],
        )
        self.generate_duration = Histogram(
            "uiforge_generate_duration_seconds",
            "Generation pipeline duration in seconds",
            ["plan_type"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )
        self.errors_total = Counter(
            "uiforge_errors_total",
            "Total number of pipeline errors",
            ["error_type"],
        )
        self.versions_total = Counter(
            "uiforge_versions_total",
            "Total number of versions recorded",
        )

    def record_generate(self, status: str, plan_type: str, duration: float) -> None:
        """Record one generation request."""
        self.generate_requests_total.labels(status=status, plan_type=plan_type).inc()
        self.generate_duration.labels(plan_type=plan_type).observe(duration)
        if status == "success":
            self.versions_total.inc()

    def record_error(self, error_type: str) -> None:
        """Record a pipeline error."""
        self.errors_total.labels(error_type=error_type).inc()

    def export(self) -> bytes:
        """Export metrics in Prometheus text format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
