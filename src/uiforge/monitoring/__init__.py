"""
Performance Monitoring
Structured tracing and Prometheus metrics
"""

from .tracer import trace_operation
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "trace_operation",
]
