"""
Monitoring Module

Provides Prometheus metrics for the homepage service.
"""

from homepage.monitoring.metrics import Metrics, get_metrics

__all__ = [
    "Metrics",
    "get_metrics",
]
