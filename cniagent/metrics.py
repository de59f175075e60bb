"""Prometheus metrics for local network resolution.

Records how the network driver service was selected on each resolution
pass, so that hosts stuck with zero or several candidate driver services
can be spotted without reading logs.
"""
from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Gauge,
    generate_latest,
)

driver_service_resolution = Counter(
    "cniagent_driver_service_resolution_total",
    "Network driver service selection outcomes",
    ["outcome"],
)

local_networks_resolved = Gauge(
    "cniagent_local_networks",
    "Number of local networks found by the last resolution",
)


def get_metrics() -> tuple[bytes, str]:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
