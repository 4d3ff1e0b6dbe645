"""
ShipState Resource Aggregation

Per-name resource totals, display formatting and density lookup.
"""

from .library import (
    ResourceDefinition,
    ResourceLibrary,
    STOCK_RESOURCES,
)

from .aggregator import (
    ResourceTotal,
    ResourceAggregator,
    format_amount,
    format_fixed,
    PRECISION_THRESHOLD,
)

__all__ = [
    "ResourceDefinition",
    "ResourceLibrary",
    "STOCK_RESOURCES",
    "ResourceTotal",
    "ResourceAggregator",
    "format_amount",
    "format_fixed",
    "PRECISION_THRESHOLD",
]
