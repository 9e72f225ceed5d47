"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Constants
    RETURN_PERIODS,
    SERIES,

    # Enums
    ActivityType,

    # Entities
    PerformanceHistory,
    PerformancePoint,
    TradeActivity,
)
from .portfolio import (
    AllocationBucket,
    EnhancedHolding,
    Holding,
    Performer,
    PortfolioAllocation,
    PortfolioMetrics,
    PortfolioSummary,
)

__all__ = [
    # Constants
    "RETURN_PERIODS",
    "SERIES",

    # Enums
    "ActivityType",

    # Entities
    "AllocationBucket",
    "EnhancedHolding",
    "Holding",
    "PerformanceHistory",
    "PerformancePoint",
    "Performer",
    "PortfolioAllocation",
    "PortfolioMetrics",
    "PortfolioSummary",
    "TradeActivity",
]
