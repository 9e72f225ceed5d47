"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

# Series tracked in the performance timeline
SERIES = ("portfolio", "nifty50", "gold")

# Return lookback keys, as served to clients
RETURN_PERIODS = ("1month", "3months", "1year")


class ActivityType(str, Enum):
    """Side of a recorded trade"""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class TradeActivity:
    """Single buy or sell in the activity feed"""
    type: ActivityType
    symbol: str
    quantity: int
    price: float
    date: datetime
    id: Optional[int] = None

    def __post_init__(self):
        if not self.symbol:
            raise ValueError("Activity symbol cannot be empty")
        if self.quantity < 1:
            raise ValueError("Activity quantity must be at least 1")

    @property
    def amount(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class PerformancePoint:
    """
    One observation in the performance timeline.

    Values are absolute levels. The *_return fields are cumulative return
    percentages and are only present when the source supplies them.
    """
    date: str
    portfolio: float
    nifty50: float
    gold: float
    portfolio_return: Optional[float] = None
    nifty50_return: Optional[float] = None
    gold_return: Optional[float] = None

    def cumulative_return(self, series: str) -> Optional[float]:
        return getattr(self, f"{series}_return")


@dataclass(frozen=True)
class PerformanceHistory:
    """Timeline of portfolio vs benchmarks with period returns per series"""
    timeline: List[PerformancePoint]
    returns: Dict[str, Dict[str, Optional[float]]] = field(default_factory=dict)
    id: Optional[int] = None
