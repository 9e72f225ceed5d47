"""
Sample data and database seeding
Clears holdings, performance history and activity, then inserts a data set
"""

import logging
from datetime import datetime
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import (
    ActivityType,
    Holding,
    PerformanceHistory,
    PerformancePoint,
    TradeActivity,
)
from app.infrastructure.db.repositories.activity_repository import ActivityRepository
from app.infrastructure.db.repositories.holding_repository import HoldingRepository
from app.infrastructure.db.repositories.performance_repository import PerformanceRepository

logger = logging.getLogger(__name__)


SAMPLE_HOLDINGS = [
    Holding("RELIANCE", "Reliance Industries", 50, 2800.0, 2950.55, "Energy", "Large"),
    Holding("HDFCBANK", "HDFC Bank", 100, 1500.0, 1580.20, "Banking", "Large"),
    Holding("INFY", "Infosys Ltd", 200, 1450.0, 1625.75, "Technology", "Large"),
    Holding("TCS", "Tata Consultancy Services", 75, 3800.0, 3990.00, "Technology", "Large"),
]

SAMPLE_PERFORMANCE = PerformanceHistory(
    timeline=[
        PerformancePoint(date="2024-01-01", portfolio=650000, nifty50=21000, gold=62000),
        PerformancePoint(date="2024-03-01", portfolio=680000, nifty50=22100, gold=64500),
        PerformancePoint(date="2024-06-01", portfolio=700000, nifty50=23500, gold=68000),
    ],
    returns={
        "portfolio": {"1month": 2.3, "3months": 8.1, "1year": 15.7},
        "nifty50": {"1month": 1.8, "3months": 6.2, "1year": 12.4},
        "gold": {"1month": -0.5, "3months": 4.1, "1year": 8.9},
    },
)

SAMPLE_ACTIVITY = [
    TradeActivity(ActivityType.BUY, "INFY", 50, 1620.00, datetime(2024, 7, 28, 10, 0)),
    TradeActivity(ActivityType.SELL, "RELIANCE", 10, 2980.00, datetime(2024, 7, 25, 14, 30)),
    TradeActivity(ActivityType.BUY, "HDFCBANK", 30, 1575.50, datetime(2024, 7, 22, 9, 45)),
    TradeActivity(ActivityType.BUY, "TCS", 25, 3950.00, datetime(2024, 7, 20, 11, 0)),
    TradeActivity(ActivityType.SELL, "INFY", 20, 1650.00, datetime(2024, 7, 18, 15, 0)),
]


async def seed_database(
    session: AsyncSession,
    holdings: Sequence[Holding] = SAMPLE_HOLDINGS,
    performance: PerformanceHistory = SAMPLE_PERFORMANCE,
    activity: Sequence[TradeActivity] = SAMPLE_ACTIVITY,
) -> None:
    """
    Replace all stored data with the given set and commit
    """
    try:
        holdings_count = await HoldingRepository(session).replace_all(holdings)
        await PerformanceRepository(session).replace(performance)
        activity_count = await ActivityRepository(session).replace_all(activity)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info(
        "✅ Seeded database | holdings=%d timeline_points=%d activity=%d",
        holdings_count,
        len(performance.timeline),
        activity_count,
    )
