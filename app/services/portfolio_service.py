# app/services/portfolio_service.py

import logging
from typing import Optional

from app.config import settings
from app.domain.models import (
    EnhancedHolding,
    PortfolioAllocation,
    PortfolioMetrics,
    PortfolioSummary,
)
from app.domain.ports import HoldingSource
from app.domain.services.portfolio_metrics_engine import PortfolioMetricsEngine

logger = logging.getLogger(__name__)


def default_engine() -> PortfolioMetricsEngine:
    return PortfolioMetricsEngine(
        diversification_score=settings.DIVERSIFICATION_SCORE,
        risk_level=settings.RISK_LEVEL,
    )


class PortfolioService:
    """Fetch holdings from a source and run them through the metrics engine"""

    def __init__(self, source: HoldingSource, engine: Optional[PortfolioMetricsEngine] = None):
        self.source = source
        self.engine = engine or default_engine()

    async def get_metrics(self) -> PortfolioMetrics:
        logger.info("🔍 Building portfolio metrics")

        holdings = await self.source.list_holdings()
        metrics = self.engine.calculate(holdings)

        summary = metrics.summary
        logger.info(
            "✅ Portfolio metrics ready | holdings=%d invested=%.2f value=%.2f pnl=%.2f",
            summary.number_of_holdings,
            summary.total_invested,
            summary.total_value,
            summary.total_gain_loss,
        )
        return metrics

    async def get_summary(self) -> PortfolioSummary:
        return (await self.get_metrics()).summary

    async def get_holdings(self) -> list[EnhancedHolding]:
        return (await self.get_metrics()).holdings

    async def get_allocation(self) -> PortfolioAllocation:
        return (await self.get_metrics()).allocation
