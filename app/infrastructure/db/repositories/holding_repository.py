"""
Holding Repository
Read holdings for analytics, bulk replace for seeding
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List, Sequence

from app.infrastructure.db.models import HoldingModel
from app.domain.models import Holding


class HoldingRepository:
    """Repository for Holding"""

    def __init__(self, session: AsyncSession):
        """Initialize with database session"""
        self.session = session

    async def list_holdings(self) -> List[Holding]:
        """
        Get all holdings in insertion order

        Returns:
            List of Holding domain objects
        """
        result = await self.session.execute(
            select(HoldingModel).order_by(HoldingModel.id)
        )
        return [self._to_domain(m) for m in result.scalars().all()]

    async def replace_all(self, holdings: Sequence[Holding]) -> int:
        """
        Delete every stored holding and insert the given ones

        Args:
            holdings: New holdings, stored in the given order

        Returns:
            Number of rows inserted
        """
        await self.session.execute(delete(HoldingModel))

        for holding in holdings:
            self.session.add(HoldingModel(
                symbol=holding.symbol,
                name=holding.name,
                quantity=holding.quantity,
                avg_price=holding.avg_price,
                current_price=holding.current_price,
                sector=holding.sector,
                market_cap=holding.market_cap,
                exchange=holding.exchange,
            ))

        await self.session.flush()
        return len(holdings)

    def _to_domain(self, model: HoldingModel) -> Holding:
        """Convert model to domain object"""
        return Holding(
            symbol=model.symbol,
            name=model.name,
            quantity=model.quantity,
            avg_price=float(model.avg_price),
            current_price=float(model.current_price),
            sector=model.sector,
            market_cap=model.market_cap,
            exchange=model.exchange,
        )
