"""
Activity Repository
Recent trade feed
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List, Sequence

from app.infrastructure.db.models import ActivityModel
from app.domain.models import ActivityType, TradeActivity


class ActivityRepository:
    """Repository for TradeActivity"""

    def __init__(self, session: AsyncSession):
        """Initialize with database session"""
        self.session = session

    async def list_recent(self, limit: int = 5) -> List[TradeActivity]:
        """
        Get most recent activities

        Args:
            limit: Maximum rows to return

        Returns:
            Activities ordered by date, newest first
        """
        result = await self.session.execute(
            select(ActivityModel)
            .order_by(ActivityModel.date.desc(), ActivityModel.id.desc())
            .limit(limit)
        )
        return [self._to_domain(m) for m in result.scalars().all()]

    async def replace_all(self, activities: Sequence[TradeActivity]) -> int:
        await self.session.execute(delete(ActivityModel))

        for activity in activities:
            self.session.add(ActivityModel(
                type=activity.type,
                symbol=activity.symbol,
                quantity=activity.quantity,
                price=activity.price,
                date=activity.date,
            ))

        await self.session.flush()
        return len(activities)

    def _to_domain(self, model: ActivityModel) -> TradeActivity:
        """Convert model to domain object"""
        return TradeActivity(
            id=model.id,
            type=ActivityType(model.type),
            symbol=model.symbol,
            quantity=model.quantity,
            price=float(model.price),
            date=model.date,
        )
