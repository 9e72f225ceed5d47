"""
Performance History Repository
"""

from dataclasses import asdict
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import Optional

from app.infrastructure.db.models import PerformanceHistoryModel
from app.domain.models import PerformanceHistory, PerformancePoint


class PerformanceRepository:
    """Repository for PerformanceHistory (single current document)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest(self) -> Optional[PerformanceHistory]:
        result = await self.session.execute(
            select(PerformanceHistoryModel)
            .order_by(PerformanceHistoryModel.id.desc())
            .limit(1)
        )
        model = result.scalar_one_or_none()

        return self._to_domain(model) if model else None

    async def replace(self, history: PerformanceHistory) -> int:
        """
        Store history as the only document

        Returns:
            ID of created record
        """
        await self.session.execute(delete(PerformanceHistoryModel))

        model = PerformanceHistoryModel(
            timeline=[asdict(p) for p in history.timeline],
            returns=history.returns,
        )
        self.session.add(model)
        await self.session.flush()

        return model.id

    def _to_domain(self, model: PerformanceHistoryModel) -> PerformanceHistory:
        return PerformanceHistory(
            id=model.id,
            timeline=[PerformancePoint(**p) for p in model.timeline],
            returns=model.returns,
        )
