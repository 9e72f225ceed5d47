"""
Data source protocols for type hints.
The engines never import a concrete store; services receive one of these.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from app.domain.models import Holding, PerformanceHistory, TradeActivity


class HoldingSource(Protocol):
    async def list_holdings(self) -> List[Holding]:
        ...


class PerformanceSource(Protocol):
    async def get_latest(self) -> Optional[PerformanceHistory]:
        ...


class ActivitySource(Protocol):
    async def list_recent(self, limit: int) -> List[TradeActivity]:
        ...
