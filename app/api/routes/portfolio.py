"""
Portfolio API Routes
Read-only analytics over the stored holdings
"""

from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.config import settings
from app.domain.errors import EmptyPortfolioError, ValidationError
from app.domain.models import PortfolioMetrics
from app.domain.ports import ActivitySource, PerformanceSource
from app.domain.schemas.portfolio import (
    ActivitySchema,
    AllocationSchema,
    HoldingSchema,
    PerformanceSchema,
    SummarySchema,
)
from app.infrastructure.db.database import get_db
from app.infrastructure.db.repositories.activity_repository import ActivityRepository
from app.infrastructure.db.repositories.holding_repository import HoldingRepository
from app.infrastructure.db.repositories.performance_repository import PerformanceRepository
from app.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)
router = APIRouter()


def get_portfolio_service(db: AsyncSession = Depends(get_db)) -> PortfolioService:
    return PortfolioService(HoldingRepository(db))


def get_performance_source(db: AsyncSession = Depends(get_db)) -> PerformanceSource:
    return PerformanceRepository(db)


def get_activity_source(db: AsyncSession = Depends(get_db)) -> ActivitySource:
    return ActivityRepository(db)


async def _load_metrics(service: PortfolioService, what: str) -> PortfolioMetrics:
    try:
        return await service.get_metrics()
    except EmptyPortfolioError as e:
        logger.warning(f"No holdings for {what}: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        logger.error(f"Invalid holdings for {what}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error computing {what}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute {what}: {str(e)}"
        )


@router.get("/summary", response_model=SummarySchema)
async def get_summary(service: PortfolioService = Depends(get_portfolio_service)):
    """
    Portfolio totals, gain/loss, top and worst performer
    """
    metrics = await _load_metrics(service, "summary")
    return SummarySchema.model_validate(metrics.summary.to_dict())


@router.get("/holdings", response_model=List[HoldingSchema])
async def get_holdings(service: PortfolioService = Depends(get_portfolio_service)):
    """
    Holdings with value and unrealised gain/loss, in stored order
    """
    metrics = await _load_metrics(service, "holdings")
    return [HoldingSchema.model_validate(h.to_dict()) for h in metrics.holdings]


@router.get("/allocation", response_model=AllocationSchema)
async def get_allocation(service: PortfolioService = Depends(get_portfolio_service)):
    """
    Value breakdown by sector and by market-cap tier
    """
    metrics = await _load_metrics(service, "allocation")
    return AllocationSchema.model_validate(metrics.allocation.to_dict())


@router.get(
    "/performance",
    response_model=PerformanceSchema,
    response_model_exclude_none=True,
)
async def get_performance(source: PerformanceSource = Depends(get_performance_source)):
    """
    Portfolio vs Nifty 50 vs gold timeline and period returns
    """
    try:
        history = await source.get_latest()
    except Exception as e:
        logger.error(f"Error fetching performance: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch performance: {str(e)}"
        )

    if history is None:
        raise HTTPException(status_code=404, detail="No performance history recorded")

    return PerformanceSchema(
        timeline=[asdict(p) for p in history.timeline],
        returns=history.returns,
    )


@router.get("/activity", response_model=List[ActivitySchema])
async def get_activity(
    limit: int = Query(default=settings.ACTIVITY_LIMIT, ge=1, le=50),
    source: ActivitySource = Depends(get_activity_source),
):
    """
    Most recent trades, newest first
    """
    try:
        activities = await source.list_recent(limit)
    except Exception as e:
        logger.error(f"Error fetching activity: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch activity: {str(e)}"
        )

    return [
        ActivitySchema(
            id=a.id,
            type=a.type.value,
            symbol=a.symbol,
            quantity=a.quantity,
            price=a.price,
            date=a.date,
        )
        for a in activities
    ]
