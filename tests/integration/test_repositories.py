from datetime import datetime

import pytest

from app.domain.models import ActivityType, Holding, TradeActivity
from app.infrastructure.db.repositories.activity_repository import ActivityRepository
from app.infrastructure.db.repositories.holding_repository import HoldingRepository
from app.infrastructure.db.repositories.performance_repository import PerformanceRepository
from app.infrastructure.db.seed import SAMPLE_HOLDINGS, SAMPLE_PERFORMANCE, seed_database


@pytest.mark.asyncio
@pytest.mark.integration
async def test_holding_repository_roundtrip(db_session):
    repo = HoldingRepository(db_session)
    holdings = [
        Holding("ZETA", "Zeta Corp", 3, 10.25, 12.5, "Technology", "Small", exchange="BSE"),
        Holding("ALPHA", "Alpha Ltd", 8, 100.0, 95.75, "Banking", "Large"),
    ]

    inserted = await repo.replace_all(holdings)
    await db_session.commit()

    fetched = await repo.list_holdings()
    assert inserted == 2
    assert [h.symbol for h in fetched] == ["ZETA", "ALPHA"]
    assert fetched[0].avg_price == pytest.approx(10.25)
    assert fetched[0].exchange == "BSE"
    assert fetched[1].current_price == pytest.approx(95.75)
    assert isinstance(fetched[1].current_price, float)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_replace_all_clears_previous_rows(db_session):
    repo = HoldingRepository(db_session)
    await repo.replace_all(SAMPLE_HOLDINGS)
    await repo.replace_all(SAMPLE_HOLDINGS[:1])
    await db_session.commit()

    fetched = await repo.list_holdings()
    assert [h.symbol for h in fetched] == ["RELIANCE"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_performance_repository_keeps_single_document(db_session):
    repo = PerformanceRepository(db_session)
    assert await repo.get_latest() is None

    await repo.replace(SAMPLE_PERFORMANCE)
    await repo.replace(SAMPLE_PERFORMANCE)
    await db_session.commit()

    history = await repo.get_latest()
    assert history is not None
    assert history.timeline == SAMPLE_PERFORMANCE.timeline
    assert history.returns["nifty50"]["1year"] == pytest.approx(12.4)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_activity_repository_orders_by_date(db_session):
    repo = ActivityRepository(db_session)
    await repo.replace_all([
        TradeActivity(ActivityType.BUY, "OLD", 1, 10.0, datetime(2024, 1, 1, 9, 0)),
        TradeActivity(ActivityType.SELL, "NEW", 2, 20.0, datetime(2024, 3, 1, 9, 0)),
        TradeActivity(ActivityType.BUY, "MID", 3, 30.0, datetime(2024, 2, 1, 9, 0)),
    ])
    await db_session.commit()

    recent = await repo.list_recent(limit=2)
    assert [a.symbol for a in recent] == ["NEW", "MID"]
    assert recent[0].type == ActivityType.SELL
    assert recent[0].amount == pytest.approx(40.0)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_seed_database_populates_everything(db_session):
    await seed_database(db_session)

    assert len(await HoldingRepository(db_session).list_holdings()) == 4
    assert await PerformanceRepository(db_session).get_latest() is not None
    assert len(await ActivityRepository(db_session).list_recent(limit=10)) == 5
