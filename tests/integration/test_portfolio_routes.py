from datetime import datetime

import pytest

from app.domain.models import (
    ActivityType,
    Holding,
    PerformanceHistory,
    PerformancePoint,
    TradeActivity,
)
from app.infrastructure.db.seed import seed_database
import app.api.routes.portfolio as portfolio_routes
from app.services.portfolio_service import PortfolioService


class StubHoldingSource:
    def __init__(self, holdings):
        self._holdings = holdings

    async def list_holdings(self):
        return self._holdings


@pytest.mark.asyncio
@pytest.mark.integration
async def test_summary_from_seeded_holdings(client, db_session):
    await seed_database(db_session)

    resp = await client.get("/api/portfolio/summary")
    assert resp.status_code == 200
    data = resp.json()
    assert data["totalValue"] == pytest.approx(929947.5)
    assert data["totalInvested"] == pytest.approx(865000.0)
    assert data["totalGainLoss"] == pytest.approx(64947.5)
    assert data["totalGainLossPercent"] == pytest.approx(64947.5 / 865000.0 * 100)
    assert data["numberOfHoldings"] == 4
    assert data["topPerformer"]["symbol"] == "INFY"
    assert data["worstPerformer"]["symbol"] == "TCS"
    assert data["worstPerformer"]["gainPercent"] == pytest.approx(5.0)
    assert data["riskLevel"] == "Moderate"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_holdings_in_stored_order(client, db_session):
    await seed_database(db_session)

    resp = await client.get("/api/portfolio/holdings")
    assert resp.status_code == 200
    holdings = resp.json()
    assert [h["symbol"] for h in holdings] == ["RELIANCE", "HDFCBANK", "INFY", "TCS"]
    infy = holdings[2]
    assert infy["value"] == pytest.approx(325150.0)
    assert infy["gainLoss"] == pytest.approx(35150.0)
    assert infy["avgPrice"] == pytest.approx(1450.0)
    assert infy["marketCap"] == "Large"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_allocation_by_sector(client, db_session):
    await seed_database(db_session)

    resp = await client.get("/api/portfolio/allocation")
    assert resp.status_code == 200
    data = resp.json()
    assert list(data["bySector"]) == ["Energy", "Banking", "Technology"]
    tech = data["bySector"]["Technology"]
    assert tech["value"] == pytest.approx(624400.0)
    assert tech["percentage"] == pytest.approx(624400.0 / 929947.5 * 100)
    assert tech["holdingsCount"] == 2
    assert data["byMarketCap"]["Large"]["percentage"] == pytest.approx(100.0)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_empty_portfolio_is_not_found(client):
    resp = await client.get("/api/portfolio/summary")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "empty or missing holdings"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_malformed_holding_is_unprocessable(app, client):
    bad = [Holding("BAD", "Bad", "ten", 1.0, 2.0, "Tech", "Large")]
    app.dependency_overrides[portfolio_routes.get_portfolio_service] = (
        lambda: PortfolioService(StubHoldingSource(bad))
    )

    resp = await client.get("/api/portfolio/holdings")
    assert resp.status_code == 422
    assert resp.json()["detail"] == "malformed holding"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_performance(client, db_session):
    await seed_database(db_session)

    resp = await client.get("/api/portfolio/performance")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["timeline"]) == 3
    assert data["timeline"][0] == {"date": "2024-01-01", "portfolio": 650000, "nifty50": 21000, "gold": 62000}
    assert data["returns"]["portfolio"]["1year"] == pytest.approx(15.7)
    assert data["returns"]["gold"]["1month"] == pytest.approx(-0.5)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_performance_missing(client):
    resp = await client.get("/api/portfolio/performance")
    assert resp.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_activity_newest_first(client, db_session):
    await seed_database(db_session)

    resp = await client.get("/api/portfolio/activity")
    assert resp.status_code == 200
    activity = resp.json()
    assert len(activity) == 5
    assert [a["symbol"] for a in activity[:2]] == ["INFY", "RELIANCE"]
    assert activity[0]["type"] == "buy"
    assert activity[1]["type"] == "sell"
    assert activity[0]["date"].startswith("2024-07-28T10:00:00")

    resp = await client.get("/api/portfolio/activity", params={"limit": 2})
    assert len(resp.json()) == 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_activity_limit_bounds(client):
    resp = await client.get("/api/portfolio/activity", params={"limit": 0})
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["database"] == "connected"


class StubPerformanceSource:
    def __init__(self, history):
        self._history = history

    async def get_latest(self):
        return self._history


class StubActivitySource:
    def __init__(self, activities):
        self._activities = activities
        self.limits = []

    async def list_recent(self, limit):
        self.limits.append(limit)
        return self._activities[:limit]


class FailingActivitySource:
    async def list_recent(self, limit):
        raise RuntimeError("store offline")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_performance_served_from_source(app, client):
    history = PerformanceHistory(
        timeline=[
            PerformancePoint("2024-05-01", 100.0, 50.0, 25.0, portfolio_return=1.5),
            PerformancePoint("2024-06-01", 110.0, 51.0, 24.0, portfolio_return=3.0),
        ],
        returns={"portfolio": {"1month": 1.5, "3months": None, "1year": 3.0}},
    )
    app.dependency_overrides[portfolio_routes.get_performance_source] = (
        lambda: StubPerformanceSource(history)
    )

    resp = await client.get("/api/portfolio/performance")
    assert resp.status_code == 200
    data = resp.json()
    assert data["timeline"][1] == {
        "date": "2024-06-01", "portfolio": 110.0, "nifty50": 51.0, "gold": 24.0,
        "portfolioReturn": 3.0,
    }
    assert data["returns"]["portfolio"]["1month"] == pytest.approx(1.5)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_activity_limit_passed_to_source(app, client):
    trades = [
        TradeActivity(ActivityType.BUY, "AAA", 1, 10.0, datetime(2024, 7, 2), id=2),
        TradeActivity(ActivityType.SELL, "BBB", 3, 20.0, datetime(2024, 7, 1), id=1),
    ]
    source = StubActivitySource(trades)
    app.dependency_overrides[portfolio_routes.get_activity_source] = lambda: source

    resp = await client.get("/api/portfolio/activity", params={"limit": 1})
    assert resp.status_code == 200
    assert source.limits == [1]
    assert [a["symbol"] for a in resp.json()] == ["AAA"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_activity_source_failure_is_server_error(app, client):
    app.dependency_overrides[portfolio_routes.get_activity_source] = lambda: FailingActivitySource()

    resp = await client.get("/api/portfolio/activity")
    assert resp.status_code == 500
    assert "store offline" in resp.json()["detail"]
