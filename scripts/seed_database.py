import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.config import settings
from app.infrastructure.db.database import Base, engine, async_session_factory, close_db
from app.infrastructure.db import models  # noqa: F401
from app.infrastructure.db.seed import SAMPLE_ACTIVITY, SAMPLE_HOLDINGS, SAMPLE_PERFORMANCE, seed_database
from app.ingestion.workbook_loader import load_portfolio_workbook

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def seed(source: str, workbook_path: str = None):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready")

    holdings, performance = SAMPLE_HOLDINGS, SAMPLE_PERFORMANCE
    if source == "workbook":
        workbook = load_portfolio_workbook(workbook_path)
        holdings, performance = workbook.holdings, workbook.performance

    try:
        async with async_session_factory() as session:
            await seed_database(
                session,
                holdings=holdings,
                performance=performance,
                activity=SAMPLE_ACTIVITY,
            )
    finally:
        await close_db()

    logger.info(f"Seeded {len(holdings)} holdings from {source}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the portfolio database")
    parser.add_argument("--source", type=str, default="sample", choices=["sample", "workbook"], help="Data set to load")
    parser.add_argument("--workbook", type=str, default=settings.PORTFOLIO_WORKBOOK, help="Excel workbook path (for workbook source)")

    args = parser.parse_args()

    if args.source == "workbook" and not args.workbook:
        parser.error("--workbook (or PORTFOLIO_WORKBOOK) is required for the workbook source")

    asyncio.run(seed(args.source, args.workbook))
