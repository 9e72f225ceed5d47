"""
Portfolio workbook ingestion
Read holdings and performance history from the sample Excel dataset

Only raw inputs are read. Derived sheets (Summary, Sector_Allocation,
Market_Cap, Top_Performers) and derived holding columns are ignored; the
metrics engine recomputes them.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from app.domain.errors import WorkbookFormatError
from app.domain.models import Holding, PerformanceHistory, PerformancePoint
from app.domain.services.performance_engine import build_history

logger = logging.getLogger(__name__)

HOLDINGS_SHEET = "Holdings"
PERFORMANCE_SHEET = "Historical_Performance"

HOLDING_COLUMNS = {
    "Symbol": "symbol",
    "Company Name": "name",
    "Quantity": "quantity",
    "Avg Price ₹": "avg_price",
    "Current Price (₹)": "current_price",
    "Sector": "sector",
    "Market Cap": "market_cap",
}
OPTIONAL_HOLDING_COLUMNS = {
    "Exchange": "exchange",
}

PERFORMANCE_COLUMNS = {
    "Date": "date",
    "Portfolio Value (₹)": "portfolio",
    "Nifty 50": "nifty50",
    "Gold (₹/10g)": "gold",
}
OPTIONAL_PERFORMANCE_COLUMNS = {
    "Portfolio Return %": "portfolio_return",
    "Nifty 50 Return %": "nifty50_return",
    "Gold Return %": "gold_return",
}


@dataclass(frozen=True)
class PortfolioWorkbook:
    holdings: List[Holding]
    performance: PerformanceHistory


def _clean(value: Any) -> Any:
    """Map pandas missing values to None and numpy scalars to Python"""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value
    if hasattr(value, "item"):
        return value.item()
    return value


def _format_date(value: Any) -> str:
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _rows(frame: pd.DataFrame, sheet: str, required: Dict[str, str],
          optional: Dict[str, str]) -> List[Dict[str, Any]]:
    missing = [col for col in required if col not in frame.columns]
    if missing:
        raise WorkbookFormatError(f"Sheet '{sheet}' is missing columns: {', '.join(missing)}")

    columns = {**required, **{k: v for k, v in optional.items() if k in frame.columns}}
    renamed = frame[list(columns)].rename(columns=columns)
    renamed = renamed.dropna(how="all")

    return [
        {key: _clean(value) for key, value in record.items()}
        for record in renamed.to_dict(orient="records")
    ]


def parse_holdings(frame: pd.DataFrame) -> List[Holding]:
    holdings = []
    for row in _rows(frame, HOLDINGS_SHEET, HOLDING_COLUMNS, OPTIONAL_HOLDING_COLUMNS):
        holdings.append(Holding(
            symbol=str(row["symbol"]).strip().upper(),
            name=row["name"],
            quantity=row["quantity"],
            avg_price=row["avg_price"],
            current_price=row["current_price"],
            sector=row["sector"],
            market_cap=row["market_cap"],
            exchange=row.get("exchange"),
        ))
    return holdings


def parse_performance(frame: pd.DataFrame) -> PerformanceHistory:
    points = []
    for row in _rows(frame, PERFORMANCE_SHEET, PERFORMANCE_COLUMNS, OPTIONAL_PERFORMANCE_COLUMNS):
        row["date"] = _format_date(row["date"])
        points.append(PerformancePoint(**row))
    return build_history(points)


def load_portfolio_workbook(path: Union[str, Path], engine: Optional[str] = "openpyxl") -> PortfolioWorkbook:
    """
    Load holdings and performance history from an Excel workbook

    Raises:
        WorkbookFormatError: a required sheet or column is missing
    """
    path = Path(path)
    logger.info(f"📥 Loading portfolio workbook: {path}")

    sheets = pd.read_excel(path, sheet_name=None, engine=engine)

    for sheet in (HOLDINGS_SHEET, PERFORMANCE_SHEET):
        if sheet not in sheets:
            raise WorkbookFormatError(f"Workbook {path.name} has no '{sheet}' sheet")

    holdings = parse_holdings(sheets[HOLDINGS_SHEET])
    performance = parse_performance(sheets[PERFORMANCE_SHEET])

    logger.info(
        f"✅ Workbook loaded | holdings={len(holdings)} timeline_points={len(performance.timeline)}"
    )
    return PortfolioWorkbook(holdings=holdings, performance=performance)
