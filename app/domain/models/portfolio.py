"""
DOMAIN MODELS — PORTFOLIO & PnL

Immutable structures representing holdings and the metrics derived from them.
No database access. No market data fetching.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

Number = Union[int, float]

# wire name -> attribute name
_HOLDING_FIELDS = {
    "symbol": "symbol",
    "name": "name",
    "quantity": "quantity",
    "avgPrice": "avg_price",
    "currentPrice": "current_price",
    "sector": "sector",
    "marketCap": "market_cap",
    "exchange": "exchange",
}


@dataclass(frozen=True)
class Holding:
    """
    A single owned instrument as stored.
    """
    symbol: str
    name: str
    quantity: Number
    avg_price: Number
    current_price: Number
    sector: str
    market_cap: str
    exchange: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Holding":
        """
        Build from a record keyed by wire names (avgPrice) or attribute
        names (avg_price). Missing numeric keys raise KeyError.
        """
        values = {}
        for wire_name, attr in _HOLDING_FIELDS.items():
            if wire_name in data:
                values[attr] = data[wire_name]
            elif attr in data:
                values[attr] = data[attr]

        for required in ("quantity", "avg_price", "current_price"):
            if required not in values:
                raise KeyError(required)

        return cls(
            symbol=values.get("symbol", ""),
            name=values.get("name", ""),
            quantity=values["quantity"],
            avg_price=values["avg_price"],
            current_price=values["current_price"],
            sector=values.get("sector", ""),
            market_cap=values.get("market_cap", ""),
            exchange=values.get("exchange"),
        )

    @property
    def invested(self) -> float:
        return float(self.quantity) * float(self.avg_price)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "symbol": self.symbol,
            "name": self.name,
            "quantity": self.quantity,
            "avgPrice": self.avg_price,
            "currentPrice": self.current_price,
            "sector": self.sector,
            "marketCap": self.market_cap,
        }
        if self.exchange is not None:
            data["exchange"] = self.exchange
        return data


@dataclass(frozen=True)
class EnhancedHolding:
    """
    Holding plus its market value and unrealised gain/loss.
    """
    holding: Holding
    value: float
    invested: float
    gain_loss: float
    gain_loss_percent: float

    @property
    def symbol(self) -> str:
        return self.holding.symbol

    @property
    def name(self) -> str:
        return self.holding.name

    @property
    def sector(self) -> str:
        return self.holding.sector

    @property
    def market_cap(self) -> str:
        return self.holding.market_cap

    def to_dict(self) -> Dict[str, Any]:
        data = self.holding.to_dict()
        data.update(
            value=self.value,
            gainLoss=self.gain_loss,
            gainLossPercent=self.gain_loss_percent,
        )
        return data


@dataclass(frozen=True)
class Performer:
    symbol: str
    name: str
    gain_percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "gainPercent": self.gain_percent,
        }


@dataclass(frozen=True)
class AllocationBucket:
    """
    Share of total portfolio value held in one category.
    """
    value: float
    percentage: float
    holdings_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "percentage": self.percentage,
            "holdingsCount": self.holdings_count,
        }


@dataclass(frozen=True)
class PortfolioSummary:
    total_value: float
    total_invested: float
    total_gain_loss: float
    total_gain_loss_percent: float
    number_of_holdings: int
    top_performer: Performer
    worst_performer: Performer
    diversification_score: float
    risk_level: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalValue": self.total_value,
            "totalInvested": self.total_invested,
            "totalGainLoss": self.total_gain_loss,
            "totalGainLossPercent": self.total_gain_loss_percent,
            "numberOfHoldings": self.number_of_holdings,
            "topPerformer": self.top_performer.to_dict(),
            "worstPerformer": self.worst_performer.to_dict(),
            "diversificationScore": self.diversification_score,
            "riskLevel": self.risk_level,
        }


@dataclass(frozen=True)
class PortfolioAllocation:
    by_sector: Dict[str, AllocationBucket] = field(default_factory=dict)
    by_market_cap: Dict[str, AllocationBucket] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bySector": {k: v.to_dict() for k, v in self.by_sector.items()},
            "byMarketCap": {k: v.to_dict() for k, v in self.by_market_cap.items()},
        }


@dataclass(frozen=True)
class PortfolioMetrics:
    """
    Everything derived from one set of holdings.
    """
    summary: PortfolioSummary
    holdings: List[EnhancedHolding]
    allocation: PortfolioAllocation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "holdings": [h.to_dict() for h in self.holdings],
            "allocation": self.allocation.to_dict(),
        }
