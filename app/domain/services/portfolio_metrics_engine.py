"""
PORTFOLIO METRICS ENGINE
Raw holdings → enhanced holdings, summary, allocation

RESPONSIBILITIES:
- Value every holding and its unrealised gain/loss
- Aggregate portfolio totals
- Pick top and worst performers
- Break total value down by sector and market-cap tier

RULES:
❌ No I/O, no state between calls
❌ No partial results on bad input
✅ Every holding validated before computing
✅ Division by zero yields 0
✅ Input order preserved in returned holdings
"""

from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from app.domain.errors import EmptyPortfolioError, MalformedHoldingError
from app.domain.models import (
    AllocationBucket,
    EnhancedHolding,
    Holding,
    Performer,
    PortfolioAllocation,
    PortfolioMetrics,
    PortfolioSummary,
)

HoldingInput = Union[Holding, Mapping[str, Any]]

DEFAULT_DIVERSIFICATION_SCORE = 8.2
DEFAULT_RISK_LEVEL = "Moderate"


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def _pct(part: float, whole: float) -> float:
    if not whole:
        return 0.0
    return part / whole * 100


class PortfolioMetricsEngine:
    """
    Portfolio Metrics Engine
    Pure calculator, safe to share between requests
    """

    def __init__(
        self,
        diversification_score: float = DEFAULT_DIVERSIFICATION_SCORE,
        risk_level: str = DEFAULT_RISK_LEVEL,
    ):
        """
        Args:
            diversification_score: Reported as-is in the summary
            risk_level: Reported as-is in the summary
        """
        self.diversification_score = diversification_score
        self.risk_level = risk_level

    def calculate(self, holdings: Optional[Sequence[HoldingInput]]) -> PortfolioMetrics:
        """
        Compute all portfolio metrics

        Args:
            holdings: Holding objects or wire-format mappings

        Returns:
            PortfolioMetrics

        Raises:
            EmptyPortfolioError: holdings is None or empty
            MalformedHoldingError: any holding lacks numeric quantity/prices
        """
        parsed = self._validate(holdings)

        enhanced = [self._enhance(h) for h in parsed]

        total_value = sum(h.value for h in enhanced)
        total_invested = sum(h.invested for h in enhanced)
        total_gain_loss = total_value - total_invested

        # sorted() is stable with reverse=True: ties keep input order
        ranked = sorted(enhanced, key=lambda h: h.gain_loss_percent, reverse=True)

        summary = PortfolioSummary(
            total_value=total_value,
            total_invested=total_invested,
            total_gain_loss=total_gain_loss,
            total_gain_loss_percent=_pct(total_gain_loss, total_invested),
            number_of_holdings=len(enhanced),
            top_performer=self._performer(ranked[0]),
            worst_performer=self._performer(ranked[-1]),
            diversification_score=self.diversification_score,
            risk_level=self.risk_level,
        )

        allocation = PortfolioAllocation(
            by_sector=self._group(enhanced, lambda h: h.sector, total_value),
            by_market_cap=self._group(enhanced, lambda h: h.market_cap, total_value),
        )

        return PortfolioMetrics(
            summary=summary,
            holdings=enhanced,
            allocation=allocation,
        )

    def _validate(self, holdings: Optional[Sequence[HoldingInput]]) -> List[Holding]:
        if not holdings:
            raise EmptyPortfolioError()

        parsed = []
        for item in holdings:
            if isinstance(item, Holding):
                holding = item
            elif isinstance(item, Mapping):
                try:
                    holding = Holding.from_mapping(item)
                except KeyError:
                    raise MalformedHoldingError(symbol=item.get("symbol"))
            else:
                raise MalformedHoldingError()

            for value in (holding.quantity, holding.current_price, holding.avg_price):
                if not _is_numeric(value):
                    raise MalformedHoldingError(symbol=holding.symbol)
            parsed.append(holding)

        return parsed

    @staticmethod
    def _enhance(holding: Holding) -> EnhancedHolding:
        quantity = float(holding.quantity)
        value = quantity * float(holding.current_price)
        invested = quantity * float(holding.avg_price)
        gain_loss = value - invested

        return EnhancedHolding(
            holding=holding,
            value=value,
            invested=invested,
            gain_loss=gain_loss,
            gain_loss_percent=_pct(gain_loss, invested),
        )

    @staticmethod
    def _performer(holding: EnhancedHolding) -> Performer:
        return Performer(
            symbol=holding.symbol,
            name=holding.name,
            gain_percent=holding.gain_loss_percent,
        )

    @staticmethod
    def _group(
        holdings: List[EnhancedHolding],
        key: Callable[[EnhancedHolding], str],
        total_value: float,
    ) -> Dict[str, AllocationBucket]:
        """Sum value and count per category, first-seen order"""
        totals: Dict[str, list] = {}
        for h in holdings:
            bucket = totals.setdefault(key(h), [0.0, 0])
            bucket[0] += h.value
            bucket[1] += 1

        return {
            name: AllocationBucket(
                value=value,
                percentage=_pct(value, total_value),
                holdings_count=count,
            )
            for name, (value, count) in totals.items()
        }


def calculate_portfolio_metrics(
    holdings: Optional[Sequence[HoldingInput]],
    diversification_score: float = DEFAULT_DIVERSIFICATION_SCORE,
    risk_level: str = DEFAULT_RISK_LEVEL,
) -> PortfolioMetrics:
    """Functional shortcut around PortfolioMetricsEngine.calculate"""
    engine = PortfolioMetricsEngine(
        diversification_score=diversification_score,
        risk_level=risk_level,
    )
    return engine.calculate(holdings)
