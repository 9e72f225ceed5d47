from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional, Union


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HoldingSchema(CamelModel):
    symbol: str
    name: str
    quantity: Union[int, float]
    avg_price: float
    current_price: float
    sector: str
    market_cap: str
    exchange: Optional[str] = None
    value: float
    gain_loss: float
    gain_loss_percent: float


class PerformerSchema(CamelModel):
    symbol: str
    name: str
    gain_percent: float


class SummarySchema(CamelModel):
    total_value: float
    total_invested: float
    total_gain_loss: float
    total_gain_loss_percent: float
    number_of_holdings: int
    top_performer: PerformerSchema
    worst_performer: PerformerSchema
    diversification_score: float
    risk_level: str


class AllocationBucketSchema(CamelModel):
    value: float
    percentage: float
    holdings_count: int


class AllocationSchema(CamelModel):
    by_sector: Dict[str, AllocationBucketSchema]
    by_market_cap: Dict[str, AllocationBucketSchema]


class PerformancePointSchema(CamelModel):
    date: str
    portfolio: float
    nifty50: float
    gold: float
    portfolio_return: Optional[float] = None
    nifty50_return: Optional[float] = None
    gold_return: Optional[float] = None


class PerformanceSchema(CamelModel):
    timeline: List[PerformancePointSchema]
    # keyed by series then period ("1month", "3months", "1year")
    returns: Dict[str, Dict[str, Optional[float]]]


class ActivitySchema(CamelModel):
    id: Optional[int] = None
    type: str
    symbol: str
    quantity: int
    price: float
    date: datetime
