"""
PERFORMANCE ENGINE
Derive period returns from a cumulative-return timeline

Each point carries the cumulative return (%) of every series since the start
of the timeline. Points are assumed to be spaced one month apart:
- 1year   = latest cumulative return
- 1month  = latest - previous point
- 3months = latest - point three steps back
"""

from typing import Dict, List, Optional, Sequence

from app.domain.errors import ValidationError
from app.domain.models import RETURN_PERIODS, SERIES, PerformanceHistory, PerformancePoint

# lookback in points per period, None = whole timeline
_LOOKBACK = {
    "1month": 1,
    "3months": 3,
    "1year": None,
}


def _series_return(points: Sequence[PerformancePoint], series: str, period: str) -> Optional[float]:
    latest = points[-1].cumulative_return(series)
    if latest is None:
        return None

    steps = _LOOKBACK[period]
    if steps is None:
        return latest
    if len(points) <= steps:
        return None

    earlier = points[-1 - steps].cumulative_return(series)
    if earlier is None:
        return None
    return latest - earlier


def build_returns(timeline: Sequence[PerformancePoint]) -> Dict[str, Dict[str, Optional[float]]]:
    """
    Compute returns per series and period

    Raises:
        ValidationError: timeline is empty
    """
    if not timeline:
        raise ValidationError("empty performance timeline")

    return {
        series: {period: _series_return(timeline, series, period) for period in RETURN_PERIODS}
        for series in SERIES
    }


def build_history(timeline: List[PerformancePoint]) -> PerformanceHistory:
    return PerformanceHistory(timeline=list(timeline), returns=build_returns(timeline))
