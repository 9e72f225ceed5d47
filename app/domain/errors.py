"""
Domain errors raised by the analytics engines and ingestion.
"""

from typing import Optional


class ValidationError(ValueError):
    """Input rejected before any computation takes place"""


class EmptyPortfolioError(ValidationError):
    """No holdings supplied"""

    def __init__(self, message: str = "empty or missing holdings"):
        super().__init__(message)


class MalformedHoldingError(ValidationError):
    """A holding lacks numeric quantity or prices"""

    def __init__(self, message: str = "malformed holding", symbol: Optional[str] = None):
        super().__init__(message)
        self.symbol = symbol


class WorkbookFormatError(ValidationError):
    """Spreadsheet is missing a required sheet or column"""
