"""
Database Models (SQLAlchemy ORM)
Holdings, performance history and trade activity
"""

from sqlalchemy import (
    Column, Integer, String, Numeric, DateTime, JSON, Index,
    Enum as SQLEnum
)
from datetime import datetime

from app.domain.models import ActivityType
from app.infrastructure.db.database import Base


# Tables

class HoldingModel(Base):
    """One owned instrument"""
    __tablename__ = "holding"

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(20), nullable=False, unique=True, index=True)
    name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    avg_price = Column(Numeric(14, 2), nullable=False)
    current_price = Column(Numeric(14, 2), nullable=False)
    sector = Column(String(100), nullable=False)
    market_cap = Column(String(50), nullable=False)
    exchange = Column(String(20), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class PerformanceHistoryModel(Base):
    """Timeline of portfolio vs benchmarks, stored as one document"""
    __tablename__ = "performance_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timeline = Column(JSON, nullable=False)
    returns = Column(JSON, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ActivityModel(Base):
    """Recorded buy/sell"""
    __tablename__ = "activity"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(SQLEnum(ActivityType), nullable=False)
    symbol = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(14, 2), nullable=False)
    date = Column(DateTime, nullable=False)

    # Indexes
    __table_args__ = (
        Index('ix_activity_date', 'date'),
    )
