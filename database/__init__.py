"""
Database Module - List Weight Engine

Structure:
    database/
    ├── __init__.py      # This file - public API
    ├── session.py       # SQLAlchemy async session management
    └── models/          # SQLAlchemy ORM models
        ├── base.py
        ├── lists.py
        ├── penalties.py
        └── rankings.py

Usage:
    from database import get_session
    from database.models import RankedList

    async with get_session() as session:
        result = await session.execute(select(RankedList))
        ranked_lists = result.scalars().all()
"""

# SQLAlchemy Models
from .models import (
    Base,
    TimestampMixin,
    MediaList,
    Penalty,
    PenaltyApplication,
    ListPenalty,
    RankingConfiguration,
    RankedList,
)

# Session Management
from .session import (
    init_engine,
    close_engine,
    get_session,
)

__all__ = [
    # SQLAlchemy Models
    "Base",
    "TimestampMixin",
    "MediaList",
    "Penalty",
    "PenaltyApplication",
    "ListPenalty",
    "RankingConfiguration",
    "RankedList",
    # Session Management
    "init_engine",
    "close_engine",
    "get_session",
]
