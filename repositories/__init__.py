"""
SQLAlchemy-based Repositories

This package provides async repository pattern using SQLAlchemy ORM.

Usage:
    from repositories import RankedListRepository
    from database import get_session

    async with get_session() as session:
        repo = RankedListRepository(session)
        ranked_list = await repo.get_with_context(42)
"""

from .base import BaseRepository
from .rankings import RankingConfigurationRepository, RankedListRepository
from .penalties import PenaltyRepository, ActivePenalty

__all__ = [
    "BaseRepository",
    "RankingConfigurationRepository",
    "RankedListRepository",
    "PenaltyRepository",
    "ActivePenalty",
]
