"""
SQLAlchemy ORM Models

Models are organized by domain:
- Lists: curated lists and their credibility attributes
- Penalties: penalty definitions, per-configuration values, list tagging
- Rankings: ranking configurations and ranked lists (computed weights)
"""

from .base import Base, TimestampMixin
from .lists import MediaList
from .penalties import Penalty, PenaltyApplication, ListPenalty, PenaltyKind, StaticPenalty, DynamicPenalty
from .rankings import RankingConfiguration, RankedList

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Lists
    "MediaList",
    # Penalties
    "Penalty",
    "PenaltyApplication",
    "ListPenalty",
    "PenaltyKind",
    "StaticPenalty",
    "DynamicPenalty",
    # Rankings
    "RankingConfiguration",
    "RankedList",
]
