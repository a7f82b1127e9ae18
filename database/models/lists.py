"""
List Model

Externally curated lists of media items and the attributes that describe
their credibility.
"""
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import String, Integer, Boolean, Text, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .penalties import ListPenalty
    from .rankings import RankedList


class MediaList(Base, TimestampMixin):
    """
    A curated list (albums, songs, books, ...) admitted into the system.

    The boolean and numeric attributes below feed the dynamic penalties
    of the weight calculators.
    """
    __tablename__ = "lists"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    media_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # constants.MediaType
    year_published: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Credibility attributes
    high_quality_source: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    category_specific: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    location_specific: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    voter_names_unknown: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    voter_count_unknown: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    voter_count_estimated: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    num_years_covered: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    number_of_voters: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Relationships
    list_penalties: Mapped[List["ListPenalty"]] = relationship(
        "ListPenalty",
        back_populates="list",
        cascade="all, delete-orphan"
    )
    ranked_lists: Mapped[List["RankedList"]] = relationship(
        "RankedList",
        back_populates="list",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index('idx_lists_high_quality', 'high_quality_source'),
    )
