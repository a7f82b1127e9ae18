"""
Penalty Models

Penalty definitions, their magnitude per ranking configuration,
and their tagging onto specific lists.
"""
from dataclasses import dataclass
from typing import Optional, List, Union, TYPE_CHECKING

from sqlalchemy import String, Integer, Float, Boolean, Text, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from constants import DynamicPenaltyType, PenaltyMediaType
from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .lists import MediaList
    from .rankings import RankingConfiguration


@dataclass(frozen=True)
class StaticPenalty:
    """A penalty with a fixed value, independent of list attributes."""


@dataclass(frozen=True)
class DynamicPenalty:
    """A penalty whose contribution is driven by one list attribute."""
    dynamic_type: DynamicPenaltyType


PenaltyKind = Union[StaticPenalty, DynamicPenalty]


class Penalty(Base, TimestampMixin):
    """
    A named reason to discount a list's influence.

    Static when dynamic_type is NULL, dynamic otherwise.
    media_type scopes the penalty to one media kind, or to all of them
    with 'cross_media'.
    """
    __tablename__ = "penalties"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Scope
    media_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=PenaltyMediaType.CROSS_MEDIA.value,
        index=True
    )
    dynamic_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)

    # Ownership
    is_global: Mapped[bool] = mapped_column("global", Boolean, default=True, nullable=False)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Relationships
    penalty_applications: Mapped[List["PenaltyApplication"]] = relationship(
        "PenaltyApplication",
        back_populates="penalty",
        cascade="all, delete-orphan"
    )
    list_penalties: Mapped[List["ListPenalty"]] = relationship(
        "ListPenalty",
        back_populates="penalty",
        cascade="all, delete-orphan"
    )

    @property
    def kind(self) -> PenaltyKind:
        if self.dynamic_type is None:
            return StaticPenalty()
        return DynamicPenalty(DynamicPenaltyType(self.dynamic_type))

    @property
    def is_static(self) -> bool:
        return self.dynamic_type is None

    @property
    def is_dynamic(self) -> bool:
        return self.dynamic_type is not None

    def applies_to(self, media_type: str) -> bool:
        """Whether this penalty may be applied to a list of the given media type."""
        return self.media_type in (PenaltyMediaType.CROSS_MEDIA.value, media_type)


class PenaltyApplication(Base, TimestampMixin):
    """
    The percentage magnitude (0-100) of a penalty within one ranking configuration.

    A penalty without an application for a configuration has no effect
    under that configuration.
    """
    __tablename__ = "penalty_applications"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign keys
    penalty_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("penalties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    ranking_configuration_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ranking_configurations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    value: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    # Relationships
    penalty: Mapped["Penalty"] = relationship("Penalty", back_populates="penalty_applications")
    ranking_configuration: Mapped["RankingConfiguration"] = relationship(
        "RankingConfiguration",
        back_populates="penalty_applications"
    )

    __table_args__ = (
        UniqueConstraint('penalty_id', 'ranking_configuration_id', name='uq_penalty_application'),
        CheckConstraint('value >= 0 AND value <= 100', name='ck_penalty_application_value'),
    )


class ListPenalty(Base, TimestampMixin):
    """Explicit tagging of a penalty onto a list."""
    __tablename__ = "list_penalties"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign keys
    list_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    penalty_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("penalties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Relationships
    list: Mapped["MediaList"] = relationship("MediaList", back_populates="list_penalties")
    penalty: Mapped["Penalty"] = relationship("Penalty", back_populates="list_penalties")

    __table_args__ = (
        UniqueConstraint('list_id', 'penalty_id', name='uq_list_penalty'),
    )
