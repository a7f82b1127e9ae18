"""
Ranking Models

Ranking configurations (scoring policies) and the per-list records
holding computed weights.
"""
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import (
    String, Integer, Float, Boolean, Text, JSON, ForeignKey,
    UniqueConstraint, CheckConstraint, Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .lists import MediaList
    from .penalties import PenaltyApplication


class RankingConfiguration(Base, TimestampMixin):
    """
    A named, versioned scoring policy.

    algorithm_version selects the weight calculator. Rows are read-only
    to the weight engine.
    """
    __tablename__ = "ranking_configurations"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    media_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # constants.MediaType

    # Algorithm parameters
    algorithm_version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    exponent: Mapped[float] = mapped_column(Float, nullable=False, default=3.0)
    bonus_pool_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=3.0)
    min_list_weight: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Scoping
    is_global: Mapped[bool] = mapped_column("global", Boolean, default=True, nullable=False)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    inherited_from_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("ranking_configurations.id", ondelete="SET NULL"),
        nullable=True
    )
    archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    inherited_from: Mapped[Optional["RankingConfiguration"]] = relationship(
        "RankingConfiguration",
        remote_side="RankingConfiguration.id"
    )
    ranked_lists: Mapped[List["RankedList"]] = relationship(
        "RankedList",
        back_populates="ranking_configuration",
        cascade="all, delete-orphan"
    )
    penalty_applications: Mapped[List["PenaltyApplication"]] = relationship(
        "PenaltyApplication",
        back_populates="ranking_configuration",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint('algorithm_version > 0', name='ck_ranking_configuration_version'),
        CheckConstraint('exponent > 0 AND exponent <= 10', name='ck_ranking_configuration_exponent'),
        CheckConstraint(
            'bonus_pool_percentage >= 0 AND bonus_pool_percentage <= 100',
            name='ck_ranking_configuration_bonus_pool'
        ),
        Index('idx_ranking_configurations_media_global', 'media_type', 'global'),
    )


class RankedList(Base, TimestampMixin):
    """
    A list as weighted under one ranking configuration.

    weight and calculated_weight_details are written only by the
    weight calculators; details hold a serialized
    processor.weights.models.WeightCalculationDetails.
    """
    __tablename__ = "ranked_lists"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign keys
    list_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    ranking_configuration_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ranking_configurations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Computed values
    weight: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    calculated_weight_details: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    # Relationships (joined: the calculators always read both)
    list: Mapped["MediaList"] = relationship("MediaList", back_populates="ranked_lists", lazy="joined")
    ranking_configuration: Mapped["RankingConfiguration"] = relationship(
        "RankingConfiguration",
        back_populates="ranked_lists",
        lazy="joined"
    )

    __table_args__ = (
        UniqueConstraint('list_id', 'ranking_configuration_id', name='uq_ranked_list'),
    )
