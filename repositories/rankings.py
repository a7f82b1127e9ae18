"""
Ranking Repositories

Database operations for ranking configurations and ranked lists.
"""
from typing import Optional, List, Sequence

from sqlalchemy import select

from database.models import RankingConfiguration, RankedList, MediaList
from .base import BaseRepository


class RankingConfigurationRepository(BaseRepository[RankingConfiguration]):
    """Repository for ranking configuration operations."""

    model = RankingConfiguration

    async def get_active(self) -> Sequence[RankingConfiguration]:
        """Get all non-archived configurations."""
        stmt = (
            select(RankingConfiguration)
            .where(RankingConfiguration.archived.is_(False))
            .order_by(RankingConfiguration.id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_voter_counts(self, ranking_configuration_id: int) -> List[int]:
        """
        Get the non-null number_of_voters of every list attached
        to a configuration.
        """
        stmt = (
            select(MediaList.number_of_voters)
            .join(RankedList, RankedList.list_id == MediaList.id)
            .where(
                RankedList.ranking_configuration_id == ranking_configuration_id,
                MediaList.number_of_voters.is_not(None),
            )
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class RankedListRepository(BaseRepository[RankedList]):
    """Repository for ranked list operations."""

    model = RankedList

    async def get_ids_for_configuration(
        self,
        ranking_configuration_id: int,
        ranked_list_ids: Optional[List[int]] = None
    ) -> List[int]:
        """
        Get ranked list IDs belonging to a configuration, ordered by ID.

        Args:
            ranking_configuration_id: Owning configuration
            ranked_list_ids: Restrict to these IDs (others are ignored)
        """
        stmt = (
            select(RankedList.id)
            .where(RankedList.ranking_configuration_id == ranking_configuration_id)
            .order_by(RankedList.id)
        )
        if ranked_list_ids is not None:
            stmt = stmt.where(RankedList.id.in_(ranked_list_ids))

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_with_context(self, ranked_list_id: int) -> Optional[RankedList]:
        """
        Load a ranked list with its list and configuration, refreshing
        any stale copy held by the session.
        """
        stmt = (
            select(RankedList)
            .where(RankedList.id == ranked_list_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.unique().scalar_one_or_none()
