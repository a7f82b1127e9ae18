"""
Median voter count of a ranking configuration.
"""
from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from repositories import RankingConfigurationRepository
from .scoring import condensed_median


async def median_voter_count(session: AsyncSession, ranking_configuration_id: int) -> Optional[float]:
    """
    Condensed median of number_of_voters across the lists attached
    to a configuration, or None when no list reports voters.
    """
    voter_counts = await RankingConfigurationRepository(session).get_voter_counts(ranking_configuration_id)
    median = condensed_median(voter_counts)
    logger.debug(
        f"Median voter count for RankingConfiguration {ranking_configuration_id}: "
        f"{median} ({len(voter_counts)} lists with voters)"
    )
    return median


async def resolve_median_voter_count(session: AsyncSession, ranking_configuration_id: int) -> float:
    """Median voter count, falling back to settings.DEFAULT_MEDIAN_VOTER_COUNT."""
    median = await median_voter_count(session, ranking_configuration_id)
    if median is None:
        return settings.DEFAULT_MEDIAN_VOTER_COUNT
    return median
