"""
BulkWeightCalculator - recompute weights across a ranking configuration

Processes ranked lists one by one. Each ranked list is loaded, weighed and
committed on its own; a failure is rolled back, recorded in the results
and the pass continues with the next ranked list.
"""
from typing import List, Optional, Type

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import RankingConfiguration
from repositories import RankedListRepository
from .calculator import WeightCalculator
from .errors import RankedListNotFoundError
from .median import resolve_median_voter_count


class BulkWeightCalculator:
    """
    Recalculates ranked list weights for one ranking configuration.

    Results:
        {
            "processed": int,
            "updated": int,              # weights that changed
            "errors": [{ranked_list_id, list_name, message}],
            "weights_calculated": [{ranked_list_id, list_name, old_weight, new_weight, change}],
        }
    """

    def __init__(self, session: AsyncSession, ranking_configuration: RankingConfiguration):
        """
        Args:
            session: Session used for every ranked list (committed per item)
            ranking_configuration: Configuration whose ranked lists are weighed

        Raises:
            UnsupportedAlgorithmVersionError: The configuration's version has no calculator
        """
        self.session = session
        self.ranking_configuration = ranking_configuration
        # Rollbacks expire ORM state, keep plain values
        self.ranking_configuration_id = ranking_configuration.id
        self.calculator_class: Type[WeightCalculator] = WeightCalculator.for_version(
            ranking_configuration.algorithm_version
        )
        self.ranked_lists = RankedListRepository(session)
        self.median_voter_count: Optional[float] = None
        self.results = self._empty_results()

    @staticmethod
    def _empty_results() -> dict:
        return {
            "processed": 0,
            "updated": 0,
            "errors": [],
            "weights_calculated": [],
        }

    async def call(self) -> dict:
        """Calculate weights for all ranked lists of the configuration."""
        ranked_list_ids = await self.ranked_lists.get_ids_for_configuration(self.ranking_configuration_id)
        return await self._process(ranked_list_ids)

    async def call_for_ids(self, ranked_list_ids: List[int]) -> dict:
        """
        Calculate weights for specific ranked lists only.

        IDs that do not belong to the configuration are ignored.
        """
        target_ids = await self.ranked_lists.get_ids_for_configuration(
            self.ranking_configuration_id,
            ranked_list_ids=list(ranked_list_ids)
        )
        return await self._process(target_ids)

    async def _process(self, ranked_list_ids: List[int]) -> dict:
        # Each pass reports only its own rows
        self.results = self._empty_results()
        # One median for the whole pass
        self.median_voter_count = await resolve_median_voter_count(self.session, self.ranking_configuration_id)

        logger.info(
            f"Calculating weights for {len(ranked_list_ids)} ranked lists of "
            f"RankingConfiguration {self.ranking_configuration_id} "
            f"(median voter count: {self.median_voter_count})"
        )

        for ranked_list_id in ranked_list_ids:
            await self._process_ranked_list(ranked_list_id)

        self._log_results()
        return self.results

    async def _process_ranked_list(self, ranked_list_id: int) -> None:
        self.results["processed"] += 1
        list_name = None

        try:
            ranked_list = await self.ranked_lists.get_with_context(ranked_list_id)
            if ranked_list is None:
                raise RankedListNotFoundError(ranked_list_id)

            list_name = ranked_list.list.name
            old_weight = ranked_list.weight

            calculator = self.calculator_class(
                self.session,
                ranked_list,
                median_voter_count=self.median_voter_count
            )
            new_weight = await calculator.call()
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            self.results["errors"].append({
                "ranked_list_id": ranked_list_id,
                "list_name": list_name,
                "message": str(e),
            })
            logger.error(f"Error calculating weight for RankedList {ranked_list_id}: {e}")
            return

        if old_weight != new_weight:
            self.results["updated"] += 1

        self.results["weights_calculated"].append({
            "ranked_list_id": ranked_list_id,
            "list_name": list_name,
            "old_weight": old_weight,
            "new_weight": new_weight,
            "change": new_weight - (old_weight or 0),
        })

    def _log_results(self) -> None:
        errors = self.results["errors"]
        logger.info(f"BulkWeightCalculator completed for RankingConfiguration {self.ranking_configuration_id}")
        logger.info(
            f"Processed: {self.results['processed']}, "
            f"Updated: {self.results['updated']}, "
            f"Errors: {len(errors)}"
        )
        if errors:
            logger.error(f"Errors encountered: {', '.join(e['message'] for e in errors)}")
