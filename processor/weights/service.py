"""
Weight calculation services.

Entry points used by the scheduler and by admin actions: recalculate a
whole configuration, every active configuration, or a single ranked list.
"""
from typing import Dict

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import RankingConfiguration
from repositories import RankedListRepository, RankingConfigurationRepository
from .bulk import BulkWeightCalculator
from .calculator import WeightCalculator
from .errors import RankedListNotFoundError, UnsupportedAlgorithmVersionError


async def calculate_weights(session: AsyncSession, ranking_configuration: RankingConfiguration) -> dict:
    """
    Recalculate every ranked list weight of a configuration.

    Returns:
        {"success": True, "message": ..., "results": ...} or
        {"success": False, "error": ..., "results": ...} when any item failed
    """
    results = await BulkWeightCalculator(session, ranking_configuration).call()

    processed = results["processed"]
    updated = results["updated"]
    errors = results["errors"]

    if errors:
        return {
            "success": False,
            "error": (
                f"Weight calculation completed with {len(errors)} errors. "
                f"{updated} weights updated, {processed} processed"
            ),
            "results": results,
        }

    return {
        "success": True,
        "message": (
            f"Successfully calculated weights for {len(results['weights_calculated'])} ranked lists "
            f"({processed} processed, {updated} updated)"
        ),
        "results": results,
    }


async def recalculate_all_configurations(session: AsyncSession) -> Dict[int, dict]:
    """
    Recalculate weights for every non-archived configuration, keyed by configuration ID.

    A configuration whose algorithm_version has no calculator is reported as a
    failed outcome with no ranked list touched; the remaining configurations
    still run.
    """
    repository = RankingConfigurationRepository(session)
    configuration_ids = [configuration.id for configuration in await repository.get_active()]

    outcomes = {}
    for configuration_id in configuration_ids:
        # Reload: a rolled back item in the previous run expires loaded state
        configuration = await repository.get(configuration_id)
        try:
            outcomes[configuration_id] = await calculate_weights(session, configuration)
        except UnsupportedAlgorithmVersionError as e:
            logger.error(f"RankingConfiguration {configuration_id} skipped: {e}")
            outcomes[configuration_id] = {"success": False, "error": str(e), "results": None}

    failed = sum(1 for outcome in outcomes.values() if not outcome["success"])
    logger.info(f"Recalculated {len(outcomes)} ranking configurations ({failed} with errors)")
    return outcomes


async def recalculate_ranked_list(session: AsyncSession, ranked_list_id: int) -> int:
    """
    Recalculate a single ranked list weight.

    Raises:
        RankedListNotFoundError: No ranked list has this ID
        UnsupportedAlgorithmVersionError: The configuration's version has no calculator
    """
    ranked_list = await RankedListRepository(session).get_with_context(ranked_list_id)
    if ranked_list is None:
        raise RankedListNotFoundError(ranked_list_id)

    weight = await WeightCalculator.for_ranked_list(session, ranked_list).call()
    logger.info(f"RankedList {ranked_list_id} weight recalculated: {weight}")
    return weight
