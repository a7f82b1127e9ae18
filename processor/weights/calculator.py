"""
WeightCalculator - versioned list weight calculation

Each RankingConfiguration names an algorithm_version. Every version is a
separate WeightCalculator subclass registered in an explicit version
table, so weights of historical configurations stay reproducible when
the algorithm evolves. New versions are new subclasses, never branches
inside an existing one.

Usage:
    calculator = WeightCalculator.for_ranked_list(session, ranked_list)
    weight = await calculator.call()
"""
from typing import Callable, Dict, List, Optional, Type

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import MediaList, RankedList, RankingConfiguration
from .errors import UnsupportedAlgorithmVersionError
from .median import resolve_median_voter_count
from .scoring import BASE_WEIGHT


# algorithm_version -> calculator class
_calculators: Dict[int, Type["WeightCalculator"]] = {}


def register_weight_calculator(version: int) -> Callable[[Type["WeightCalculator"]], Type["WeightCalculator"]]:
    """Decorator registering a calculator class for an algorithm version."""
    def decorator(calculator_class: Type["WeightCalculator"]) -> Type["WeightCalculator"]:
        if version in _calculators:
            raise ValueError(f"Algorithm version {version} is already registered")
        calculator_class.version = version
        _calculators[version] = calculator_class
        return calculator_class
    return decorator


def supported_versions() -> List[int]:
    """Registered algorithm versions, ascending."""
    return sorted(_calculators)


class WeightCalculator:
    """
    Base class for weight calculators.

    Subclasses implement calculate_weight(). call() runs it and writes
    the result onto the ranked list.
    """

    version: Optional[int] = None

    def __init__(
        self,
        session: AsyncSession,
        ranked_list: RankedList,
        median_voter_count: Optional[float] = None
    ):
        """
        Args:
            session: Session owning ranked_list
            ranked_list: Ranked list to weigh (list and configuration loaded)
            median_voter_count: Median shared by a batch; computed on demand if None
        """
        self.session = session
        self.ranked_list = ranked_list
        self.previous_weight = ranked_list.weight
        self._median_voter_count = median_voter_count

    # ============================================
    # VERSION SELECTION
    # ============================================

    @staticmethod
    def for_version(version: int) -> Type["WeightCalculator"]:
        """
        Get the calculator class for an algorithm version.

        Raises:
            UnsupportedAlgorithmVersionError: No calculator is registered for version
        """
        calculator_class = _calculators.get(version)
        if calculator_class is None:
            raise UnsupportedAlgorithmVersionError(version)
        return calculator_class

    @classmethod
    def for_ranked_list(
        cls,
        session: AsyncSession,
        ranked_list: RankedList,
        median_voter_count: Optional[float] = None
    ) -> "WeightCalculator":
        """Build the calculator matching the ranked list's configuration."""
        calculator_class = cls.for_version(ranked_list.ranking_configuration.algorithm_version)
        return calculator_class(session, ranked_list, median_voter_count=median_voter_count)

    # ============================================
    # CONTEXT
    # ============================================

    @property
    def list(self) -> MediaList:
        return self.ranked_list.list

    @property
    def ranking_configuration(self) -> RankingConfiguration:
        return self.ranked_list.ranking_configuration

    @property
    def base_weight(self) -> int:
        return BASE_WEIGHT

    @property
    def minimum_weight(self) -> int:
        return self.ranking_configuration.min_list_weight

    async def resolve_median_voter_count(self) -> float:
        """Batch median if one was given, else the configuration's current median."""
        if self._median_voter_count is None:
            self._median_voter_count = await resolve_median_voter_count(
                self.session, self.ranking_configuration.id
            )
        return self._median_voter_count

    # ============================================
    # CALCULATION
    # ============================================

    async def calculate_weight(self) -> int:
        """Compute the weight; may also fill ranked_list.calculated_weight_details."""
        raise NotImplementedError("Subclasses must implement calculate_weight")

    async def call(self) -> int:
        """Compute the weight, write it onto the ranked list and return it."""
        weight = await self.calculate_weight()
        self.ranked_list.weight = weight
        await self.session.flush()

        logger.debug(
            f"RankedList {self.ranked_list.id}: weight {self.previous_weight} -> {weight} "
            f"(algorithm v{self.version})"
        )
        return weight
