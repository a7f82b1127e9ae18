"""
Weight calculation errors.
"""


class WeightCalculationError(Exception):
    """Base class for weight engine errors."""


class UnsupportedAlgorithmVersionError(WeightCalculationError, ValueError):
    """Raised when a configuration names an algorithm version with no calculator."""

    def __init__(self, version):
        self.version = version
        super().__init__(f"Unsupported algorithm version: {version}")


class PenaltyScopeMismatchError(WeightCalculationError):
    """Raised when a penalty scoped to another media type reaches a list."""

    def __init__(self, penalty_id: int, penalty_media_type: str, list_id: int, list_media_type: str):
        self.penalty_id = penalty_id
        self.list_id = list_id
        super().__init__(
            f"Penalty {penalty_id} ({penalty_media_type}) cannot apply to "
            f"list {list_id} ({list_media_type})"
        )


class RankedListNotFoundError(WeightCalculationError):
    """Raised when a single-item recompute names an unknown ranked list."""

    def __init__(self, ranked_list_id: int):
        self.ranked_list_id = ranked_list_id
        super().__init__(f"RankedList {ranked_list_id} not found")
