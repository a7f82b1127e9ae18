"""
Constants package for the list weight engine.

Contains shared enums used by the models and the calculators.
"""

from .enums import (
    MediaType,
    PenaltyMediaType,
    DynamicPenaltyType,
    PenaltySource,
)

__all__ = [
    # Enums
    "MediaType",
    "PenaltyMediaType",
    "DynamicPenaltyType",
    "PenaltySource",
]
