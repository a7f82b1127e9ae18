"""
Shared Enums

Application-wide enums used by the models and the weight engine.
"""
from enum import Enum


class MediaType(str, Enum):
    """Media kind of a list or ranking configuration."""
    BOOKS = "books"
    MOVIES = "movies"
    GAMES = "games"
    MUSIC = "music"


class PenaltyMediaType(str, Enum):
    """Scope of a penalty: one media kind, or every kind."""
    CROSS_MEDIA = "cross_media"
    BOOKS = "books"
    MOVIES = "movies"
    GAMES = "games"
    MUSIC = "music"


class DynamicPenaltyType(str, Enum):
    """Recognized list attributes that drive dynamic penalties."""
    VOTER_NAMES_UNKNOWN = "voter_names_unknown"
    NUMBER_OF_VOTERS = "number_of_voters"
    VOTER_COUNT_UNKNOWN = "voter_count_unknown"
    VOTER_COUNT_ESTIMATED = "voter_count_estimated"
    LOCATION_SPECIFIC = "location_specific"
    CATEGORY_SPECIFIC = "category_specific"
    NUM_YEARS_COVERED = "num_years_covered"


class PenaltySource(str, Enum):
    """How a penalty contribution was derived (recorded in weight audits)."""
    STATIC = "static"
    DYNAMIC_ATTRIBUTE = "dynamic_attribute"
    DYNAMIC_VOTER_COUNT = "dynamic_voter_count"
    DYNAMIC_TEMPORAL = "dynamic_temporal"
