from typing import ClassVar


class Defaults:
    PHASE_A_THRESHOLD = 0.5
    PHASE_B_THRESHOLD = 0.2
    RELAXED_DISPLAY_FLOOR = 0.3
    FORCED_CONFIDENCE = 0.1
    UNMAPPED_CONFIDENCE = 0.0
    CANDIDATE_EPSILON = 0.05
    MAX_ALTERNATIVES = 3
    SUBSTITUTION_PENALTY = 0.9
    MIN_RETAINED_CONFIDENCE = 0.1
    CONFLICT_PENALTY = 0.5
    MANUAL_CONFIDENCE = 0.95
    MIN_CONFIDENCE = 0.15
    SAMPLE_SIZE = 10


class ConfidenceBuckets:
    HIGH = 0.8
    MEDIUM = 0.5


class Relevance:
    MAX_SCORE = 10.0
    BOOST_THRESHOLD = 5.0
    BOOST = 0.1


class TypeInference:
    SAMPLE_LIMIT = 100
    DOMINANT_RATIO = 0.8
    MIXED_NUMERIC_RATIO = 0.5
    CATEGORICAL_MIN_VALUES = 4
    CATEGORICAL_UNIQUE_RATIO = 0.5
    CATEGORICAL_FIELD_CARDINALITY = 50
    MEASURE_FIELD_CARDINALITY = 50


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class MissingValues:
    STRING_MARKERS: ClassVar[frozenset[str]] = frozenset(
        {"NAN", "<NA>", "NONE", "NULL", "N/A"}
    )


class ConfigFiles:
    DEFAULT_NAME = "column_mapper.toml"
