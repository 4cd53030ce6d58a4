from enum import Enum


class ColumnType(str, Enum):
    """Data type of a source column or target field.

    Source columns use the first seven members. Target fields may also carry
    the numeric/date-derived variants ``integer`` and ``timestamp``.
    """

    NUMERIC = "numeric"
    TEXT = "text"
    TIME = "time"
    DATE = "date"
    CATEGORICAL = "categorical"
    MIXED_NUMERIC = "mixed_numeric"
    EMPTY = "empty"
    INTEGER = "integer"
    TIMESTAMP = "timestamp"


class FieldCategory(str, Enum):
    DIMENSION = "dimension"
    MEASURE = "measure"
    UNCATEGORIZED = "uncategorized"


class MatchKind(str, Enum):
    """Heuristic that produced the winning confidence of a candidate."""

    EXACT = "exact"
    CONTAINS = "contains"
    DOMAIN_SYNONYM = "domain-synonym"
    WORD_BOUNDARY = "word-boundary"
    FUZZY_EDIT_DISTANCE = "fuzzy-edit-distance"
    PHONETIC = "phonetic"
    CHARACTER_FREQUENCY = "character-frequency"
    LENGTH_SIMILARITY = "length-similarity"
    FORCED = "forced"
    MANUAL = "manual"
    NONE = "none"


class AssignmentStatus(str, Enum):
    UNASSIGNED = "unassigned"
    CANDIDATE_FOUND = "candidate-found"
    TENTATIVE = "tentatively-assigned"
    FINAL = "final"


class AssignmentPhase(str, Enum):
    PRECISION = "precision"
    RECALL = "recall"
    FORCED = "forced"
    MANUAL = "manual"
