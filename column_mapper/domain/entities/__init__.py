"""Domain entities.

Records exchanged with the mapping core: source columns, target fields,
scored candidates, assignments and summary statistics.
"""

from .columns import SourceColumn, TargetField
from .mapping import (
    Assignment,
    AssignmentSet,
    MappingResult,
    MatchCandidate,
    SummaryStats,
)
from .types import (
    AssignmentPhase,
    AssignmentStatus,
    ColumnType,
    FieldCategory,
    MatchKind,
)

__all__ = [
    # Enumerations
    "AssignmentPhase",
    "AssignmentStatus",
    "ColumnType",
    "FieldCategory",
    "MatchKind",
    # Input records
    "SourceColumn",
    "TargetField",
    # Mapping records
    "Assignment",
    "AssignmentSet",
    "MatchCandidate",
    "MappingResult",
    "SummaryStats",
]
