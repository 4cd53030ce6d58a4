from dataclasses import dataclass

from pydantic import BaseModel, Field

from .columns import SourceColumn, TargetField
from .types import AssignmentPhase, AssignmentStatus, MatchKind


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    source_column: SourceColumn
    target_field: TargetField
    confidence: float
    match_kind: MatchKind
    rationale: str

    @property
    def target_name(self) -> str:
        return self.target_field.name


class Assignment(BaseModel):
    """Chosen target for one source column, plus its runner-up candidates.

    An entry with ``conflict`` set keeps its target so the consumer can see
    which claim lost, but it does not count as mapped.
    """

    source_column: str
    target_field: TargetField | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    match_kind: MatchKind = MatchKind.NONE
    rationale: str = ""
    alternatives: list[MatchCandidate] = Field(default_factory=list)
    status: AssignmentStatus = AssignmentStatus.UNASSIGNED
    phase: AssignmentPhase | None = None
    conflict: bool = False

    @property
    def target_name(self) -> str | None:
        return self.target_field.name if self.target_field is not None else None

    @property
    def is_mapped(self) -> bool:
        return self.target_field is not None and not self.conflict


AssignmentSet = dict[str, Assignment]


@dataclass(frozen=True, slots=True)
class SummaryStats:
    total_columns: int = 0
    mapped_columns: int = 0
    unmapped_columns: int = 0
    conflicted_columns: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    low_confidence: int = 0
    average_confidence: float = 0.0

    @property
    def coverage(self) -> float:
        if not self.total_columns:
            return 0.0
        return self.mapped_columns / self.total_columns


@dataclass(frozen=True, slots=True)
class MappingResult:
    assignments: AssignmentSet
    summary: SummaryStats

    def mapped(self) -> list[Assignment]:
        return [a for a in self.assignments.values() if a.is_mapped]

    @property
    def unmapped_columns(self) -> list[str]:
        return [name for name, a in self.assignments.items() if not a.is_mapped]

    def target_for(self, column_name: str) -> str | None:
        assignment = self.assignments.get(column_name)
        if assignment is None or not assignment.is_mapped:
            return None
        return assignment.target_name
