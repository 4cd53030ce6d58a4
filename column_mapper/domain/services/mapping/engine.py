"""Mapping engine facade.

This module provides the MappingEngine class which turns source columns and
target fields into a validated assignment set with summary statistics.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from ....constants import ConfidenceBuckets, Defaults
from ...entities.columns import SourceColumn, TargetField
from ...entities.mapping import MappingResult
from ...entities.types import AssignmentPhase, AssignmentStatus, MatchKind
from .conflict_resolver import ConflictResolver
from .phased_assigner import PhasedAssigner
from .policy import AssignmentPolicy
from .scorer import MatchScorer
from .summary import summarize

if TYPE_CHECKING:
    from ...entities.mapping import Assignment, AssignmentSet

RecordT = TypeVar("RecordT", SourceColumn, TargetField)


def coerce_records(items: Any, model: type[RecordT]) -> list[RecordT] | None:
    """Turn caller input into records, or None when it is not a sequence.

    Items that are neither records nor valid record mappings are skipped,
    as are repeated names (the first occurrence wins).
    """
    if items is None or isinstance(items, (str, bytes, Mapping)):
        return None
    if not isinstance(items, Sequence):
        return None

    records: list[RecordT] = []
    seen: set[str] = set()
    for item in items:
        if isinstance(item, model):
            record = item
        elif isinstance(item, Mapping):
            try:
                record = model.model_validate(item)
            except ValidationError:
                continue
        else:
            continue
        if record.name in seen:
            continue
        seen.add(record.name)
        records.append(record)
    return records


class MappingEngine:
    """Suggest a one-to-one mapping from source columns to target fields.

    Example:
        >>> engine = MappingEngine()
        >>> result = engine.suggest(columns, fields)
        >>> for name, assignment in result.assignments.items():
        ...     print(f"{name} -> {assignment.target_name} ({assignment.confidence:.0%})")
    """

    def __init__(
        self,
        *,
        scorer: MatchScorer | None = None,
        policy: AssignmentPolicy | None = None,
        high_threshold: float = ConfidenceBuckets.HIGH,
        medium_threshold: float = ConfidenceBuckets.MEDIUM,
    ) -> None:
        self.scorer = scorer or MatchScorer()
        self.policy = policy or AssignmentPolicy()
        self.high_threshold = high_threshold
        self.medium_threshold = medium_threshold
        self.assigner = PhasedAssigner(self.scorer, self.policy)
        self.resolver = ConflictResolver(self.policy)

    def suggest(self, columns: Any, fields: Any) -> MappingResult:
        """Map every source column to at most one target field.

        Args:
            columns: Sequence of SourceColumn records (or record mappings)
            fields: Sequence of TargetField records (or record mappings)

        Returns:
            MappingResult with one assignment per column and its summary
        """
        source_columns = coerce_records(columns, SourceColumn)
        if source_columns is None:
            return self.build_result({})
        target_fields = coerce_records(fields, TargetField) or []

        assignments = self.assigner.assign(source_columns, target_fields)
        return self.build_result(self.resolver.validate(assignments))

    def validate(self, assignments: AssignmentSet) -> AssignmentSet:
        return self.resolver.validate(assignments)

    def apply_manual_mapping(
        self,
        assignments: AssignmentSet,
        column_name: str,
        field: TargetField | None,
    ) -> AssignmentSet:
        """Override one column with a user choice and re-validate.

        Passing ``field=None`` clears the mapping. Manual choices win
        conflicts against automatic ones; the losing column falls back to its
        alternatives.
        """
        current = assignments.get(column_name)
        if current is None:
            return dict(assignments)

        if field is None:
            update: dict[str, Any] = {
                "target_field": None,
                "confidence": Defaults.UNMAPPED_CONFIDENCE,
                "match_kind": MatchKind.NONE,
                "rationale": "Mapping cleared by user",
            }
        else:
            update = {
                "target_field": field,
                "confidence": self.policy.manual_confidence,
                "match_kind": MatchKind.MANUAL,
                "rationale": "Manually selected by user",
                "alternatives": [
                    c for c in current.alternatives if c.target_name != field.name
                ],
            }
        update.update(
            phase=AssignmentPhase.MANUAL,
            status=AssignmentStatus.TENTATIVE,
            conflict=False,
        )

        updated = dict(assignments)
        updated[column_name] = current.model_copy(update=update)
        return self.resolver.validate(updated)

    @staticmethod
    def select_mappings(
        assignments: AssignmentSet, min_confidence: float = Defaults.MIN_CONFIDENCE
    ) -> dict[str, Assignment]:
        """Mapped entries strong enough to accept without review."""
        return {
            name: assignment
            for name, assignment in assignments.items()
            if assignment.is_mapped and assignment.confidence > min_confidence
        }

    def build_result(self, assignments: AssignmentSet) -> MappingResult:
        """Wrap an assignment set, e.g. after manual edits, with fresh statistics."""
        summary = summarize(
            assignments,
            high_threshold=self.high_threshold,
            medium_threshold=self.medium_threshold,
        )
        return MappingResult(assignments=dict(assignments), summary=summary)
