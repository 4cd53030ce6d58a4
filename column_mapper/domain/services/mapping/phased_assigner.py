"""Phased global assignment of source columns to target fields.

Assignment runs in three passes over all columns, sharing one set of consumed
target field names:

1. precision - columns with an exact-name candidate go first; a column takes
   its best still-available candidate only above the high threshold.
2. recall - remaining columns retry with a lower threshold; admitted
   confidences are raised to a display floor.
3. forced - remaining columns take any unconsumed field, guided by a small
   name-pattern priority table. Columns left over once fields run out stay
   unmapped.

The procedure is greedy and order sensitive by construction. Reserving exact
matches for the first pass keeps a late column from losing its obvious match
to an earlier column's weaker claim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....constants import Defaults
from ...entities.mapping import Assignment, MatchCandidate
from ...entities.types import AssignmentPhase, AssignmentStatus, MatchKind
from .candidates import generate_candidates
from .constants import FORCED_PRIORITY_PATTERNS
from .policy import AssignmentPolicy
from .scorer import MatchScorer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...entities.columns import SourceColumn, TargetField
    from ...entities.mapping import AssignmentSet

RankedCandidates = dict[str, list[MatchCandidate]]


class PhasedAssigner:
    """Run the precision, recall and forced passes over a batch of columns.

    Example:
        >>> assigner = PhasedAssigner()
        >>> assignments = assigner.assign(columns, fields)
        >>> assignments["athlete_name"].target_name
        'name'
    """

    def __init__(
        self,
        scorer: MatchScorer | None = None,
        policy: AssignmentPolicy | None = None,
    ) -> None:
        self.scorer = scorer or MatchScorer()
        self.policy = policy or AssignmentPolicy()

    def rank(
        self, columns: Sequence[SourceColumn], fields: Sequence[TargetField]
    ) -> RankedCandidates:
        """Rank candidates for every column.

        Columns are independent here, unlike in the passes that follow.
        """
        return {
            column.name: generate_candidates(
                column, fields, self.scorer, epsilon=self.policy.candidate_epsilon
            )
            for column in columns
        }

    def assign(
        self,
        columns: Sequence[SourceColumn],
        fields: Sequence[TargetField],
        consumed: set[str] | None = None,
    ) -> AssignmentSet:
        """Return one tentative assignment per column.

        Args:
            columns: Source columns, unique by name
            fields: Target fields, unique by name
            consumed: Field names that are already taken; updated in place

        Returns:
            Assignments keyed by column name, in column order
        """
        consumed = set() if consumed is None else consumed
        ranked = self.rank(columns, fields)
        assignments: AssignmentSet = {
            column.name: self._initial_assignment(column, ranked[column.name])
            for column in columns
        }

        self.run_precision_phase(columns, ranked, assignments, consumed)
        self.run_recall_phase(columns, ranked, assignments, consumed)
        self.run_forced_phase(columns, fields, ranked, assignments, consumed)
        return assignments

    def run_precision_phase(
        self,
        columns: Sequence[SourceColumn],
        ranked: RankedCandidates,
        assignments: AssignmentSet,
        consumed: set[str],
    ) -> None:
        for column in self._precision_order(columns, ranked):
            if self._is_assigned(assignments[column.name]):
                continue
            candidate = self._best_available(ranked[column.name], consumed)
            if candidate is None or candidate.confidence <= self.policy.phase_a_threshold:
                continue
            assignments[column.name] = self._commit(
                candidate,
                ranked[column.name],
                phase=AssignmentPhase.PRECISION,
                confidence=candidate.confidence,
                match_kind=candidate.match_kind,
                rationale=candidate.rationale,
            )
            consumed.add(candidate.target_name)

    def run_recall_phase(
        self,
        columns: Sequence[SourceColumn],
        ranked: RankedCandidates,
        assignments: AssignmentSet,
        consumed: set[str],
    ) -> None:
        for column in columns:
            if self._is_assigned(assignments[column.name]):
                continue
            candidate = self._best_available(ranked[column.name], consumed)
            if candidate is None or candidate.confidence <= self.policy.phase_b_threshold:
                continue
            assignments[column.name] = self._commit(
                candidate,
                ranked[column.name],
                phase=AssignmentPhase.RECALL,
                confidence=max(candidate.confidence, self.policy.relaxed_display_floor),
                match_kind=candidate.match_kind,
                rationale=f"{candidate.rationale} (accepted at relaxed threshold)",
            )
            consumed.add(candidate.target_name)

    def run_forced_phase(
        self,
        columns: Sequence[SourceColumn],
        fields: Sequence[TargetField],
        ranked: RankedCandidates,
        assignments: AssignmentSet,
        consumed: set[str],
    ) -> None:
        for column in columns:
            if self._is_assigned(assignments[column.name]):
                continue
            remaining = [field for field in fields if field.name not in consumed]
            if not remaining:
                assignments[column.name] = self._exhausted(
                    column, ranked[column.name], field_count=len(fields)
                )
                continue

            field, pattern = self._forced_choice(column, remaining)
            scored = next(
                (c for c in ranked[column.name] if c.target_name == field.name), None
            )
            score = scored.confidence if scored is not None else 0.0
            rationale = "Forced assignment to guarantee coverage"
            if pattern is not None:
                rationale += f" (name pattern '{pattern}')"
            candidate = MatchCandidate(
                source_column=column,
                target_field=field,
                confidence=score,
                match_kind=MatchKind.FORCED,
                rationale=rationale,
            )
            assignments[column.name] = self._commit(
                candidate,
                ranked[column.name],
                phase=AssignmentPhase.FORCED,
                confidence=max(score, self.policy.forced_confidence),
                match_kind=MatchKind.FORCED,
                rationale=rationale,
            )
            consumed.add(field.name)

    @staticmethod
    def _precision_order(
        columns: Sequence[SourceColumn], ranked: RankedCandidates
    ) -> list[SourceColumn]:
        return sorted(
            columns,
            key=lambda column: not any(
                c.match_kind is MatchKind.EXACT for c in ranked[column.name]
            ),
        )

    @staticmethod
    def _best_available(
        candidates: list[MatchCandidate], consumed: set[str]
    ) -> MatchCandidate | None:
        return next((c for c in candidates if c.target_name not in consumed), None)

    @staticmethod
    def _is_assigned(assignment: Assignment) -> bool:
        return assignment.status is AssignmentStatus.TENTATIVE

    @staticmethod
    def _forced_choice(
        column: SourceColumn, remaining: list[TargetField]
    ) -> tuple[TargetField, str | None]:
        column_name = column.name.lower()
        for column_pattern, field_pattern in FORCED_PRIORITY_PATTERNS:
            if not column_pattern.search(column_name):
                continue
            for field in remaining:
                if field_pattern.search(field.name.lower()):
                    return field, field_pattern.pattern
        return remaining[0], None

    def _initial_assignment(
        self, column: SourceColumn, candidates: list[MatchCandidate]
    ) -> Assignment:
        if not candidates:
            return Assignment(source_column=column.name, rationale="No candidates found")
        return Assignment(
            source_column=column.name,
            rationale="Candidates found, not yet assigned",
            alternatives=candidates[: self.policy.max_alternatives],
            status=AssignmentStatus.CANDIDATE_FOUND,
        )

    def _commit(
        self,
        candidate: MatchCandidate,
        candidates: list[MatchCandidate],
        *,
        phase: AssignmentPhase,
        confidence: float,
        match_kind: MatchKind,
        rationale: str,
    ) -> Assignment:
        alternatives = [
            c for c in candidates if c.target_name != candidate.target_name
        ][: self.policy.max_alternatives]
        return Assignment(
            source_column=candidate.source_column.name,
            target_field=candidate.target_field,
            confidence=min(confidence, 1.0),
            match_kind=match_kind,
            rationale=rationale,
            alternatives=alternatives,
            status=AssignmentStatus.TENTATIVE,
            phase=phase,
        )

    def _exhausted(
        self,
        column: SourceColumn,
        candidates: list[MatchCandidate],
        *,
        field_count: int,
    ) -> Assignment:
        if field_count:
            rationale = f"No target fields left: all {field_count} fields are already mapped"
        else:
            rationale = "No target fields available"
        return Assignment(
            source_column=column.name,
            target_field=None,
            confidence=Defaults.UNMAPPED_CONFIDENCE,
            match_kind=MatchKind.NONE,
            rationale=rationale,
            alternatives=candidates[: self.policy.max_alternatives],
            status=AssignmentStatus.CANDIDATE_FOUND if candidates else AssignmentStatus.UNASSIGNED,
        )
