from __future__ import annotations

from typing import TYPE_CHECKING

from ...entities.types import AssignmentPhase, AssignmentStatus
from .policy import AssignmentPolicy

if TYPE_CHECKING:
    from ...entities.mapping import Assignment, AssignmentSet


class ConflictResolver:
    """Guarantee that no target field is claimed by two mapped columns.

    Manual selections are walked first, then mapped entries by descending
    confidence. The first claim on a field wins; a later claim moves to its
    first free alternative at a penalty, or is kept, discounted and flagged as
    an unresolved conflict.
    Flagged entries are walked last and never discounted twice, which makes
    :meth:`validate` idempotent.
    """

    def __init__(self, policy: AssignmentPolicy | None = None) -> None:
        self.policy = policy or AssignmentPolicy()

    def validate(self, assignments: AssignmentSet) -> AssignmentSet:
        resolved: AssignmentSet = {
            name: assignment.model_copy(update={"status": AssignmentStatus.FINAL})
            for name, assignment in assignments.items()
        }
        claims = sorted(
            (
                (name, assignment, assignment.target_field.name)
                for name, assignment in resolved.items()
                if assignment.target_field is not None
            ),
            key=lambda item: (
                item[1].conflict,
                item[1].phase is not AssignmentPhase.MANUAL,
                -item[1].confidence,
            ),
        )

        owners: dict[str, str] = {}
        for name, assignment, target in claims:
            if target not in owners:
                owners[target] = name
                if assignment.conflict:
                    resolved[name] = assignment.model_copy(update={"conflict": False})
                continue
            if assignment.conflict:
                continue
            updated = self._resolve(assignment, target, owners[target], owners)
            if updated.target_field is not None and not updated.conflict:
                owners[updated.target_field.name] = name
            resolved[name] = updated
        return resolved

    def _resolve(
        self,
        assignment: Assignment,
        target: str,
        owner: str,
        owners: dict[str, str],
    ) -> Assignment:
        alternative = next(
            (c for c in assignment.alternatives if c.target_name not in owners), None
        )
        if alternative is None:
            return assignment.model_copy(
                update={
                    "confidence": assignment.confidence * self.policy.conflict_penalty,
                    "conflict": True,
                    "rationale": f"Unresolved conflict: '{target}' already mapped to '{owner}'",
                }
            )

        confidence = max(
            alternative.confidence * self.policy.substitution_penalty,
            self.policy.min_retained_confidence,
        )
        return assignment.model_copy(
            update={
                "target_field": alternative.target_field,
                "confidence": min(confidence, 1.0),
                "match_kind": alternative.match_kind,
                "rationale": f"Alternative match (primary '{target}' was taken by '{owner}')",
                "alternatives": [
                    c
                    for c in assignment.alternatives
                    if c.target_name != alternative.target_name
                ],
            }
        )


def validate_assignments(
    assignments: AssignmentSet, policy: AssignmentPolicy | None = None
) -> AssignmentSet:
    """Functional shortcut for :meth:`ConflictResolver.validate`."""
    return ConflictResolver(policy).validate(assignments)
