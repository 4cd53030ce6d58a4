from __future__ import annotations

from typing import TYPE_CHECKING

from ....constants import ConfidenceBuckets
from ...entities.mapping import SummaryStats

if TYPE_CHECKING:
    from ...entities.mapping import AssignmentSet


def summarize(
    assignments: AssignmentSet,
    *,
    high_threshold: float = ConfidenceBuckets.HIGH,
    medium_threshold: float = ConfidenceBuckets.MEDIUM,
) -> SummaryStats:
    """Aggregate coverage and confidence buckets over an assignment set.

    Buckets and the mean only consider mapped entries. Unresolved conflicts
    count as unmapped and are also reported separately.
    """
    mapped = [a for a in assignments.values() if a.is_mapped]
    high = sum(1 for a in mapped if a.confidence >= high_threshold)
    medium = sum(1 for a in mapped if medium_threshold <= a.confidence < high_threshold)
    total_confidence = sum(a.confidence for a in mapped)

    return SummaryStats(
        total_columns=len(assignments),
        mapped_columns=len(mapped),
        unmapped_columns=len(assignments) - len(mapped),
        conflicted_columns=sum(1 for a in assignments.values() if a.conflict),
        high_confidence=high,
        medium_confidence=medium,
        low_confidence=len(mapped) - high - medium,
        average_confidence=total_confidence / len(mapped) if mapped else 0.0,
    )
