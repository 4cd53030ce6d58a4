from __future__ import annotations

from typing import TYPE_CHECKING

from ....constants import Defaults
from ...entities.types import MatchKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...entities.columns import SourceColumn, TargetField
    from ...entities.mapping import MatchCandidate
    from .scorer import MatchScorer


def generate_candidates(
    column: SourceColumn,
    fields: Sequence[TargetField],
    scorer: MatchScorer,
    *,
    epsilon: float = Defaults.CANDIDATE_EPSILON,
) -> list[MatchCandidate]:
    """Rank every target field for one source column.

    Candidates below ``epsilon`` carry no evidence and are dropped. The rest
    are sorted by descending confidence; ties put exact matches first and
    otherwise keep the original field order.
    """
    scored = [
        (index, candidate)
        for index, candidate in enumerate(scorer.score(column, field) for field in fields)
        if candidate.confidence >= epsilon
    ]
    scored.sort(
        key=lambda item: (
            -item[1].confidence,
            item[1].match_kind is not MatchKind.EXACT,
            item[0],
        )
    )
    return [candidate for _, candidate in scored]
