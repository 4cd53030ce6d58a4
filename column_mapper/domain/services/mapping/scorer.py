"""Confidence scoring for one (source column, target field) pair.

The scorer runs a cascade of name heuristics, keeps the strongest one, and
then adjusts it for type compatibility and domain relevance. All numeric
weights live in :class:`ScoringWeights`, so there is exactly one place where
a match confidence is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from ....constants import Relevance
from ...entities.mapping import MatchCandidate
from ...entities.types import ColumnType, MatchKind
from .constants import (
    EMPTY_COLUMN_COMPATIBILITY,
    PARTIAL_TYPE_COMPATIBILITY,
    TYPE_COMPATIBILITY,
)
from .heuristics import (
    SynonymHit,
    best_synonym_match,
    character_frequency_similarity,
    common_prefix_length,
    containment_ratio,
    length_similarity,
    levenshtein_similarity,
    phonetic_signature,
    token_overlap,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...entities.columns import SourceColumn, TargetField


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Weight table for the scoring cascade.

    Ranges: containment 0.80-0.95, synonyms 0.75-0.95, token overlap
    0.40-0.80, edit distance up to 0.90, phonetic 0.50-0.70, tie-breakers
    up to 0.60.
    """

    exact: float = 1.0
    contains_base: float = 0.8
    contains_span: float = 0.15
    synonym_exact: float = 0.95
    synonym_mixed: float = 0.85
    synonym_loose: float = 0.75
    token_equal: float = 0.8
    token_base: float = 0.4
    token_span: float = 0.35
    token_prefix: float = 0.45
    token_prefix_min_length: int = 3
    fuzzy_weight: float = 0.9
    fuzzy_min_similarity: float = 0.5
    phonetic_equal: float = 0.7
    phonetic_prefix: float = 0.5
    phonetic_min_length: int = 3
    frequency_cap: float = 0.6
    length_cap: float = 0.6
    type_floor: float = 0.4
    type_mismatch_note_below: float = 0.5
    relevance_threshold: float = Relevance.BOOST_THRESHOLD
    relevance_boost: float = Relevance.BOOST

    def __post_init__(self) -> None:
        for name in (
            "exact",
            "contains_base",
            "synonym_exact",
            "token_equal",
            "fuzzy_weight",
            "phonetic_equal",
            "frequency_cap",
            "length_cap",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        if not 0.0 < self.type_floor <= 1.0:
            raise ValueError(
                f"type_floor must be in (0.0, 1.0], got {self.type_floor}"
            )
        if not 0.0 <= self.relevance_boost <= 0.1:
            raise ValueError(
                f"relevance_boost must be between 0.0 and 0.1, got {self.relevance_boost}"
            )


class _Evidence(NamedTuple):
    confidence: float
    kind: MatchKind
    reason: str


_NO_EVIDENCE = _Evidence(0.0, MatchKind.NONE, "No name similarity")


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class MatchScorer:
    """Score a source column against a target field.

    Example:
        >>> scorer = MatchScorer()
        >>> candidate = scorer.score(column, field)
        >>> candidate.confidence, candidate.match_kind
    """

    def __init__(self, weights: ScoringWeights | None = None) -> None:
        self.weights = weights or ScoringWeights()
        self._name_strategies: tuple[Callable[[str, str], _Evidence | None], ...] = (
            self._contains,
            self._domain_synonym,
            self._word_boundary,
            self._edit_distance,
            self._phonetic,
        )
        self._tie_breakers: tuple[Callable[[str, str], _Evidence | None], ...] = (
            self._character_frequency,
            self._length_ratio,
        )

    def score(self, column: SourceColumn, field: TargetField) -> MatchCandidate:
        column_name = (column.name or "").strip()
        field_name = (field.name or "").strip()

        if not column_name or not field_name:
            return self._candidate(
                column, field, _Evidence(0.0, MatchKind.NONE, "Empty column or field name")
            )

        if column_name.casefold() == field_name.casefold():
            return self._candidate(
                column, field, _Evidence(self.weights.exact, MatchKind.EXACT, "Exact name match")
            )

        best = self._strongest(self._name_strategies, column_name, field_name, _NO_EVIDENCE)
        if best.confidence <= 0.0:
            return self._candidate(column, field, _NO_EVIDENCE)
        best = self._strongest(self._tie_breakers, column_name, field_name, best)

        confidence = best.confidence
        reason = best.reason

        type_factor = self.type_compatibility(column.inferred_type, field.type)
        confidence *= type_factor
        if type_factor < self.weights.type_mismatch_note_below:
            reason += " (data type mismatch)"

        if field.domain_relevance > self.weights.relevance_threshold:
            confidence *= 1 + self.weights.relevance_boost
            reason += " (domain-relevant field)"

        return self._candidate(column, field, _Evidence(_clamp(confidence), best.kind, reason))

    def type_compatibility(self, source: ColumnType, target: ColumnType) -> float:
        """Multiplier in (0, 1] for pairing a column type with a field type."""
        if source == target:
            return 1.0
        if source == ColumnType.EMPTY:
            return EMPTY_COLUMN_COMPATIBILITY
        factor = TYPE_COMPATIBILITY.get(source, {}).get(target)
        if factor is not None:
            return factor
        return PARTIAL_TYPE_COMPATIBILITY.get((source, target), self.weights.type_floor)

    @staticmethod
    def _strongest(
        strategies: tuple[Callable[[str, str], _Evidence | None], ...],
        column_name: str,
        field_name: str,
        best: _Evidence,
    ) -> _Evidence:
        for strategy in strategies:
            evidence = strategy(column_name, field_name)
            # Strictly greater: ties keep the earlier, more specific strategy.
            if evidence is not None and evidence.confidence > best.confidence:
                best = evidence
        return best

    @staticmethod
    def _candidate(
        column: SourceColumn, field: TargetField, evidence: _Evidence
    ) -> MatchCandidate:
        return MatchCandidate(
            source_column=column,
            target_field=field,
            confidence=evidence.confidence,
            match_kind=evidence.kind,
            rationale=evidence.reason,
        )

    def _contains(self, column_name: str, field_name: str) -> _Evidence | None:
        ratio = containment_ratio(column_name, field_name)
        if ratio is None:
            return None
        w = self.weights
        return _Evidence(
            w.contains_base + w.contains_span * ratio,
            MatchKind.CONTAINS,
            f"Name containment ({round(ratio * 100)}% overlap)",
        )

    def _domain_synonym(self, column_name: str, field_name: str) -> _Evidence | None:
        match = best_synonym_match(column_name, field_name)
        if match is None:
            return None
        concept, column_hit, field_hit = match
        exact_hits = (column_hit is SynonymHit.EXACT) + (field_hit is SynonymHit.EXACT)
        w = self.weights
        confidence = (w.synonym_loose, w.synonym_mixed, w.synonym_exact)[exact_hits]
        return _Evidence(
            confidence,
            MatchKind.DOMAIN_SYNONYM,
            f"Domain pattern match on '{concept}'",
        )

    def _word_boundary(self, column_name: str, field_name: str) -> _Evidence | None:
        w = self.weights
        left, right, shared, prefix = token_overlap(
            column_name, field_name, prefix_min_length=w.token_prefix_min_length
        )
        if not left or not right:
            return None
        if left == right:
            return _Evidence(w.token_equal, MatchKind.WORD_BOUNDARY, "Same words in name")
        if shared:
            ratio = len(shared) / max(len(left), len(right))
            words = ", ".join(sorted(shared))
            return _Evidence(
                w.token_base + w.token_span * ratio,
                MatchKind.WORD_BOUNDARY,
                f"Shared words: {words}",
            )
        if prefix:
            return _Evidence(w.token_prefix, MatchKind.WORD_BOUNDARY, "Word prefix overlap")
        return None

    def _edit_distance(self, column_name: str, field_name: str) -> _Evidence | None:
        similarity = levenshtein_similarity(column_name, field_name)
        if similarity <= self.weights.fuzzy_min_similarity:
            return None
        return _Evidence(
            similarity * self.weights.fuzzy_weight,
            MatchKind.FUZZY_EDIT_DISTANCE,
            f"Strong name similarity ({round(similarity * 100)}%)",
        )

    def _phonetic(self, column_name: str, field_name: str) -> _Evidence | None:
        left = phonetic_signature(column_name)
        right = phonetic_signature(field_name)
        w = self.weights
        if not left or not right:
            return None
        if left == right and len(left) >= w.phonetic_min_length:
            return _Evidence(w.phonetic_equal, MatchKind.PHONETIC, "Names sound alike")
        if common_prefix_length(left, right) >= w.phonetic_min_length:
            return _Evidence(
                w.phonetic_prefix, MatchKind.PHONETIC, "Names start with similar sounds"
            )
        return None

    def _character_frequency(self, column_name: str, field_name: str) -> _Evidence | None:
        similarity = character_frequency_similarity(column_name, field_name)
        if not similarity:
            return None
        return _Evidence(
            similarity * self.weights.frequency_cap,
            MatchKind.CHARACTER_FREQUENCY,
            f"Similar character makeup ({round(similarity * 100)}%)",
        )

    def _length_ratio(self, column_name: str, field_name: str) -> _Evidence | None:
        ratio = length_similarity(column_name, field_name)
        if not ratio:
            return None
        return _Evidence(
            ratio * self.weights.length_cap,
            MatchKind.LENGTH_SIMILARITY,
            f"Similar name length ({round(ratio * 100)}%)",
        )
