"""Unit tests for MatchScorer.

Each test pins one rung of the scoring cascade with names chosen so that no
stronger rung fires.
"""

import pytest

from column_mapper.domain.entities import ColumnType, MatchKind
from column_mapper.domain.services.mapping.scorer import MatchScorer, ScoringWeights


@pytest.fixture
def scorer():
    return MatchScorer()


class TestExactMatch:
    def test_case_insensitive_exact_match(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("Time"), make_field("time"))

        assert candidate.confidence == 1.0
        assert candidate.match_kind is MatchKind.EXACT
        assert candidate.rationale == "Exact name match"

    def test_exact_match_ignores_type_mismatch(self, scorer, make_column, make_field):
        candidate = scorer.score(
            make_column("place", ColumnType.NUMERIC),
            make_field("place", ColumnType.DATE),
        )

        assert candidate.confidence == 1.0
        assert candidate.match_kind is MatchKind.EXACT


class TestNameStrategies:
    """Tests for the non-exact name heuristics."""

    def test_containment(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("customer"), make_field("customer_id"))

        assert candidate.match_kind is MatchKind.CONTAINS
        assert candidate.confidence == pytest.approx(0.8 + 0.15 * 8 / 11)
        assert candidate.rationale == "Name containment (73% overlap)"

    def test_domain_synonym_beats_containment(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("athlete_name"), make_field("name"))

        assert candidate.match_kind is MatchKind.DOMAIN_SYNONYM
        assert candidate.confidence == pytest.approx(0.95)
        assert candidate.rationale == "Domain pattern match on 'name'"

    def test_word_boundary_same_words(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("zip_code"), make_field("code_zip"))

        assert candidate.match_kind is MatchKind.WORD_BOUNDARY
        assert candidate.confidence == pytest.approx(0.8)
        assert candidate.rationale == "Same words in name"

    def test_edit_distance(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("adress"), make_field("address"))

        assert candidate.match_kind is MatchKind.FUZZY_EDIT_DISTANCE
        assert candidate.confidence == pytest.approx(0.9 * 6 / 7)
        assert candidate.rationale == "Strong name similarity (86%)"

    def test_phonetic(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("dstnc"), make_field("distance"))

        assert candidate.match_kind is MatchKind.PHONETIC
        assert candidate.confidence == pytest.approx(0.7)
        assert candidate.rationale == "Names sound alike"

    def test_character_frequency_outranks_weaker_evidence(
        self, scorer, make_column, make_field
    ):
        candidate = scorer.score(make_column("lemon"), make_field("melon"))

        assert candidate.match_kind is MatchKind.CHARACTER_FREQUENCY
        assert candidate.confidence == pytest.approx(0.6)

    def test_tie_breakers_need_name_evidence(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("xyz123"), make_field("qrs789"))

        assert candidate.confidence == 0.0
        assert candidate.match_kind is MatchKind.NONE
        assert candidate.rationale == "No name similarity"


class TestAdjustments:
    """Tests for the type and relevance adjustments."""

    def test_type_mismatch_penalty(self, scorer, make_column, make_field):
        candidate = scorer.score(
            make_column("customer", ColumnType.NUMERIC),
            make_field("customer_id", ColumnType.DATE),
        )

        assert candidate.confidence == pytest.approx((0.8 + 0.15 * 8 / 11) * 0.4)
        assert candidate.rationale.endswith("(data type mismatch)")

    def test_compatible_types_keep_rationale_clean(
        self, scorer, make_column, make_field
    ):
        candidate = scorer.score(
            make_column("zip_code", ColumnType.TEXT),
            make_field("code_zip", ColumnType.CATEGORICAL),
        )

        assert candidate.confidence == pytest.approx(0.8 * 0.95)
        assert "mismatch" not in candidate.rationale

    def test_domain_relevance_boost(self, scorer, make_column, make_field):
        candidate = scorer.score(
            make_column("zip_code"), make_field("code_zip", domain_relevance=8)
        )

        assert candidate.confidence == pytest.approx(0.88)
        assert candidate.rationale == "Same words in name (domain-relevant field)"

    def test_boost_is_clamped(self, scorer, make_column, make_field):
        candidate = scorer.score(
            make_column("athlete_name"), make_field("name", domain_relevance=10)
        )

        assert candidate.confidence == 1.0

    def test_relevance_at_threshold_gets_no_boost(
        self, scorer, make_column, make_field
    ):
        candidate = scorer.score(
            make_column("zip_code"), make_field("code_zip", domain_relevance=5)
        )

        assert candidate.confidence == pytest.approx(0.8)


class TestTypeCompatibility:
    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            (ColumnType.TEXT, ColumnType.TEXT, 1.0),
            (ColumnType.NUMERIC, ColumnType.INTEGER, 0.95),
            (ColumnType.TIME, ColumnType.NUMERIC, 0.85),
            (ColumnType.TEXT, ColumnType.NUMERIC, 0.6),
            (ColumnType.EMPTY, ColumnType.DATE, 0.9),
            (ColumnType.NUMERIC, ColumnType.DATE, 0.4),
        ],
    )
    def test_factor(self, scorer, source, target, expected):
        assert scorer.type_compatibility(source, target) == pytest.approx(expected)


class TestEdgeCases:
    def test_empty_name(self, scorer, make_column, make_field):
        candidate = scorer.score(make_column("  "), make_field("time"))

        assert candidate.confidence == 0.0
        assert candidate.match_kind is MatchKind.NONE
        assert candidate.rationale == "Empty column or field name"

    @pytest.mark.parametrize(
        ("column", "field"),
        [
            ("time", "finish_time"),
            ("Place", "rank"),
            ("swimmer", "athlete"),
            ("a", "zzzzzzzzzzzzzzzzzzzz"),
            ("lane_no", "lane_number"),
        ],
    )
    def test_confidence_is_bounded(self, scorer, make_column, make_field, column, field):
        for relevance in (0.0, 10.0):
            for field_type in ColumnType:
                candidate = scorer.score(
                    make_column(column, ColumnType.NUMERIC),
                    make_field(field, field_type, domain_relevance=relevance),
                )
                assert 0.0 <= candidate.confidence <= 1.0

    def test_custom_weights(self, make_column, make_field):
        scorer = MatchScorer(ScoringWeights(token_equal=0.7))

        candidate = scorer.score(make_column("zip_code"), make_field("code_zip"))

        assert candidate.confidence == pytest.approx(0.7)

    def test_invalid_weights_rejected(self):
        with pytest.raises(ValueError, match="relevance_boost"):
            ScoringWeights(relevance_boost=0.5)
