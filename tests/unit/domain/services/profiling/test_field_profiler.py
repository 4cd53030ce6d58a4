"""Unit tests for target field profiling."""

import pytest

from column_mapper.domain.entities import ColumnType, FieldCategory
from column_mapper.domain.services.profiling import (
    build_target_field,
    calculate_domain_relevance,
    infer_field_category,
    infer_field_type,
)


class TestDomainRelevance:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("time", 10.0),
            ("foo_rank", 5.0),
            ("swim_lane", 8.0),
            ("xyz", 0.0),
            ("   ", 0.0),
        ],
    )
    def test_scores(self, name, expected):
        assert calculate_domain_relevance(name) == pytest.approx(expected)

    def test_custom_patterns(self):
        assert calculate_domain_relevance("bib", ["bib"]) == pytest.approx(10.0)

    def test_score_is_capped(self):
        assert calculate_domain_relevance("swimmer_stroke_distance") <= 10.0


class TestFieldType:
    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({"is_numeric": True, "tags": ["$date"]}, ColumnType.NUMERIC),
            ({"tags": ["$date"]}, ColumnType.DATE),
            ({"tags": ["$timestamp"]}, ColumnType.TIMESTAMP),
            ({"cardinality": 10}, ColumnType.CATEGORICAL),
            ({"cardinality": 50}, ColumnType.TEXT),
            ({}, ColumnType.TEXT),
        ],
    )
    def test_infer_field_type(self, kwargs, expected):
        assert infer_field_type(**kwargs) is expected


class TestFieldCategory:
    def test_text_is_dimension(self):
        assert infer_field_category("name", ColumnType.TEXT) is FieldCategory.DIMENSION

    def test_dates_are_dimensions(self):
        category = infer_field_category("day", ColumnType.DATE, is_numeric=True)
        assert category is FieldCategory.DIMENSION

    def test_low_cardinality_is_dimension(self):
        category = infer_field_category(
            "heat", ColumnType.NUMERIC, is_numeric=True, cardinality=8
        )
        assert category is FieldCategory.DIMENSION

    def test_high_cardinality_numeric_is_measure(self):
        category = infer_field_category(
            "value", ColumnType.NUMERIC, is_numeric=True, cardinality=5000
        )
        assert category is FieldCategory.MEASURE

    def test_measure_name(self):
        category = infer_field_category("total_points", ColumnType.NUMERIC, is_numeric=True)
        assert category is FieldCategory.MEASURE

    def test_uncategorized(self):
        category = infer_field_category("id", ColumnType.NUMERIC, is_numeric=True)
        assert category is FieldCategory.UNCATEGORIZED


def test_build_target_field():
    field = build_target_field("points", is_numeric=True)

    assert field.name == "points"
    assert field.type is ColumnType.NUMERIC
    assert field.category is FieldCategory.MEASURE
    assert field.domain_relevance == pytest.approx(10.0)
