from __future__ import annotations

from typing import TYPE_CHECKING

from ....constants import Relevance, TypeInference
from ...entities.columns import TargetField
from ...entities.types import ColumnType, FieldCategory
from ..mapping.constants import DOMAIN_FIELD_PATTERNS, MEASURE_NAME_PATTERNS, SPORT_TERMS

if TYPE_CHECKING:
    from collections.abc import Iterable

EXACT_PATTERN_SCORE = 10.0
PARTIAL_PATTERN_SCORE = 5.0
SPORT_TERM_SCORE = 3.0
DIMENSION_MAX_CARDINALITY = 1000


def _all_patterns() -> tuple[str, ...]:
    patterns = (*DOMAIN_FIELD_PATTERNS["dimensions"], *DOMAIN_FIELD_PATTERNS["measures"])
    return tuple(dict.fromkeys(patterns))


def calculate_domain_relevance(name: str, patterns: Iterable[str] | None = None) -> float:
    """Rate a field name against the domain patterns on a 0-10 scale."""
    name_lower = name.strip().lower()
    if not name_lower:
        return 0.0
    pattern_list = tuple(patterns) if patterns is not None else _all_patterns()

    score = 0.0
    if name_lower in pattern_list:
        score += EXACT_PATTERN_SCORE
    for pattern in pattern_list:
        if pattern in name_lower or name_lower in pattern:
            score += PARTIAL_PATTERN_SCORE
    for term in SPORT_TERMS:
        if term in name_lower:
            score += SPORT_TERM_SCORE
    return min(score, Relevance.MAX_SCORE)


def infer_field_type(
    *, is_numeric: bool = False, tags: Iterable[str] = (), cardinality: int = 0
) -> ColumnType:
    """Derive a field type from data model metadata."""
    tag_set = set(tags)
    if is_numeric:
        return ColumnType.NUMERIC
    if "$date" in tag_set:
        return ColumnType.DATE
    if "$timestamp" in tag_set:
        return ColumnType.TIMESTAMP
    if 0 < cardinality < TypeInference.CATEGORICAL_FIELD_CARDINALITY:
        return ColumnType.CATEGORICAL
    return ColumnType.TEXT


def infer_field_category(
    name: str,
    field_type: ColumnType,
    *,
    is_numeric: bool = False,
    cardinality: int = 0,
) -> FieldCategory:
    if 0 < cardinality < DIMENSION_MAX_CARDINALITY:
        return FieldCategory.DIMENSION
    if field_type in (ColumnType.DATE, ColumnType.TIMESTAMP):
        return FieldCategory.DIMENSION
    if not is_numeric:
        return FieldCategory.DIMENSION
    if cardinality > TypeInference.MEASURE_FIELD_CARDINALITY:
        return FieldCategory.MEASURE
    name_lower = name.lower()
    if any(pattern in name_lower for pattern in MEASURE_NAME_PATTERNS):
        return FieldCategory.MEASURE
    return FieldCategory.UNCATEGORIZED


def build_target_field(
    name: str,
    *,
    is_numeric: bool = False,
    tags: Iterable[str] = (),
    cardinality: int = 0,
) -> TargetField:
    """Describe a data model field with its type, category and relevance."""
    tag_list = tuple(tags)
    field_type = infer_field_type(
        is_numeric=is_numeric, tags=tag_list, cardinality=cardinality
    )
    return TargetField(
        name=name,
        category=infer_field_category(
            name, field_type, is_numeric=is_numeric, cardinality=cardinality
        ),
        type=field_type,
        domain_relevance=calculate_domain_relevance(name),
    )
