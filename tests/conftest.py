from collections.abc import Callable

import pytest

from column_mapper.domain.entities import (
    ColumnType,
    FieldCategory,
    SourceColumn,
    TargetField,
)
from column_mapper.domain.services.mapping.utils import clear_caches


@pytest.fixture(autouse=True)
def _isolated_mapper_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep threshold overrides from the developer's shell out of the tests."""
    for name in (
        "COLUMN_MAPPER_PHASE_A_THRESHOLD",
        "COLUMN_MAPPER_PHASE_B_THRESHOLD",
        "COLUMN_MAPPER_FORCED_CONFIDENCE",
        "COLUMN_MAPPER_MIN_CONFIDENCE",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_caches()


@pytest.fixture
def make_column() -> Callable[..., SourceColumn]:
    """Build a SourceColumn, defaulting to a text column without samples."""

    def _make(
        name: str,
        inferred_type: ColumnType = ColumnType.TEXT,
        sample_values: tuple[object, ...] = (),
    ) -> SourceColumn:
        return SourceColumn(
            name=name, inferred_type=inferred_type, sample_values=sample_values
        )

    return _make


@pytest.fixture
def make_field() -> Callable[..., TargetField]:
    """Build a TargetField, defaulting to an uncategorized text field."""

    def _make(
        name: str,
        field_type: ColumnType = ColumnType.TEXT,
        domain_relevance: float = 0.0,
        category: FieldCategory = FieldCategory.UNCATEGORIZED,
    ) -> TargetField:
        return TargetField(
            name=name,
            type=field_type,
            domain_relevance=domain_relevance,
            category=category,
        )

    return _make
