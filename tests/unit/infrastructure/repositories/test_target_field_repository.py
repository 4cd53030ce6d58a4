"""Tests for TargetFieldRepository."""

import json
from pathlib import Path

import pytest

from column_mapper.domain.entities import ColumnType, FieldCategory
from column_mapper.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)
from column_mapper.infrastructure.repositories import (
    TargetFieldLoadError,
    TargetFieldRepository,
)


@pytest.fixture
def repo():
    return TargetFieldRepository()


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "fields.json"
    path.write_text(json.dumps(data))
    return path


class TestLoadFields:
    def test_explicit_records(self, repo, tmp_path):
        path = _write(
            tmp_path,
            [
                {
                    "name": "time",
                    "type": "time",
                    "category": "measure",
                    "domainRelevance": 10,
                }
            ],
        )

        [field] = repo.load_fields(path)

        assert field.name == "time"
        assert field.type is ColumnType.TIME
        assert field.category is FieldCategory.MEASURE
        assert field.domain_relevance == 10.0

    def test_metadata_records_are_profiled(self, repo, tmp_path):
        path = _write(
            tmp_path,
            {
                "fields": [
                    {"name": "points", "isNumeric": True},
                    {"name": "event_date", "tags": ["$date"]},
                    {"name": "team", "cardinality": 12},
                ]
            },
        )

        fields = {f.name: f for f in repo.load_fields(path)}

        assert fields["points"].type is ColumnType.NUMERIC
        assert fields["points"].category is FieldCategory.MEASURE
        assert fields["event_date"].type is ColumnType.DATE
        assert fields["team"].type is ColumnType.CATEGORICAL
        assert fields["team"].category is FieldCategory.DIMENSION
        assert fields["team"].domain_relevance > 0

    def test_unknown_keys_are_ignored(self, repo, tmp_path):
        path = _write(tmp_path, [{"name": "lane", "description": "Pool lane"}])

        assert [f.name for f in repo.load_fields(path)] == ["lane"]

    def test_missing_file(self, repo, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="Field catalog not found"):
            repo.load_fields(tmp_path / "missing.json")

    def test_invalid_json(self, repo, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text("[{")

        with pytest.raises(TargetFieldLoadError, match="Invalid JSON"):
            repo.load_fields(path)

    @pytest.mark.parametrize(
        "data",
        [
            [{"type": "text"}],
            [{"name": ""}],
            [{"name": "time", "type": "duration"}],
            {"name": "time"},
        ],
    )
    def test_invalid_catalog(self, repo, tmp_path, data):
        path = _write(tmp_path, data)

        with pytest.raises(TargetFieldLoadError, match="Invalid field catalog"):
            repo.load_fields(path)

    def test_load_error_is_a_parse_error(self):
        assert issubclass(TargetFieldLoadError, DataParseError)


def test_parse_fields_from_python_data(repo):
    fields = repo.parse_fields([{"name": "heat"}, {"name": "lane"}])

    assert [f.name for f in fields] == ["heat", "lane"]
