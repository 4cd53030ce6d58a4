"""Target field catalog loaded from JSON.

The catalog is a JSON array of field records (or an object with a ``fields``
array). Each record needs a ``name``; ``type``, ``category`` and
``domainRelevance`` are derived from the model metadata keys ``isNumeric``,
``tags`` and ``cardinality`` when they are absent.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ...domain.entities.columns import TargetField
from ...domain.entities.types import ColumnType, FieldCategory
from ...domain.services.profiling import (
    calculate_domain_relevance,
    infer_field_category,
    infer_field_type,
)
from ..io.exceptions import DataParseError, DataSourceNotFoundError


class TargetFieldLoadError(DataParseError):
    pass


class FieldRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    type: ColumnType | None = None
    category: FieldCategory | None = None
    domain_relevance: float | None = Field(
        default=None, ge=0.0, le=10.0, alias="domainRelevance"
    )
    is_numeric: bool = Field(default=False, alias="isNumeric")
    tags: list[str] = Field(default_factory=list)
    cardinality: int = Field(default=0, ge=0)

    def to_target_field(self) -> TargetField:
        field_type = self.type or infer_field_type(
            is_numeric=self.is_numeric, tags=self.tags, cardinality=self.cardinality
        )
        category = self.category or infer_field_category(
            self.name,
            field_type,
            is_numeric=self.is_numeric,
            cardinality=self.cardinality,
        )
        relevance = (
            self.domain_relevance
            if self.domain_relevance is not None
            else calculate_domain_relevance(self.name)
        )
        return TargetField(
            name=self.name,
            category=category,
            type=field_type,
            domain_relevance=relevance,
        )


_RECORDS_ADAPTER = TypeAdapter(list[FieldRecord])


class TargetFieldRepository:
    pass

    def load_fields(self, file_path: str | Path) -> list[TargetField]:
        path = Path(file_path)
        if not path.exists():
            raise DataSourceNotFoundError(f"Field catalog not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise TargetFieldLoadError(f"Invalid JSON in {path}: {exc}") from exc
        except OSError as exc:
            raise TargetFieldLoadError(f"Failed to read {path}: {exc}") from exc
        return self.parse_fields(data, source=str(path))

    def parse_fields(self, data: object, *, source: str = "<data>") -> list[TargetField]:
        if isinstance(data, dict) and "fields" in data:
            data = data["fields"]
        try:
            records = _RECORDS_ADAPTER.validate_python(data)
        except ValidationError as exc:
            raise TargetFieldLoadError(
                f"Invalid field catalog in {source}: {exc.error_count()} error(s)\n{exc}"
            ) from exc
        return [record.to_target_field() for record in records]
