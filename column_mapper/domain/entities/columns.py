from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import ColumnType, FieldCategory


class SourceColumn(BaseModel):
    """A column extracted from an uploaded tabular file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    inferred_type: ColumnType = Field(default=ColumnType.TEXT, alias="inferredType")
    sample_values: tuple[Any, ...] = Field(default=(), alias="sampleValues")


class TargetField(BaseModel):
    """A field of the destination data model that can receive a mapping."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    category: FieldCategory = FieldCategory.UNCATEGORIZED
    type: ColumnType = ColumnType.TEXT
    domain_relevance: float = Field(
        default=0.0, ge=0.0, le=10.0, alias="domainRelevance"
    )
