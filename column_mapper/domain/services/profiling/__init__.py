"""Profiling helpers that turn raw tabular data and model metadata into
mapper input records."""

from .column_profiler import infer_column_type, profile_column, profile_frame
from .field_profiler import (
    build_target_field,
    calculate_domain_relevance,
    infer_field_category,
    infer_field_type,
)

__all__ = [
    "build_target_field",
    "calculate_domain_relevance",
    "infer_column_type",
    "infer_field_category",
    "infer_field_type",
    "profile_column",
    "profile_frame",
]
