"""Repository implementations for data access.

This module provides concrete implementations of repository interfaces
for reading source data, loading the target field catalog and persisting
mapping results.
"""

from .mapping_result_repository import (
    MappingResultRepository,
    mapping_result_payload,
    save_mapping_result,
)
from .source_data_repository import SourceDataRepository
from .target_field_repository import TargetFieldLoadError, TargetFieldRepository

__all__ = [
    "MappingResultRepository",
    "SourceDataRepository",
    "TargetFieldLoadError",
    "TargetFieldRepository",
    "mapping_result_payload",
    "save_mapping_result",
]
