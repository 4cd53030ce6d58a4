"""Column mapper package.

This package suggests a one-to-one mapping from the columns of an uploaded
tabular file to the fields of a destination data model.

Features:
- Cascading name similarity scoring with domain synonyms
- Phased greedy assignment with guaranteed coverage
- Conflict resolution and summary statistics
- CSV profiling, JSON field catalogs and a rich CLI
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("column-mapper")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from column_mapper.domain.entities import (
    Assignment,
    MappingResult,
    SourceColumn,
    SummaryStats,
    TargetField,
)
from column_mapper.domain.services.mapping import MappingEngine

__all__ = [
    "Assignment",
    "MappingEngine",
    "MappingResult",
    "SourceColumn",
    "SummaryStats",
    "TargetField",
    "__version__",
]
