"""Infrastructure I/O layer.

Readers for tabular source files and the exception hierarchy shared by all
file adapters.
"""

from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import (
    ColumnMapperInfrastructureError,
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    MappingResultSaveError,
)

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "ColumnMapperInfrastructureError",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "MappingResultSaveError",
]
