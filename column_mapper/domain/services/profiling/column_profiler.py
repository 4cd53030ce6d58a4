"""Column type inference for parsed tabular data.

The mapper only needs a coarse type per column; these helpers derive it from
sample values the way the upload parser does, so callers holding a DataFrame
can build SourceColumn records directly.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import pandas as pd

from ....constants import Defaults, MissingValues, TypeInference
from ...entities.columns import SourceColumn
from ...entities.types import ColumnType

if TYPE_CHECKING:
    from collections.abc import Iterable

_TIME_PATTERNS = (
    re.compile("^\\d{1,2}:\\d{2}:\\d{2}$"),  # HH:MM:SS
    re.compile("^\\d{1,2}:\\d{2}\\.\\d{2}$"),  # MM:SS.hh race time
    re.compile("^\\d{2,3}\\.\\d{2}$"),  # SS.hh race time
)
_DATE_PATTERNS = (
    re.compile("^\\d{4}-\\d{2}-\\d{2}$"),
    re.compile("^\\d{4}-\\d{2}-\\d{2}[T ]\\d{2}:\\d{2}(:\\d{2})?"),
    re.compile("^\\d{2}/\\d{2}/\\d{4}$"),
    re.compile("^\\d{2}-\\d{2}-\\d{4}$"),
    re.compile("^\\d{2}\\.\\d{2}\\.\\d{4}$"),
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        text = value.strip()
        return not text or text.upper() in MissingValues.STRING_MARKERS
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def present_values(values: Iterable[Any]) -> list[Any]:
    return [value for value in values if not _is_missing(value)]


def is_time_like(value: Any) -> bool:
    text = str(value).strip()
    return any(pattern.match(text) for pattern in _TIME_PATTERNS)


def is_date_like(value: Any) -> bool:
    if isinstance(value, pd.Timestamp):
        return True
    text = str(value).strip()
    return any(pattern.match(text) for pattern in _DATE_PATTERNS)


def infer_column_type(values: Iterable[Any]) -> ColumnType:
    """Infer the dominant type of a column from its values.

    Missing values are ignored. Time-like values win over date-like and
    numeric ones, so race times such as ``52.34`` are typed as ``time``.
    """
    present = present_values(values)
    if not present:
        return ColumnType.EMPTY

    sample = present[: TypeInference.SAMPLE_LIMIT]
    size = len(sample)
    numeric = pd.to_numeric(pd.Series(sample, dtype=object), errors="coerce").notna()
    numeric_ratio = float(numeric.sum()) / size
    date_ratio = sum(1 for v in sample if is_date_like(v)) / size
    time_ratio = sum(1 for v in sample if is_time_like(v)) / size

    if time_ratio > TypeInference.DOMINANT_RATIO:
        return ColumnType.TIME
    if date_ratio > TypeInference.DOMINANT_RATIO:
        return ColumnType.DATE
    if numeric_ratio > TypeInference.DOMINANT_RATIO:
        return ColumnType.NUMERIC
    if numeric_ratio > TypeInference.MIXED_NUMERIC_RATIO:
        return ColumnType.MIXED_NUMERIC

    unique_ratio = len({str(v) for v in sample}) / size
    if (
        size >= TypeInference.CATEGORICAL_MIN_VALUES
        and unique_ratio <= TypeInference.CATEGORICAL_UNIQUE_RATIO
    ):
        return ColumnType.CATEGORICAL
    return ColumnType.TEXT


def profile_column(
    name: str, values: Iterable[Any], *, sample_size: int = Defaults.SAMPLE_SIZE
) -> SourceColumn:
    present = present_values(values)
    return SourceColumn(
        name=name,
        inferred_type=infer_column_type(present),
        sample_values=tuple(present[:sample_size]),
    )


def profile_frame(
    frame: pd.DataFrame, *, sample_size: int = Defaults.SAMPLE_SIZE
) -> list[SourceColumn]:
    """Build one SourceColumn per DataFrame column, in column order."""
    return [
        profile_column(str(column), frame[column].tolist(), sample_size=sample_size)
        for column in frame.columns
    ]
