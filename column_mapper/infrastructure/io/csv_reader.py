from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

TAB_SEPARATED_SUFFIXES = frozenset({".tsv", ".tab"})


@dataclass(slots=True)
class CSVReadOptions:
    normalize_headers: bool = True
    strict_na_handling: bool = True
    dtype: Any = str
    encoding: str = "utf-8"
    delimiter: str | None = None
    skip_blank_lines: bool = True


class CSVReader:
    pass

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        delimiter = options.delimiter or self._default_delimiter(path)
        try:
            df = pd.read_csv(
                path,
                sep=delimiter,
                dtype=options.dtype,
                keep_default_na=not options.strict_na_handling,
                na_values=[""] if options.strict_na_handling else None,
                encoding=options.encoding,
                skip_blank_lines=options.skip_blank_lines,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except (OSError, ValueError) as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        return df

    def _default_delimiter(self, path: Path) -> str:
        if path.suffix.lower() in TAB_SEPARATED_SUFFIXES:
            return "\t"
        return ","

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df
