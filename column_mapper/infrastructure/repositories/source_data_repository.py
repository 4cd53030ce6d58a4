from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ...constants import Defaults
from ...domain.services.profiling import profile_frame
from ..io.csv_reader import CSVReader, CSVReadOptions
from ..io.exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    import pandas as pd

    from ...domain.entities.columns import SourceColumn

SUPPORTED_SUFFIXES = (".csv", ".tsv", ".tab", ".txt")


class SourceDataRepository:
    pass

    def __init__(
        self,
        csv_reader: CSVReader | None = None,
        *,
        sample_size: int = Defaults.SAMPLE_SIZE,
    ) -> None:
        super().__init__()
        self._csv_reader = csv_reader or CSVReader()
        self._sample_size = sample_size

    def read_dataset(self, file_path: str | Path) -> pd.DataFrame:
        path = Path(file_path)
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        ext = path.suffix.lower()
        if ext not in SUPPORTED_SUFFIXES:
            supported = ", ".join(SUPPORTED_SUFFIXES)
            raise DataParseError(f"Unsupported format '{ext}'. Supported: {supported}")
        options = CSVReadOptions(normalize_headers=True, strict_na_handling=True)
        return self._csv_reader.read(path, options)

    def read_columns(self, file_path: str | Path) -> list[SourceColumn]:
        frame = self.read_dataset(file_path)
        return profile_frame(frame, sample_size=self._sample_size)
