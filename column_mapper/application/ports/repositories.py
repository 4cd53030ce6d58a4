from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.columns import SourceColumn, TargetField
    from ...domain.entities.mapping import MappingResult


@runtime_checkable
class SourceDataRepositoryPort(Protocol):
    pass

    def read_columns(self, file_path: str | Path) -> list[SourceColumn]: ...


@runtime_checkable
class TargetFieldRepositoryPort(Protocol):
    pass

    def load_fields(self, file_path: str | Path) -> list[TargetField]: ...


@runtime_checkable
class MappingResultRepositoryPort(Protocol):
    pass

    def save(self, result: MappingResult, file_path: str | Path) -> Path: ...
