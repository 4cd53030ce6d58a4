from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.columns import SourceColumn, TargetField
    from ...domain.entities.mapping import Assignment, MappingResult, SummaryStats


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_mapping_start(
        self, source_name: str, column_count: int, field_count: int
    ) -> None: ...

    def log_assignment(self, assignment: Assignment) -> None: ...

    def log_summary(self, summary: SummaryStats) -> None: ...


@runtime_checkable
class MappingPort(Protocol):
    pass

    def suggest(
        self, columns: list[SourceColumn], fields: list[TargetField]
    ) -> MappingResult: ...

    def select(
        self, result: MappingResult, min_confidence: float
    ) -> dict[str, Assignment]: ...
