from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.mapping import Assignment, SummaryStats


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_mapping_start(
        self, source_name: str, column_count: int, field_count: int
    ) -> None:
        return None

    @override
    def log_assignment(self, assignment: Assignment) -> None:
        return None

    @override
    def log_summary(self, summary: SummaryStats) -> None:
        return None
