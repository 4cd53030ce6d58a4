from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from typing_extensions import override

from ...application.ports.services import LoggerPort
from ...constants import ConfidenceBuckets

if TYPE_CHECKING:
    from ...domain.entities.mapping import Assignment, SummaryStats


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_processed": 0,
        "columns_mapped": 0,
        "columns_unmapped": 0,
        "conflicts": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    """Rich console logger.

    Messages are plain text: column names, field names and file paths are
    escaped before they reach rich, so bracketed headers print verbatim.
    """

    def __init__(
        self,
        console: Console | None = None,
        verbosity: int = 0,
        high_threshold: float = ConfidenceBuckets.HIGH,
    ) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self.high_threshold = high_threshold
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_mapping_start(
        self, source_name: str, column_count: int, field_count: int
    ) -> None:
        self.set_context(source_name=source_name, operation="map")
        self._stats["files_processed"] += 1
        self.console.print()
        self.console.print(f"[bold]Mapping {escape(source_name)}[/bold]")
        self.verbose(f"  {column_count} source columns, {field_count} target fields")

    @override
    def log_assignment(self, assignment: Assignment) -> None:
        if assignment.is_mapped:
            self._stats["columns_mapped"] += 1
            self.verbose(
                f"  {assignment.source_column} → {assignment.target_name} "
                f"({assignment.confidence:.0%}, {assignment.match_kind.value})"
            )
        else:
            self._stats["columns_unmapped"] += 1
            if assignment.conflict:
                self._stats["conflicts"] += 1
            self.verbose(f"  {assignment.source_column} → (unmapped)")
        self.debug(f"    {assignment.rationale}")
        if assignment.conflict:
            self.warning(
                f"Unresolved conflict for {assignment.source_column}: "
                f"{assignment.target_name} is already taken"
            )
        if self.verbosity >= LogLevel.DEBUG:
            for candidate in assignment.alternatives:
                self.debug(
                    f"    Alternative: {candidate.target_name} "
                    f"({candidate.confidence:.1%}, {candidate.match_kind.value})"
                )

    @override
    def log_summary(self, summary: SummaryStats) -> None:
        self.console.print(
            f"[bold]Mapped {summary.mapped_columns}/{summary.total_columns} "
            f"columns[/bold] ({summary.coverage:.0%} coverage)"
        )
        self.verbose(
            f"  High (≥{self.high_threshold:.0%}): {summary.high_confidence}, "
            f"medium: {summary.medium_confidence}, low: {summary.low_confidence}"
        )
        self.verbose(f"  Average confidence: {summary.average_confidence:.1%}")
        if summary.conflicted_columns:
            self.warning(f"{summary.conflicted_columns} unresolved conflict(s)")
        if self._context is not None:
            self.debug(f"  Elapsed: {self._context.elapsed_ms():.1f} ms")

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Mapping Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files processed: {self._stats['files_processed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Columns mapped: {self._stats['columns_mapped']}[/dim]"
            )
            self.console.print(
                f"[dim]  Columns unmapped: {self._stats['columns_unmapped']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.source_name:
            parts.append(self._context.source_name)
        if self._context.operation:
            parts.append(self._context.operation)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
