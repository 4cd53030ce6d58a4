from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...constants import ConfidenceBuckets

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from ...domain.entities.mapping import Assignment, MappingResult, SummaryStats


def confidence_style(
    confidence: float,
    high: float = ConfidenceBuckets.HIGH,
    medium: float = ConfidenceBuckets.MEDIUM,
) -> str:
    if confidence >= high:
        return "green"
    if confidence >= medium:
        return "yellow"
    return "red"


class MappingPresenter:
    """Render a mapping result as a rich table plus summary lines.

    Column names, field names and rationale text are escaped, so headers
    such as ``Time [s]`` are shown as written.
    """

    def __init__(
        self,
        console: Console,
        *,
        high_threshold: float = ConfidenceBuckets.HIGH,
        medium_threshold: float = ConfidenceBuckets.MEDIUM,
    ) -> None:
        super().__init__()
        self.console = console
        self.high_threshold = high_threshold
        self.medium_threshold = medium_threshold

    def present(
        self,
        result: MappingResult,
        *,
        selected: Mapping[str, Assignment] | None = None,
        min_confidence: float = 0.0,
        show_alternatives: bool = False,
    ) -> None:
        self.console.print()
        self.console.print(
            self.build_table(
                result, selected=selected, show_alternatives=show_alternatives
            )
        )
        self.console.print()
        self._print_summary(result.summary)
        if selected is not None:
            self.console.print(
                f"[bold]Accepted:[/bold] {len(selected)} mapping(s) above "
                f"{min_confidence:.0%} confidence"
            )
        if result.unmapped_columns:
            unmapped = ", ".join(result.unmapped_columns)
            self.console.print(f"[yellow]Unmapped:[/yellow] {escape(unmapped)}")

    def build_table(
        self,
        result: MappingResult,
        *,
        selected: Mapping[str, Assignment] | None = None,
        show_alternatives: bool = False,
    ) -> Table:
        table = Table(
            title="Column Mapping Suggestions",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Field", style="white", no_wrap=True)
        table.add_column("Confidence", justify="right", no_wrap=True)
        table.add_column("Match", style="dim", no_wrap=True)
        table.add_column("Rationale", overflow="fold", ratio=3)
        if show_alternatives:
            table.add_column("Alternatives", style="dim", overflow="fold", ratio=2)

        for name, assignment in result.assignments.items():
            row = [
                self._column_label(name, selected),
                self._field_label(assignment),
                self._confidence_label(assignment),
                assignment.match_kind.value,
                escape(assignment.rationale),
            ]
            if show_alternatives:
                row.append(
                    escape(
                        ", ".join(
                            f"{c.target_name} ({c.confidence:.0%})"
                            for c in assignment.alternatives
                        )
                    )
                )
            table.add_row(*row)
        return table

    def _column_label(
        self, name: str, selected: Mapping[str, Assignment] | None
    ) -> str:
        if selected is not None and name in selected:
            return f"[bold]{escape(name)}[/bold]"
        return escape(name)

    def _field_label(self, assignment: Assignment) -> str:
        if assignment.target_name is None:
            return "[dim]-[/dim]"
        target = escape(assignment.target_name)
        if assignment.conflict:
            return f"[red]{target} (conflict)[/red]"
        return target

    def _confidence_label(self, assignment: Assignment) -> str:
        style = confidence_style(
            assignment.confidence, self.high_threshold, self.medium_threshold
        )
        return f"[{style}]{assignment.confidence:.0%}[/{style}]"

    def _print_summary(self, summary: SummaryStats) -> None:
        self.console.print(
            f"[bold]Mapped:[/bold] {summary.mapped_columns}/{summary.total_columns} "
            f"columns ({summary.coverage:.0%})"
        )
        self.console.print(
            f"[green]High (≥{self.high_threshold:.0%}): "
            f"{summary.high_confidence}[/green]  "
            f"[yellow]Medium (≥{self.medium_threshold:.0%}): "
            f"{summary.medium_confidence}[/yellow]  "
            f"[red]Low: {summary.low_confidence}[/red]"
        )
        self.console.print(
            f"[bold]Average confidence:[/bold] {summary.average_confidence:.1%}"
        )
        if summary.conflicted_columns:
            self.console.print(
                f"[red]Unresolved conflicts:[/red] {summary.conflicted_columns}"
            )
