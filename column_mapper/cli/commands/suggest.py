"""Suggest command - map the columns of a data file onto a field catalog.

This module is a thin adapter between the Click CLI framework and the
application layer's MappingUseCase. It parses arguments, builds the request,
runs the use case and hands the response to the presenter.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.models import MapColumnsRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ..presenters.mapping import MappingPresenter

console = Console()


@click.command()
@click.argument("data_file", type=click.Path(exists=True, path_type=Path))
@click.argument("fields_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a column_mapper.toml config file (default: ./column_mapper.toml)",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(path_type=Path),
    help="Write the mapping result as JSON to this path",
)
@click.option(
    "--min-confidence",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Confidence required to accept a mapping automatically "
    "(default: from config, 0.15)",
)
@click.option(
    "--show-alternatives/--no-show-alternatives",
    default=False,
    show_default=True,
    help="List runner-up fields for each column",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def suggest_command(
    data_file: Path,
    fields_file: Path,
    config_file: Path | None,
    output_file: Path | None,
    min_confidence: float | None,
    show_alternatives: bool,
    verbose: int,
) -> None:
    """Suggest a one-to-one mapping from DATA_FILE columns to FIELDS_FILE fields.

    DATA_FILE is a CSV or TSV file with a header row. FIELDS_FILE is a JSON
    array of target field records, each with at least a "name".

    Examples:

    \b
        # Print the suggested mapping
        column-mapper suggest results.csv fields.json

    \b
        # Save the mapping and show the scoring details
        column-mapper suggest results.csv fields.json --output mapping.json -vv
    """
    try:
        runtime_config = ConfigLoader.load(config_file=config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    threshold = (
        min_confidence if min_confidence is not None else runtime_config.min_confidence
    )
    request = MapColumnsRequest(
        data_file=data_file,
        fields_file=fields_file,
        output_file=output_file,
        min_confidence=threshold,
        verbose=verbose,
    )

    container = DependencyContainer(
        verbose=verbose, console=console, config=runtime_config
    )
    use_case = container.create_mapping_use_case()
    response = use_case.execute(request)

    if not response.success or response.result is None:
        raise click.ClickException(response.error or "Mapping failed")

    presenter = MappingPresenter(
        console,
        high_threshold=runtime_config.high_confidence,
        medium_threshold=runtime_config.medium_confidence,
    )
    presenter.present(
        response.result,
        selected=response.selected,
        min_confidence=threshold,
        show_alternatives=show_alternatives,
    )
