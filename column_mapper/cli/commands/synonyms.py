import click
from rich.console import Console
from rich.table import Table

from ...domain.services.mapping.constants import DOMAIN_SYNONYMS

console = Console()


@click.command()
@click.argument("concept", required=False)
def list_synonyms_command(concept: str | None) -> None:
    """Show the domain synonym table used for name matching."""
    table = Table(title="Domain Synonyms")
    table.add_column("Concept", style="cyan", no_wrap=True)
    table.add_column("Synonyms")
    concepts = sorted(DOMAIN_SYNONYMS)
    if concept is not None:
        key = concept.strip().lower()
        if key not in DOMAIN_SYNONYMS:
            raise click.ClickException(f"Unknown concept: {concept}")
        concepts = [key]
    for name in concepts:
        table.add_row(name, ", ".join(DOMAIN_SYNONYMS[name]))
    console.print(table)
