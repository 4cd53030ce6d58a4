import click

from .commands.suggest import suggest_command
from .commands.synonyms import list_synonyms_command


@click.group()
def app() -> None:
    pass


app.add_command(suggest_command, name="suggest")
app.add_command(list_synonyms_command, name="synonyms")
__all__ = ["app"]
