"""Typer application and command registration."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    agenda,
    delete,
    export,
    holidays,
    info,
    ls,
    moon,
    preview,
    save,
    today,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="planner",
    help="Generate yearly planner calendars from recurring customizations.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info-level log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command()(preview)
app.command()(export)
app.command()(save)
app.command()(info)
app.command()(ls)
app.command()(delete)
app.command()(today)
app.command()(agenda)
app.command()(moon)
app.command()(holidays)
