# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from termtrack.configuration import APP_NAME
from termtrack.terminal import counter, entry, report
from termtrack.terminal.custom_typer import OrderedAliasedTyperGroup
from termtrack.terminal.repl import is_in_repl, run_repl
from termtrack.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="termtrack - log time on projects and report on it from the terminal",
    invoke_without_command=True,
    no_args_is_help=False,
)
app.command(name="start")(counter.start)
app.command(name="pause")(counter.pause)
app.command(name="resume")(counter.resume)
app.command(name="stop")(counter.stop)
app.command(name="status, st")(counter.status)
app.command(name="add, a", no_args_is_help=True)(entry.add)
app.command(name="report, r")(report.report)
app.command(name="table, t")(report.table)
app.command(name="clear")(entry.clear)


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    termtrack - log time on projects and report on it from the terminal

    Run without a command to start an interactive prompt.
    """
    if no_header:
        view_state.set_show_header(False)

    if ctx.invoked_subcommand is not None:
        return

    if is_in_repl():
        typer.echo(ctx.get_help())
        return

    run_repl(typer.main.get_command(app), APP_NAME)


def run() -> None:
    app(prog_name=APP_NAME)
