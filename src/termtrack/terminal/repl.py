# SPDX-License-Identifier: MIT

import logging
import shlex
from contextvars import ContextVar
from typing import Callable

import click
from rich.console import Console

from termtrack.view import message
from termtrack.view import state as view_state

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")

_in_repl: ContextVar[bool] = ContextVar("in_repl", default=False)


def is_in_repl() -> bool:
    return _in_repl.get()


def split_command_line(line: str) -> list[str]:
    """
    Split a line typed at the prompt into command arguments, honouring shell
    quoting. `help` maps onto the command's --help option.
    """
    parts = shlex.split(line)
    if len(parts) > 0 and parts[0].lower() == "help":
        return parts[1:] + ["--help"]
    if len(parts) > 0:
        parts[0] = parts[0].lower()
    return parts


def run_repl(command: click.Command, prog_name: str) -> None:
    """
    Read commands from the prompt until exit, quit or end of input, dispatching
    each one to the same command tree used in one-shot mode.
    """
    console = Console()
    token = _in_repl.set(True)
    try:
        console.print("[cyan]Terminal Time Tracker[/cyan]")
        console.print('Type "help" for commands.')

        while True:
            try:
                line = console.input("[green]> [/green]")
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            if line.strip() == "":
                continue
            if line.strip().lower() in EXIT_COMMANDS:
                break

            try:
                args = split_command_line(line)
            except ValueError as e:
                message.error(f"Error: {e}")
                continue

            _dispatch(command.main, args, prog_name)

        console.print("Bye!")
    finally:
        _in_repl.reset(token)


def _dispatch(main: Callable[..., object], args: list[str], prog_name: str) -> None:
    """
    Run one command. Options such as --no-header apply to that command only.
    """
    show_header = view_state.get_show_header()
    try:
        main(args=args, prog_name=prog_name, standalone_mode=False)
    except click.exceptions.Exit:
        pass
    except click.exceptions.Abort:
        message.info("Operation cancelled.")
    except click.ClickException as e:
        e.show()
    except Exception as e:
        logger.debug("Command %s failed", args, exc_info=True)
        message.error(f"Error: {e}")
    finally:
        view_state.set_show_header(show_header)
