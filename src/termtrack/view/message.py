# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.markup import escape

console = Console()


def error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)


def success(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)


def warning(message: str) -> None:
    console.print(f"[yellow]{escape(message)}[/yellow]", soft_wrap=True)


def info(message: str) -> None:
    console.print(f"[cyan]{escape(message)}[/cyan]", soft_wrap=True)
