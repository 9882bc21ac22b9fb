"""Central console for repoqa command output.

Import this instead of instantiating Console() in every command file:

    from repoqa.ui import console, print_header
"""

import sys

from rich.console import Console
from rich.theme import Theme

REPOQA_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "score": "bold blue",
    "dim": "dim white",
})

console = Console(
    theme=REPOQA_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}")


def print_warning(msg: str) -> None:
    console.print(f"[warning]WARNING:[/warning] {msg}")
