"""repoqa CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - commands imported after cli group definition

import click
from rich.table import Table

from repoqa import __version__
from repoqa.ui import console


class VerboseGroup(click.Group):
    """Help output grouped by pipeline stage."""

    COMMAND_CATEGORIES = {
        "INDEXING": {
            "title": "INDEXING",
            "description": "Chunk a repository along its syntax tree",
            "commands": ["index"],
        },
        "QUESTION_ANSWERING": {
            "title": "QUESTION ANSWERING",
            "description": "Retrieve ranked chunks and answer questions from them",
            "commands": ["query", "ask"],
        },
    }

    def format_commands(self, ctx, formatter):
        """Suppress the flat listing; format_help prints the grouped one."""
        pass

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for category_data in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category_data['title']}[/bold cyan]")
            console.print(f"[dim]{category_data['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=10)
            table.add_column("Description", style="white")

            for cmd_name in category_data["commands"]:
                if cmd_name not in registered:
                    continue
                first_line = (registered[cmd_name].help or "").split("\n")[0].strip()
                table.add_row(cmd_name, first_line)

            console.print(table)

        console.print()
        console.print("For detailed options: [cmd]repoqa <command> --help[/cmd]")


@click.group(cls=VerboseGroup)
@click.version_option(version=__version__, prog_name="repoqa")
@click.help_option("-h", "--help")
def cli():
    """repoqa - ask questions about a source-code repository

    \b
    QUICK START:
      repoqa index ./src                      # Chunk the repository
      repoqa ask "What does the parser do?"   # Retrieve + answer"""
    pass


from repoqa.commands.ask import ask
from repoqa.commands.index import index
from repoqa.commands.query import query

cli.add_command(index)
cli.add_command(query)
cli.add_command(ask)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
