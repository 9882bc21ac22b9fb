"""Retrieve the top ranked chunks for a query."""

import json

import click

from repoqa.retrieval import get_top_k_chunks
from repoqa.ui import console
from repoqa.utils.constants import DEFAULT_TOP_K
from repoqa.utils.error_handler import handle_exceptions


@click.command()
@handle_exceptions
@click.argument("words", nargs=-1)
@click.option("--top", "-t", default=DEFAULT_TOP_K, type=click.IntRange(min=1),
              help="Number of top matching chunks to return")
@click.option("--json", "as_json", is_flag=True, help="Output results as raw JSON")
def query(words, top, as_json):
    """Show the chunks the ranker considers most relevant.

    \b
    Examples:
      repoqa query where are retries configured
      repoqa query --top 5 --json "session handling"
    """
    text = " ".join(words).strip()
    if not text:
        raise click.UsageError('You must provide a query.\nUsage: repoqa query "your question"')

    chunks = get_top_k_chunks(text, top)

    if as_json:
        click.echo(json.dumps([chunk.to_dict() for chunk in chunks]))
        return

    for i, match in enumerate(chunks, 1):
        console.rule(f"Match #{i} - Score: [score]{match.score:.4f}[/score]")
        console.print(f"File: [path]{match.file}[/path]\n", highlight=False)
        console.print(match.code, markup=False, highlight=False)
        console.print()
