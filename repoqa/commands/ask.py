"""Answer a question about the indexed repository."""

import click

from repoqa.completion import complete
from repoqa.prompt import build_prompt
from repoqa.retrieval import get_top_k_chunks
from repoqa.ui import console, print_header
from repoqa.utils.constants import CHAT_MODEL, DEFAULT_TOP_K
from repoqa.utils.error_handler import handle_exceptions
from repoqa.utils.logging import logger


@click.command()
@handle_exceptions
@click.argument("words", nargs=-1)
@click.option("--top", "-t", default=DEFAULT_TOP_K, type=click.IntRange(min=1),
              help="Number of chunks to put in the prompt")
@click.option("--model", default=CHAT_MODEL, show_default=True, help="Chat model to ask")
def ask(words, top, model):
    """Ask a question; the answer is grounded in retrieved code chunks.

    Requires OPENAI_API_KEY in the environment and the ranking executable
    (REPOQA_RANKER) to have embedded the chunk store.

    \b
    Examples:
      repoqa ask "What does the parser do?"
      repoqa ask --top 5 how are config files loaded
    """
    text = " ".join(words).strip()
    if not text:
        raise click.UsageError('You must provide a query.\nUsage: repoqa ask "What does the parser do?"')

    logger.info(f'Query: "{text}"')
    chunks = get_top_k_chunks(text, top)
    console.print(f"Found [bold]{len(chunks)}[/bold] relevant chunks")

    answer = complete(build_prompt(text, chunks), model=model)

    print_header("ANSWER")
    click.echo(answer)
