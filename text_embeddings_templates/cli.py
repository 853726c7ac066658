import sys
import typer

from loguru import logger
from typing import Optional

from text_embeddings_templates.inputs import RerankInputBuilder
from text_embeddings_templates.templates import requires_template

app = typer.Typer()

DEFAULT_MODEL_ID = "Qwen/Qwen3-Reranker-0.6B"


def setup_logging(logger_level: str, json_output: bool):
    # Remove default handler, stdout is reserved for command output
    logger.remove()
    logger.add(
        sys.stderr,
        format="{message}",
        filter="text_embeddings_templates",
        level=logger_level,
        serialize=json_output,
        backtrace=True,
        diagnose=False,
    )


@app.command()
def detect(
    model_id: str,
    logger_level: str = "INFO",
    json_output: bool = False,
):
    """Print whether MODEL_ID needs a prompt template."""
    setup_logging(logger_level, json_output)

    typer.echo("true" if requires_template(model_id) else "false")


@app.command("format")
def format_prompt(
    query: str,
    document: str,
    model_id: str = DEFAULT_MODEL_ID,
    instruction: Optional[str] = None,
    logger_level: str = "INFO",
    json_output: bool = False,
):
    """Render the reranker input for a QUERY and DOCUMENT pair."""
    setup_logging(logger_level, json_output)

    builder = RerankInputBuilder(model_id)
    rerank_input = builder.build(query, document, instruction)

    if isinstance(rerank_input, str):
        typer.echo(rerank_input, nl=False)
    else:
        for part in rerank_input:
            typer.echo(part)


if __name__ == "__main__":
    app()
