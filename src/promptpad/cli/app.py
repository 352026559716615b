"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..llm import CredentialMissingError
from ..llm.models import DEFAULT_COMPLETIONS_MODEL
from ..ui.config import DEFAULT_TOKEN_FILE, TOKEN_MISSING_MESSAGE
from ..ui.screens import show_alert
from .providers import get_llm, read_api_token

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="promptpad",
    help="Type a prompt, send it to the OpenAI Completions API, get the continuation appended",
    add_completion=False,
)

# Console for rich output
console = Console(stderr=True)

LOG_LEVELS = ("debug", "info", "warning", "error")


@app.command()
def main(
    token_file: Path = typer.Option(
        Path(DEFAULT_TOKEN_FILE),
        "--token-file",
        "-t",
        envvar="PROMPTPAD_TOKEN_FILE",
        help="File holding the OpenAI API token"
    ),
    model: str = typer.Option(
        DEFAULT_COMPLETIONS_MODEL,
        "--model",
        "-m",
        envvar="OPENAI_COMPLETIONS_MODEL",
        help="Completion model to request"
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        envvar="OPENAI_BASE_URL",
        help="API base URL (default: public OpenAI endpoint)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the prompt completion TUI."""
    if log_level is not None and log_level.lower() not in LOG_LEVELS:
        console.print(f"[red]Error: unknown log level '{log_level}'[/red]")
        raise typer.Exit(code=2)

    try:
        api_token = read_api_token(token_file)
    except CredentialMissingError as e:
        console.print(f"[red]Error: {e}[/red]")
        show_alert(TOKEN_MISSING_MESSAGE.format(path=token_file.name))
        raise typer.Exit(code=1)

    from ..ui import run_textual_tui

    llm = get_llm(api_token, model=model, base_url=base_url)
    asyncio.run(run_textual_tui(llm, log_level=log_level))


if __name__ == "__main__":
    app()
