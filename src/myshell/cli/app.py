"""CLI main module for myshell."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from myshell.cli.interactive import InteractiveCli
from myshell.config import get_settings
from myshell.errors import ConfigurationError
from myshell.logging_utils import configure_logging

app = typer.Typer(
    name="myshell",
    help="A small interactive shell with output redirection.",
    add_completion=False,
)


@app.command()
def main(
    command: Optional[str] = typer.Option(None, "--command", "-c", help="Run one line and exit"),
    quote_aware_redirection: bool = typer.Option(
        False, "--quote-aware-redirection", help="Ignore redirection operators inside quotes"
    ),
    strict_quotes: bool = typer.Option(False, "--strict-quotes", help="Reject lines that end inside a quote"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
) -> None:
    """Start the interpreter, or run a single line with --command."""
    try:
        settings = get_settings(
            # unset flags fall back to MYSHELL_* settings
            quote_aware_redirection=quote_aware_redirection or None,
            strict_quotes=strict_quotes or None,
            log_level=log_level,
        )
    except ConfigurationError as e:
        typer.echo(f"myshell: invalid configuration: {e!s}", err=True)
        raise typer.Exit(2) from e

    interactive = command is None and sys.stdin.isatty()
    configure_logging(settings.log_level, profile="interactive" if interactive else "default")

    cli = InteractiveCli(settings)
    if command is not None:
        cli.process_line(command)
        raise typer.Exit(cli.last_exit_code)

    raise typer.Exit(cli.run())


if __name__ == "__main__":
    app()
