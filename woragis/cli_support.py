"""Shared utilities for Woragis CLI modules."""
from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from woragis.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def describe_validation_error(e: ValidationError) -> str:
    """Collapse a pydantic ValidationError into a one-line message."""
    messages = []
    for error in e.errors():
        msg = error.get('msg', '')
        messages.append(msg.removeprefix("Value error, "))
    return "; ".join(messages) or str(e)


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output (normally bound to stderr)
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    if isinstance(e, ValidationError):
        message = describe_validation_error(e)
    else:
        message = str(e)
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting.

    Args:
        console: Rich console for output
        message: Success message
        prefix: Prefix symbol (default: ✓)
    """
    console.print(f"[green]{prefix}[/green] {escape(message)}", soft_wrap=True)


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting."""
    console.print(f"[red]{prefix}[/red] {escape(message)}", soft_wrap=True)


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {escape(message)}", soft_wrap=True)
