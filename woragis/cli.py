#!/usr/bin/env python3
"""Woragis CLI - scaffold Rust backends from templates."""

import typer
from rich.console import Console

from woragis.cli_scaffold_commands import register_scaffold_commands

app = typer.Typer(
    name="create-woragis-api",
    help="""CLI to scaffold a Rust backend

Quick start:
  create-woragis-api myapp                  # REST backend
  create-woragis-api svc -t grpc --with-ci  # gRPC backend + CI
  create-woragis-api svc --with-infra       # + Terraform (implies CI)
""",
    add_completion=False,
)

console = Console()

register_scaffold_commands(app, console)

if __name__ == "__main__":
    app()
