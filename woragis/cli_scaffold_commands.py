"""Scaffold CLI command - create a project from a template."""
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from woragis import __version__
from woragis.cli_support import (
    handle_cli_error,
    print_error,
    print_info,
    print_success,
    setup_file_logging,
)
from woragis.core.config import get_config
from woragis.core.errors import ScaffoldError
from woragis.core.logger import set_verbose
from woragis.core.template_loader import TemplateRegistry
from woragis.models import ScaffoldRequest
from woragis.scaffold import ScaffoldManager

PROG_NAME = "create-woragis-api"

# Module-level instances (will be set by register function)
console: Console = Console()
err_console: Console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _show_templates(registry: TemplateRegistry) -> None:
    available = registry.list_templates()
    if not available:
        print_error(err_console, f"No templates found in {registry.templates_dir}")
        raise typer.Exit(1)

    console.print("[cyan]Available templates:[/cyan]\n")
    for template_id in available:
        console.print(f"  [bold]{template_id}[/bold]")
        console.print(f"    {registry.get_template_info(template_id)}\n")


def create(
    name: Optional[str] = typer.Argument(None, help="The project name (directory to create)"),
    template: str = typer.Option("rest", "--template", "-t",
                                 help="Template type (rest, grpc, ai-rest, ai-grpc)"),
    with_ci: bool = typer.Option(False, "--with-ci", help="Include GitHub Actions CI configuration"),
    with_infra: bool = typer.Option(False, "--with-infra",
                                    help="Include Terraform infrastructure setup (implies --with-ci)"),
    list_templates: bool = typer.Option(False, "--list-templates", help="List available templates"),
    templates_dir: Optional[Path] = typer.Option(None, "--templates-dir",
                                                 help="Directory holding base templates"),
    extras_dir: Optional[Path] = typer.Option(None, "--extras-dir",
                                              help="Directory holding the .github and terraform overlays"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True,
                                 help="Show version and exit"),
):
    """Scaffold a Rust backend from a template.

    Examples:
        create-woragis-api myapp                       # REST template
        create-woragis-api svc -t grpc --with-ci       # gRPC + GitHub Actions
        create-woragis-api svc --with-infra            # + Terraform (and CI)
        create-woragis-api --list-templates            # Show templates
    """
    set_verbose(verbose)

    config = get_config()
    if log_file or config.log_file:
        setup_file_logging(log_file or config.log_file, verbose=verbose)

    registry = TemplateRegistry(templates_dir=templates_dir, extras_dir=extras_dir)

    if list_templates:
        _show_templates(registry)
        return

    if name is None:
        raise typer.BadParameter("Missing project name.", param_hint="'NAME'")

    try:
        request = ScaffoldRequest(
            project_name=name,
            template_id=template,
            with_ci=with_ci,
            with_infra=with_infra,
        )
        manager = ScaffoldManager(registry=registry, output_dir=Path("."))
        result = manager.scaffold(request)
    except (ScaffoldError, ValidationError) as e:
        handle_cli_error(e, err_console, verbose=verbose)

    print_success(console, f"Project '{name}' created using '{result.template_id}' template.", prefix="✅")
    if result.with_ci:
        print_success(console, "Included GitHub CI (.github/)", prefix="✅")
    if result.with_infra:
        print_success(console, "Included Terraform (terraform/)", prefix="✅")
    if verbose:
        print_info(console, f"{result.files_copied} files copied into {result.project_root}")


def register_scaffold_commands(app: typer.Typer, shared_console: Console) -> None:
    """Register scaffold commands with the main Typer app."""
    global console
    console = shared_console
    app.command(name="create")(create)
