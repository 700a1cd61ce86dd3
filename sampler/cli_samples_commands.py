"""Sample scaffolding CLI commands."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sampler.cli_support import (
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
    setup_file_logging,
)
from sampler.core.config import get_config
from sampler.core.errors import SamplerError, UserCancelled
from sampler.core.lock import sample_lock
from sampler.core.profile import load_profile
from sampler.prompts import AutoAcceptPrompter, RichPrompter
from sampler.samples.cache import RepositoryCache
from sampler.samples.registry import list_samples, resolve_sample
from sampler.samples.workflow import SampleWorkflow
from sampler.services.git_manager import GitManager

# Module-level console instance (will be set by register function)
console: Console = Console()


def _repository_cache() -> RepositoryCache:
    config = get_config()
    return RepositoryCache(config.cache_dir, GitManager(timeout=config.git_timeout))


def create(
    sample: str = typer.Argument(..., help="Sample name or git URL"),
    path: Optional[str] = typer.Argument(None, help="Destination directory (default: sample name)"),
    force_refresh: bool = typer.Option(False, "--force-refresh", help="Delete the cached copy and clone again"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Create required resources without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tracebacks and debug logs"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Create a sample project from a template repository."""
    if verbose or log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        name = resolve_sample(sample).name
    except SamplerError as e:
        handle_cli_error(e, console, verbose)

    target = Path(path) if path else Path.cwd() / name
    if target.exists() and not target.is_dir():
        handle_cli_error(
            SamplerError(f"Path {target} already exists and is not a directory"), console, verbose
        )
    if target.exists() and any(target.iterdir()):
        handle_cli_error(
            SamplerError(f"Path {target} already exists and is not empty"), console, verbose
        )
    created_target = not target.exists()

    config = get_config()
    cache = _repository_cache()
    workflow = None

    try:
        profile = load_profile()
        prompter = RichPrompter(console)
        workflow = SampleWorkflow(
            cache,
            profile,
            AutoAcceptPrompter(prompter) if yes else prompter,
            console=console,
        )

        with sample_lock(config.config_dir / "locks"):
            if force_refresh:
                workflow.delete_cache(sample)

            console.print(f"[dim]Downloading {name}...[/dim]")
            workflow.initialize(sample)
            workflow.select_options()

            console.print(f"[dim]Copying files to {target}...[/dim]")
            workflow.copy(target)
            env_file = workflow.configure_dotenv(target)

    except UserCancelled:
        if workflow and created_target and target.exists():
            workflow.cleanup(target)
        print_warning(console, "Cancelled")
        raise typer.Exit(1)
    except (SamplerError, OSError) as e:
        if workflow and created_target and target.exists():
            workflow.cleanup(target)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        print_info(
            console,
            f"If the cached sample looks stale, retry with 'sampler create {sample} --force-refresh'",
        )
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if env_file:
        print_success(console, f"Configured {env_file.relative_to(target)}")
    for resource_name in workflow.created_resources:
        print_success(console, f"Created {resource_name}")
    print_success(console, f"You're all set. To get started: cd {target}")

    message = workflow.post_install()
    if message:
        console.print(escape(message))


def list_command():
    """List the samples available to create."""
    table = Table(title="Available samples")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Repository", style="dim")

    for info in list_samples():
        table.add_row(info.name, info.description, info.url)

    console.print(table)


def clean_cache(
    sample: str = typer.Argument(..., help="Sample name or git URL"),
):
    """Delete the cached copy of a sample so the next create clones fresh."""
    try:
        removed = _repository_cache().delete(sample)
    except SamplerError as e:
        handle_cli_error(e, console)

    if removed:
        print_success(console, f"Removed cached copy of {sample}")
    else:
        print_info(console, f"No cached copy of {sample}")


def register_samples_commands(app: typer.Typer, shared_console: Console) -> None:
    """Register sample commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command("create")(create)
    app.command("list")(list_command)
    app.command("clean-cache")(clean_cache)
