#!/usr/bin/env python3
"""Sampler CLI - scaffold runnable integration samples."""

import typer
from rich.console import Console

from sampler.cli_samples_commands import register_samples_commands

app = typer.Typer(
    name="sampler",
    help="""Sampler - scaffold a working integration sample

Quick start:
  sampler list                           # Browse available samples
  sampler create accept-a-payment        # Pick variants and scaffold
  sampler clean-cache accept-a-payment   # Re-clone on next create
""",
    add_completion=False,
)

console = Console()

register_samples_commands(app, console)

if __name__ == "__main__":
    app()
