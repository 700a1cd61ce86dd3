"""Interactive option selection."""
from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt

from sampler.core.errors import UserCancelled

# Axis of the yes/no question about creating missing resources
AUTO_CREATE_AXIS = "auto-create behavior"


class Prompter(Protocol):
    """Shows a label and options, returns the chosen option.

    Implementations raise UserCancelled when the user aborts.
    """

    def select(self, axis: str, label: str, options: Sequence[str]) -> str:
        ...


class RichPrompter:
    """Prompter backed by a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def select(self, axis: str, label: str, options: Sequence[str]) -> str:
        try:
            choice = Prompt.ask(
                f"[bold]{label}[/bold]",
                choices=list(options),
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError) as e:
            raise UserCancelled() from e

        self.console.print(f"[green]✔[/green] [dim]Selected {axis}:[/dim] [bold]{choice}[/bold]")
        return choice


class AutoAcceptPrompter:
    """Wraps a prompter and accepts resource auto-creation without asking."""

    def __init__(self, inner: Prompter):
        self.inner = inner

    def select(self, axis: str, label: str, options: Sequence[str]) -> str:
        if axis == AUTO_CREATE_AXIS:
            return "yes"
        return self.inner.select(axis, label, options)
