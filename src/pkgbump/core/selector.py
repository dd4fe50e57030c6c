"""Interactive selection of the version increment."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from pkgbump.errors import OperatorCancelled
from pkgbump.models import IncrementKind


@dataclass
class IncrementChoice:
    """One entry in the increment menu."""

    kind: IncrementKind
    label: str
    description: str


CHOICES: list[IncrementChoice] = [
    IncrementChoice(IncrementKind.MAJOR, "Major", "Major version"),
    IncrementChoice(IncrementKind.MINOR, "Minor", "Minor version"),
    IncrementChoice(IncrementKind.PATCH, "Patch", "Patch version"),
]


class IncrementSelector:
    """Asks the operator which version component to bump."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def select(self, current_version: Optional[str] = None) -> IncrementKind:
        """Show the choices and block until one is picked.

        There is no default. Ctrl+C or end of input raises OperatorCancelled.
        """
        table = Table(
            title="[bold]Select a version[/]",
            show_header=True,
            header_style="bold",
            border_style="dim",
        )
        table.add_column("Choice", style="cyan")
        table.add_column("Label")
        table.add_column("Description", style="dim")
        for choice in CHOICES:
            table.add_row(choice.kind.value, choice.label, choice.description)

        self.console.print(table)
        if current_version:
            self.console.print(f"[dim]Current version:[/] {current_version}")

        try:
            answer = Prompt.ask(
                "Select a version",
                console=self.console,
                choices=[choice.kind.value for choice in CHOICES],
            )
        except (KeyboardInterrupt, EOFError) as e:
            raise OperatorCancelled("Version selection cancelled") from e

        return IncrementKind(answer)
