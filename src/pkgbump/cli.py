"""CLI entry point for pkgbump using Typer."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pkgbump import __version__
from pkgbump.core.config_loader import load_config
from pkgbump.core.incrementer import next_version
from pkgbump.core.locator import ManifestLocator
from pkgbump.core.reader import VersionCheck, VersionReader
from pkgbump.core.selector import IncrementSelector
from pkgbump.core.writer import ManifestWriter
from pkgbump.errors import OperatorCancelled, PkgBumpError
from pkgbump.models import Version

EXIT_MISMATCH = 1
EXIT_ERROR = 2
EXIT_CANCELLED = 130

app = typer.Typer(
    name="pkgbump",
    help="Bump the shared version of every package.json under the current directory.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pkgbump[/] version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Find every manifest under the current directory and bump their version.

    All manifests must already share the same version. You are asked whether
    to bump the major, minor or patch component, then every manifest is
    rewritten with the new version.
    """
    try:
        run(Path.cwd())
    except OperatorCancelled:
        console.print("\n[yellow]Cancelled[/], no files were changed.")
        raise typer.Exit(code=EXIT_CANCELLED)
    except (PkgBumpError, OSError) as e:
        console.print(f"[bold red]✗[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_ERROR)


def run(root_path: Path) -> None:
    """Locate, validate, prompt and write for the tree at root_path."""
    config = load_config(root_path)
    locator = ManifestLocator(config)
    reader = VersionReader()

    with console.status(f"[bold green]Scanning for {config.manifest_name}..."):
        paths = locator.locate()
        check = reader.check(paths)

    if not check.success:
        _print_mismatch(check)
        raise typer.Exit(code=EXIT_MISMATCH)

    current = Version.parse(check.version)
    console.print(
        f"[bold green]✓[/] Found {len(check.manifests)} manifest(s) at version [cyan]{current}[/]"
    )

    kind = IncrementSelector(console).select(str(current))
    new_version = next_version(check.version, kind)

    result = ManifestWriter().write_all(check.manifests, new_version)

    for path in result.updated_paths:
        console.print(f"[bold green]✓[/] Updated {escape(path)}", soft_wrap=True)

    if not result.success:
        console.print(
            f"[bold red]✗[/] Failed to update {escape(result.failed_path or '')}: "
            f"{escape(result.error or '')}",
            soft_wrap=True,
        )
        if result.updated_paths:
            console.print(
                f"[yellow]![/] {len(result.updated_paths)} file(s) already at {new_version}; "
                "the tree now has mixed versions."
            )
        raise typer.Exit(code=EXIT_ERROR)

    console.print(f"\n[bold green]✓[/] Version bumped: {current} -> {new_version}")


def _print_mismatch(check: VersionCheck) -> None:
    """List every manifest with its version so the operator can fix them."""
    console.print("[bold red]Version mismatch.[/]")
    for ref in check.manifests:
        console.print(
            f"{escape(ref.name)}: {escape(ref.version)} -> {escape(str(ref.path))}",
            soft_wrap=True,
        )
    console.print()
    console.print("All packages must be the same version before running pkgbump")


if __name__ == "__main__":
    app()
