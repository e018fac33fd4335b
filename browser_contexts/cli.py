"""Command-line interface for the browser step contexts."""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from browser_contexts import __version__
from browser_contexts.config import BrowserSettings

app = typer.Typer(
    name="browser-contexts",
    help="Inspect the browser step vocabulary and settings.",
)
console = Console()

STEP_TYPES = ("given", "when", "then", "step")


def collect_steps(step_type: str | None = None) -> list[tuple[str, str, str]]:
    """
    Collect the step patterns registered by browser_contexts.steps.

    Args:
        step_type: Only return steps of this type

    Returns:
        List of (step type, pattern, function name) tuples
    """
    import browser_contexts.steps  # noqa: F401  registers the steps
    from behave.step_registry import registry  # type: ignore[import-untyped]

    rows = []
    for kind in STEP_TYPES:
        if step_type and kind != step_type:
            continue
        for matcher in registry.steps.get(kind, []):
            if not matcher.func.__module__.startswith("browser_contexts."):
                continue
            rows.append((kind, matcher.pattern, matcher.func.__name__))
    return rows


@app.command()
def steps(
    step_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Only list given, when or then steps",
    ),
) -> None:
    """List the registered step patterns."""
    if step_type is not None and step_type not in STEP_TYPES:
        console.print(f"[bold red]Error:[/bold red] Unknown step type '{step_type}'")
        raise typer.Exit(1)

    table = Table(title="Browser steps")
    table.add_column("Type", style="cyan")
    table.add_column("Pattern")
    table.add_column("Function", style="dim")
    for kind, pattern, func_name in collect_steps(step_type):
        table.add_row(kind, pattern, func_name)
    console.print(table)


@app.command("check-config")
def check_config(
    path: Path = typer.Argument(
        ...,
        help="YAML file with browser settings",
    ),
) -> None:
    """Validate a browser settings YAML file."""
    try:
        settings = BrowserSettings.from_yaml_file(path)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print(f"[bold green]Valid:[/bold green] {path}")
    for name, value in settings.model_dump().items():
        console.print(f"  {name}: {escape(str(value))}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"browser-contexts {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
