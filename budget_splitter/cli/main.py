"""CLI entry point for the Budget Splitter Assistant.

Usage:
    budget-splitter run
    budget-splitter split 125000 --categories categories.yaml
    budget-splitter show 123456789
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..calculator.allocation import AllocationEngine
from ..classifier.classifier import FormatClassifier
from ..classifier.parsers import parse_amount
from ..core.config import BotConfig
from ..core.exceptions import BudgetSplitterError, ConfigurationError
from ..output.formatters import JSONFormatter, TableFormatter, TextFormatter
from ..storage.category_store import CategoryStore

# Initialize app
app = typer.Typer(
    name="budget-splitter",
    help="Budget Splitter Assistant - weighted budget categories over Telegram",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    )


@app.command()
def run(
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file", "-e",
        help="Path to .env file with TELEGRAM_BOT_TOKEN and ADMIN_TELEGRAM_ID",
    ),
    cache_file: Optional[Path] = typer.Option(
        None,
        "--cache-file",
        help="Override the categories cache file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Start the Telegram bot (long polling).
    """
    from ..bot.telegram_bot import run_bot

    setup_logging(verbose)

    try:
        config = BotConfig.load(env_file)
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/]")
        raise typer.Exit(1)

    if cache_file:
        config.cache_file = cache_file

    store = CategoryStore(config.cache_file)
    store.load()

    try:
        asyncio.run(run_bot(config, store))
    except KeyboardInterrupt:
        console.print("[dim]Stopped[/]")


@app.command()
def split(
    amount: str = typer.Argument(..., help="Amount to split, e.g. 125000"),
    categories: Path = typer.Option(
        ...,
        "--categories", "-c",
        help="JSON or YAML file mapping category name to weight",
    ),
    output: str = typer.Option(
        "table",
        "--output", "-o",
        help="Output format: table, json, text",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Split an amount across categories read from a file.

    Examples:
        budget-splitter split 125000 -c categories.json
        budget-splitter split 99.5 -c categories.yaml --output json
    """
    setup_logging(verbose)

    if not categories.exists():
        console.print(f"[red]File not found: {categories}[/]")
        raise typer.Exit(1)

    value = parse_amount(amount)
    if value is None:
        console.print(f"[red]Invalid amount: {amount}[/]")
        raise typer.Exit(1)

    text = categories.read_text(encoding="utf-8")
    classification = FormatClassifier().parse_categories(text.strip())
    if classification is None:
        console.print(f"[red]No categories found in {categories}[/]")
        raise typer.Exit(1)

    try:
        result = AllocationEngine().split(classification.categories, value)
    except BudgetSplitterError as e:
        console.print(f"[red]Error: {e.message}[/]")
        raise typer.Exit(1)

    output_lower = output.lower()
    if output_lower == "json":
        formatter = JSONFormatter()
    elif output_lower == "text":
        formatter = TextFormatter()
    else:
        formatter = TableFormatter()

    print(formatter.format(result).rstrip("\n"))

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        formatter.format_to_file(result, str(save))
        console.print(f"[green]Saved to {save}[/]")


@app.command()
def show(
    user_id: str = typer.Argument(..., help="Telegram user id"),
    cache_file: Optional[Path] = typer.Option(
        None,
        "--cache-file",
        help="Categories cache file (default: data/cache.json)",
    ),
) -> None:
    """Show the categories stored for a user."""
    store = CategoryStore(cache_file)
    store.load()

    categories = store.get(user_id)
    if categories is None:
        console.print(f"[yellow]No categories stored for {user_id}[/]")
        raise typer.Exit(1)

    table = Table(title=f"Categories for {user_id}")
    table.add_column("Category", style="cyan")
    table.add_column("Weight", justify="right", style="green")
    table.add_column("Share", justify="right", style="dim")

    total = categories.total_weight
    for name, weight in categories.weights.items():
        share = f"{weight / total:.1%}" if total > 0 else "-"
        table.add_row(escape(name), f"{weight:g}", share)

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"Budget Splitter v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
