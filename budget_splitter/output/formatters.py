"""Output formatters for assistant replies and split results.

Provides multiple output formats:
- Text: Chat replies, one "<category>: <amount>" line per category
- JSON: Machine-readable split result
- Table: Human-readable CLI output
"""

import json
import logging
from abc import ABC, abstractmethod
from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import AssistantReply, SplitResult
from ..core.types import Outcome

logger = logging.getLogger(__name__)


EXAMPLES = (
    "Example:\nJSON:\n{\"Food\": 50, \"Rent\": 30, \"Other\": 20}\n"
    "YAML:\nFood: 50\nRent: 30\nOther: 20"
)

START_MESSAGE = (
    "Welcome to Budget Splitter Assistant.\n"
    "Send a number to split your budget based on your categories, "
    "or upload categories in JSON or YAML format.\n"
    "To send feedback, type: /feedback <your message>."
)

HELP_MESSAGE = (
    "Send a number to split your budget based on your categories, "
    "or upload categories in JSON or YAML format.\n" + EXAMPLES
)

NO_CATEGORIES_MESSAGE = (
    "No categories set. Please upload categories using JSON or YAML.\n" + EXAMPLES
)

FEEDBACK_EMPTY_MESSAGE = "Please provide feedback text."
FEEDBACK_SENT_MESSAGE = "Feedback sent, thank you!"


class OutputFormatter(ABC):
    """Abstract base class for split result formatters."""

    @abstractmethod
    def format(self, split: SplitResult) -> str:
        """Format the split as a string."""
        pass

    def format_to_file(self, split: SplitResult, filepath: str) -> None:
        """Write formatted split to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format(split))


class TextFormatter(OutputFormatter):
    """Formats splits as plain chat text."""

    def format(self, split: SplitResult) -> str:
        lines = ["Budget split:\n"]
        for name, portion in split.portions.items():
            lines.append(f"{name}: {portion}\n")
        return "".join(lines)


class JSONFormatter(OutputFormatter):
    """Formats splits as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, split: SplitResult) -> str:
        return json.dumps(split.model_dump(), indent=self.indent, ensure_ascii=False)


class TableFormatter(OutputFormatter):
    """Formats splits as a rich table for CLI output."""

    def __init__(self, width: int = 80, color: bool = True):
        """
        Initialize table formatter.

        Args:
            width: Maximum table width
            color: Emit ANSI colors (disable for files)
        """
        self.width = width
        self.color = color

    def format(self, split: SplitResult) -> str:
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self.color,
            no_color=not self.color,
            width=self.width,
        )

        table = Table(title="Budget Split")
        table.add_column("Category", style="cyan")
        table.add_column("Amount", justify="right", style="green")

        for name, portion in split.portions.items():
            amount = f"{portion:,}"
            if name == split.adjusted_category and split.diff:
                amount += f" [dim]({split.diff:+,})[/]"
            table.add_row(escape(name), amount)

        table.add_row("", "", end_section=True)
        table.add_row("[bold]TOTAL[/]", f"[bold]{split.total:,}[/]")

        console.print(table)
        return output.getvalue()

    def format_to_file(self, split: SplitResult, filepath: str) -> None:
        """Write formatted output to file."""
        # For file output, no ANSI codes
        old_color = self.color
        self.color = False
        try:
            super().format_to_file(split, filepath)
        finally:
            self.color = old_color


def format_split(split: SplitResult) -> str:
    """Render a split as chat text."""
    return TextFormatter().format(split)


def format_reply(reply: AssistantReply) -> str:
    """Render an assistant reply as chat text."""
    if reply.outcome == Outcome.CATEGORIES_UPDATED:
        return f"Categories updated successfully via {reply.source_format.display_name}."
    if reply.outcome == Outcome.SPLIT:
        return format_split(reply.split)
    if reply.outcome == Outcome.NO_CATEGORIES:
        return NO_CATEGORIES_MESSAGE
    return HELP_MESSAGE


def format_feedback(username: str | None, user_id: int, text: str) -> str:
    """Render a feedback relay for the admin chat."""
    return f"Feedback from {username or 'unknown'} (ID: {user_id}):\n{text}"
