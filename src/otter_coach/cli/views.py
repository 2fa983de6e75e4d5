"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of engine results.
"""

from rich.console import Console
from rich.table import Table

from ..core.difficulty import describe_difficulty, difficulty_style
from ..core.models import AdaptiveSettings, FrequencyRecommendation, PatternMetrics

console = Console()


def format_level(level: float) -> str:
    """Difficulty level with its label, coloured by intensity."""
    style = difficulty_style(level)
    return f"[{style}]{level:.2f} ({describe_difficulty(level)})[/{style}]"


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[dim]no[/dim]"


def format_settings_table(previous_level: float, settings: AdaptiveSettings) -> Table:
    """
    Create a Rich table displaying adaptive settings.

    Args:
        previous_level: Difficulty before the update
        settings: AdaptiveSettings to display

    Returns:
        Rich Table object
    """
    table = Table(title="Adaptive Settings", show_header=False)

    table.add_column("Field", style="cyan")
    table.add_column("Value")

    rec = settings.recommendation
    table.add_row("Difficulty", f"{format_level(previous_level)} → {format_level(settings.difficulty_level)}")
    table.add_row("Adjust difficulty", _yes_no(rec.adjust_difficulty))
    table.add_row("Adjust volume", _yes_no(rec.adjust_volume))
    table.add_row("Adjust rest", _yes_no(rec.adjust_rest))

    return table


def print_adaptive_settings(previous_level: float, settings: AdaptiveSettings) -> None:
    """Print the settings table followed by the coaching message."""
    console.print(format_settings_table(previous_level, settings))
    console.print(f"[bold]{settings.recommendation.message}[/bold]")


def format_pattern_display(metrics: PatternMetrics) -> str:
    """
    Format pattern metrics as text block.

    Args:
        metrics: PatternMetrics to display

    Returns:
        Formatted string
    """
    lines = [
        "Feedback pattern",
        f"- Too easy streak: {metrics.consistent_easy}",
        f"- Too hard streak: {metrics.consistent_hard}",
        f"- Just right streak: {metrics.stable}",
        f"- Trend: {metrics.trending}",
    ]
    return "\n".join(lines)


def format_frequency_display(rec: FrequencyRecommendation) -> str:
    """Format a frequency recommendation as text block."""
    return "\n".join(
        [
            f"Recommended: [bold]{rec.days_per_week}[/bold] workout days per week",
            rec.rest_day_recommendation,
        ]
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
