"""
CLI entry point using Typer.

Provides commands for exercising the adaptive engine:
- adjust: New difficulty and coaching recommendation for a feedback event
- patterns: Streak and trend metrics for a feedback history
- describe: Difficulty level in words
- motivate: Motivational message for a workout count
- frequency: Recommended workout days per week
"""

from .app import app
from .commands import adaptive, engagement  # noqa: F401  (registers commands)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
