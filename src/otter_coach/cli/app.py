"""Shared Typer app object and shared option types."""

from typing import Annotated

import typer

from ..core.logger import setup_logger

# Shared --json option type used by commands with machine-readable output
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

# Shared --history option type: comma-separated feedback, oldest first
HistoryOption = Annotated[
    str,
    typer.Option(
        "--history",
        "-H",
        help="Recent feedback, oldest first, comma-separated (e.g. too_easy,just_right)",
    ),
]

app = typer.Typer(
    name="otter-coach",
    help="Adaptive workout difficulty engine: feedback in, difficulty and coaching out.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show engine debug logging"),
    ] = False,
) -> None:
    """
    Adaptive difficulty engine for OtterSport workouts.
    """
    setup_logger("DEBUG" if verbose else "WARNING")
