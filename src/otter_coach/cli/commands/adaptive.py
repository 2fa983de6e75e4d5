"""Adaptive difficulty commands: adjust, patterns, describe."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.engine.config_loader import load_tuning
from ...core.models import UserProfile
from ...core.patterns import analyze_pattern
from ...core.recommendations import get_adaptive_settings
from ...io.serializers import (
    ValidationError,
    adaptive_settings_to_dict,
    parse_feedback_history,
    pattern_metrics_to_dict,
)
from .. import views
from ..app import HistoryOption, JsonOption, app


@app.command()
def adjust(
    difficulty: Annotated[
        Optional[float],
        typer.Option("--difficulty", "-d", help="Current difficulty multiplier (default: onboarding level)"),
    ] = None,
    feedback: Annotated[
        Optional[str],
        typer.Option("--feedback", "-f", help="Latest feedback: too_easy, just_right, bit_too_hard, way_too_hard"),
    ] = None,
    history: HistoryOption = "",
    tier: Annotated[
        Optional[str],
        typer.Option("--tier", "-t", help="User tier: beginner, casual, fit, athlete"),
    ] = None,
    tuning_path: Annotated[
        Optional[Path],
        typer.Option("--tuning", help="YAML file with tuning overrides"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Compute the new difficulty and coaching recommendation for a feedback event.
    """
    if tuning_path is not None and not tuning_path.exists():
        views.print_error(f"Tuning file not found: {tuning_path}")
        raise typer.Exit(1)

    tuning = load_tuning(tuning_path)

    try:
        recent = parse_feedback_history(history)
        profile = UserProfile(
            current_difficulty_level=difficulty,
            fitness_level=tier,  # type: ignore[arg-type]
            last_workout_feedback=feedback,  # type: ignore[arg-type]
        )
        settings = get_adaptive_settings(profile, recent, tuning)
    except (ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(adaptive_settings_to_dict(settings), ensure_ascii=False, indent=2))
        return

    previous = difficulty or tuning.default_difficulty
    views.console.print()
    views.print_adaptive_settings(previous, settings)
    views.console.print()


@app.command()
def patterns(
    history: HistoryOption = "",
    json_out: JsonOption = False,
) -> None:
    """
    Show streak and trend metrics for a feedback history.
    """
    try:
        metrics = analyze_pattern(parse_feedback_history(history))
    except (ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(pattern_metrics_to_dict(metrics), indent=2))
        return

    views.console.print(views.format_pattern_display(metrics))


@app.command()
def describe(
    level: Annotated[float, typer.Argument(help="Difficulty multiplier")],
) -> None:
    """
    Describe a difficulty level in words.
    """
    if level < 0:
        views.print_error(f"Difficulty must be non-negative, got {level}")
        raise typer.Exit(1)

    views.console.print(views.format_level(level))
