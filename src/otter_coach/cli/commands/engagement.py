"""Engagement commands: motivate, frequency."""

import json
import random
from typing import Annotated, Optional

import typer

from ...core.frequency import optimize_frequency
from ...core.models import PerformanceSummary
from ...core.motivation import motivation_tier, pick_message
from ...io.serializers import frequency_recommendation_to_dict
from .. import views
from ..app import JsonOption, app


@app.command()
def motivate(
    workouts: Annotated[
        int,
        typer.Option("--workouts", "-w", help="Total completed workouts"),
    ] = 0,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed for a reproducible pick"),
    ] = None,
) -> None:
    """
    Show a motivational message for the user's progress.
    """
    if workouts < 0:
        views.print_error(f"Workout count must be non-negative, got {workouts}")
        raise typer.Exit(1)

    rng = random.Random(seed) if seed is not None else None
    views.console.print(f"[dim]{motivation_tier(workouts)}[/dim]")
    views.print_success(pick_message(workouts, rng))


@app.command()
def frequency(
    preference: Annotated[
        str,
        typer.Option("--preference", "-p", help="Workout frequency: daily, three_per_week, flexible"),
    ] = "flexible",
    completion_rate: Annotated[
        float,
        typer.Option("--completion-rate", "-c", help="Share of planned workouts completed (0-1)"),
    ] = 0.8,
    average_feedback: Annotated[
        float,
        typer.Option("--average-feedback", "-a", help="Average feedback score"),
    ] = 3.0,
    json_out: JsonOption = False,
) -> None:
    """
    Recommend workout days per week.
    """
    try:
        performance = PerformanceSummary(
            completion_rate=completion_rate,
            average_feedback=average_feedback,
        )
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    rec = optimize_frequency(preference, performance)

    if json_out:
        print(json.dumps(frequency_recommendation_to_dict(rec), ensure_ascii=False, indent=2))
        return

    views.console.print(views.format_frequency_display(rec))
