"""Developer CLI for the program generator.

Runs the same generate_program code path the application uses and prints
the result either as JSON or as Rich tables, one per week.
"""

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Make powerplan importable when the CLI is executed directly (python cli/cli.py)
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from powerplan.config.settings import settings
from powerplan.core.logger import setup_logger
from powerplan.program.enums import ExperienceTier, Lift
from powerplan.program.errors import ProgramGeneratorError
from powerplan.program.formatting import format_set_display, format_week_summary
from powerplan.program.generator import generate_program
from powerplan.program.percentages import apply_training_max
from powerplan.program.progress import get_session
from powerplan.program.session import launch_session, serialize_day
from powerplan.program.types import LifterProfile, ProgramProgress, ProgramRecommendation, WeekPrescription
from powerplan.program.validators import parse_profile

console = Console()

app = typer.Typer(
    name="powerplan",
    help="Powerplan CLI - Generate periodized powerlifting programs",
    add_completion=False,
)


def _setup_logging(debug: bool = False) -> None:
    """Set up logging; keep stderr quiet unless debugging."""
    level = "DEBUG" if debug else "WARNING"
    setup_logger(level=level, log_file=settings.log_file)


def _build_profile(
    experience: ExperienceTier,
    squat: float,
    bench: float,
    deadlift: float,
    days: int,
    weeks: int | None,
    priority: Lift,
    training_max: int | None,
) -> LifterProfile:
    profile = parse_profile(
        {
            "experience": experience,
            "current_maxes": {"squat": squat, "bench": bench, "deadlift": deadlift},
            "days_per_week": days,
            "duration_weeks": weeks,
            "priority_lift": priority,
        }
    )

    percentage = training_max if training_max is not None else settings.default_training_max_percentage
    scaled = apply_training_max(profile.current_maxes, percentage)
    logger.debug(f"Using training max {percentage}%: {scaled.model_dump()}")
    return profile.model_copy(update={"current_maxes": scaled})


def _render_week(week: WeekPrescription) -> Table:
    table = Table(title=f"{week.name} | {format_week_summary(week)}", title_justify="left")
    table.add_column("Jour", style="cyan")
    table.add_column("Exercice")
    table.add_column("Séries")

    for day in week.days:
        for index, exercise in enumerate(day.exercises):
            name = f"{exercise.name} (outil)" if exercise.is_tool_exercise else exercise.name
            sets = ", ".join(format_set_display(s) for s in exercise.sets)
            table.add_row(day.name if index == 0 else "", name, sets)

    return table


def _render_recommendation(recommendation: ProgramRecommendation) -> None:
    program = recommendation.program
    reasoning = "\n".join(f"- {reason}" for reason in recommendation.reasoning)
    console.print(
        Panel(
            f"{program.description}\n\n{reasoning}",
            title=f"[bold]{program.name}[/bold]",
            border_style="green",
        )
    )
    for week in program.weeks:
        console.print(_render_week(week))
        console.print(f"[dim]{week.focus}[/dim]\n")


@app.command()
def generate(
    experience: ExperienceTier = typer.Option(ExperienceTier.INTERMEDIATE, "--experience", "-e", help="Experience tier"),
    squat: float = typer.Option(..., "--squat", help="Squat 1RM (kg)"),
    bench: float = typer.Option(..., "--bench", help="Bench press 1RM (kg)"),
    deadlift: float = typer.Option(..., "--deadlift", help="Deadlift 1RM (kg)"),
    days: int = typer.Option(3, "--days", "-d", help="Training days per week (3, 4 or 5)"),
    weeks: int | None = typer.Option(None, "--weeks", "-w", help="Cycle length (4 or 6); scheme default if omitted"),
    priority: Lift = typer.Option(Lift.SQUAT, "--priority", "-p", help="Priority lift"),
    scheme: str | None = typer.Option(None, "--scheme", "-s", help="Explicit scheme (linear, 531, block, hypertrophy)"),
    training_max: int | None = typer.Option(None, "--training-max", help="Training max percentage (90, 95 or 100)"),
    as_json: bool = typer.Option(False, "--json", help="Print the program as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Generate a program and print it."""
    _setup_logging(debug)

    try:
        profile = _build_profile(experience, squat, bench, deadlift, days, weeks, priority, training_max)
        recommendation = generate_program(profile, scheme=scheme)
    except ProgramGeneratorError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold red")
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(recommendation.model_dump_json(indent=2))
        return

    _render_recommendation(recommendation)


@app.command()
def session(
    experience: ExperienceTier = typer.Option(ExperienceTier.INTERMEDIATE, "--experience", "-e", help="Experience tier"),
    squat: float = typer.Option(..., "--squat", help="Squat 1RM (kg)"),
    bench: float = typer.Option(..., "--bench", help="Bench press 1RM (kg)"),
    deadlift: float = typer.Option(..., "--deadlift", help="Deadlift 1RM (kg)"),
    days: int = typer.Option(3, "--days", "-d", help="Training days per week (3, 4 or 5)"),
    weeks: int | None = typer.Option(None, "--weeks", "-w", help="Cycle length (4 or 6)"),
    priority: Lift = typer.Option(Lift.SQUAT, "--priority", "-p", help="Priority lift"),
    scheme: str | None = typer.Option(None, "--scheme", "-s", help="Explicit scheme"),
    training_max: int | None = typer.Option(None, "--training-max", help="Training max percentage (90, 95 or 100)"),
    week: int = typer.Option(1, "--week", min=1, help="Current week (1-based)"),
    day: int = typer.Option(1, "--day", min=1, help="Current day (1-based)"),
    draft: bool = typer.Option(False, "--draft", help="Print the editable workout draft instead of the preset"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Print the launch payload for the day a progress pointer refers to."""
    _setup_logging(debug)

    try:
        profile = _build_profile(experience, squat, bench, deadlift, days, weeks, priority, training_max)
        program = generate_program(profile, scheme=scheme).program
        progress = ProgramProgress(current_week=week, current_day=day)
        if draft:
            typer.echo(launch_session(program, progress).model_dump_json(indent=2))
            return
        _, prescribed_day = get_session(program, progress)
    except ProgramGeneratorError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold red")
        raise typer.Exit(1) from e

    typer.echo(serialize_day(prescribed_day))


if __name__ == "__main__":
    app()
