"""Typer CLI application for quiz generation and course extraction."""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from src.config.settings import get_settings
from src.graph.workflow import extract_course_info, generate_quiz
from src.llm.client import create_chat_model
from src.models.course import CourseExtractionParams, CourseInfo
from src.models.envelope import ServiceResponse
from src.models.quiz import MAX_QUIZ_QUESTIONS, QuizDifficulty, QuizQuestion, QuizSpec
from src.models.results import QuizResult
from src.pipeline.errors import PipelineError
from src.pipeline.normalize import normalize_course_response, normalize_quiz_response
from src.results.scoring import summarize_results

app = typer.Typer(
    name="course-quiz",
    help="AI-backed quiz generation and course extraction",
    add_completion=False,
)

console = Console()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def fail(error: Exception) -> NoReturn:
    """Print a failure envelope and exit with code 1."""
    logger.debug("Command failed", exc_info=error)
    envelope = ServiceResponse.from_error(error)
    console.print(f"\n[red]Error:[/red] {envelope.message}", style="bold")
    console.print_json(data=envelope.to_payload())
    raise typer.Exit(code=1)


def emit(envelope: ServiceResponse, output: Optional[Path]) -> None:
    """Print a success envelope and optionally write it to a file."""
    payload = envelope.to_payload()
    if output:
        output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        console.print(f"\n[green]✓[/green] Saved to: {escape(str(output))}")
    console.print_json(data=payload)


def read_text(path: Path) -> str:
    """Read a saved raw model response."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(
            f"[red]Error:[/red] Cannot read {escape(str(path))}: {escape(str(e))}",
            style="bold",
        )
        raise typer.Exit(code=1)


@app.command()
def quiz(
    course: str = typer.Option(..., "--course", "-c", help="Course name to quiz on"),
    questions: int = typer.Option(
        10,
        "--questions",
        "-q",
        help=f"Number of questions (capped at {MAX_QUIZ_QUESTIONS})",
        min=1,
    ),
    difficulty: QuizDifficulty = typer.Option(
        QuizDifficulty.MEDIUM,
        "--difficulty",
        "-d",
        help="Quiz difficulty",
        case_sensitive=False,
    ),
    time_per_question: Optional[int] = typer.Option(
        None,
        "--time-per-question",
        "-t",
        help="Seconds per question",
        min=1,
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the JSON envelope to this file"
    ),
) -> None:
    """
    Generate a quiz about a course with the configured model.

    Example:
        course-quiz quiz -c "Machine Learning" -q 15 -d hard
    """
    settings = get_settings()
    try:
        spec = QuizSpec(
            entity_name=course,
            difficulty=difficulty,
            question_count=min(questions, settings.max_quiz_questions),
            time_per_question=time_per_question or settings.default_time_per_question,
        )
    except ValidationError as e:
        fail(e)

    if questions > spec.effective_question_count:
        console.print(
            f"[yellow]Requested {questions} questions, "
            f"generating {spec.effective_question_count}.[/yellow]"
        )

    try:
        llm = create_chat_model(settings)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("[cyan]Generating quiz...", total=None)
            result = generate_quiz(llm, spec)
            progress.update(task, description="[green]Quiz generation complete!")
    except Exception as e:
        fail(e)

    display_quiz(result)
    emit(
        ServiceResponse.ok(
            {"questions": [q.model_dump(by_alias=True) for q in result]},
            "Quiz generated successfully",
        ),
        output,
    )


@app.command("extract-course")
def extract_course(
    url: str = typer.Option(..., "--url", "-u", help="Course page URL"),
    hours_per_week: Optional[float] = typer.Option(
        None, "--hours-per-week", "-w", help="Planned study hours per week"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the JSON envelope to this file"
    ),
) -> None:
    """Extract structured course information for a URL with the configured model."""
    settings = get_settings()
    try:
        params = CourseExtractionParams(
            course_url=url,
            hours_per_week=hours_per_week or settings.default_hours_per_week,
        )
    except ValidationError as e:
        fail(e)

    try:
        llm = create_chat_model(settings)
        with console.status("[cyan]Extracting course information..."):
            course_info = extract_course_info(llm, params, date.today())
    except Exception as e:
        fail(e)

    display_course(course_info)
    emit(
        ServiceResponse.ok(
            {"courseInfo": course_info.model_dump(mode="json", by_alias=True)},
            "Course information extracted successfully",
        ),
        output,
    )


@app.command("normalize-quiz")
def normalize_quiz_file(
    path: Path = typer.Argument(..., help="File holding a raw model quiz response"),
    course: str = typer.Option("Offline quiz", "--course", "-c", help="Course name"),
    questions: int = typer.Option(
        MAX_QUIZ_QUESTIONS, "--questions", "-q", help="Requested question count", min=1
    ),
    time_per_question: int = typer.Option(
        60, "--time-per-question", "-t", help="Seconds per question", min=1
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the JSON envelope to this file"
    ),
) -> None:
    """Run the quiz normalization pipeline on a saved model response."""
    raw_text = read_text(path)
    try:
        spec = QuizSpec(
            entity_name=course,
            question_count=questions,
            time_per_question=time_per_question,
        )
        result = normalize_quiz_response(raw_text, spec)
    except (PipelineError, ValidationError) as e:
        fail(e)

    display_quiz(result)
    emit(
        ServiceResponse.ok(
            {"questions": [q.model_dump(by_alias=True) for q in result]},
            "Quiz normalized successfully",
        ),
        output,
    )


@app.command("normalize-course")
def normalize_course_file(
    path: Path = typer.Argument(..., help="File holding a raw model course response"),
    anchor_date: Optional[datetime] = typer.Option(
        None,
        "--anchor-date",
        "-a",
        formats=["%Y-%m-%d"],
        help="Schedule start date (default: today)",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the JSON envelope to this file"
    ),
) -> None:
    """Run the course normalization pipeline on a saved model response."""
    raw_text = read_text(path)
    anchor = anchor_date.date() if anchor_date else date.today()
    try:
        course_info = normalize_course_response(raw_text, anchor)
    except PipelineError as e:
        fail(e)

    display_course(course_info)
    emit(
        ServiceResponse.ok(
            {"courseInfo": course_info.model_dump(mode="json", by_alias=True)},
            "Course information normalized successfully",
        ),
        output,
    )


@app.command()
def stats(
    path: Path = typer.Argument(..., help="JSON file holding a list of quiz results"),
) -> None:
    """Summarize saved quiz results."""
    try:
        records: Any = json.loads(read_text(path))
        if not isinstance(records, list):
            raise ValueError("Expected a JSON list of quiz results")
        results = [QuizResult.model_validate(record) for record in records]
    except (ValueError, ValidationError) as e:
        fail(e)

    summary = summarize_results(results)

    table = Table(title="Quiz Statistics", border_style="green")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Quizzes", str(summary.total_quizzes))
    table.add_row("Questions", str(summary.total_questions))
    table.add_row("Correct", str(summary.total_correct))
    table.add_row("Average Score", f"{summary.average_score}%")
    console.print()
    console.print(table)

    emit(
        ServiceResponse.ok(summary.model_dump(by_alias=True), "Statistics computed"),
        None,
    )


@app.command()
def info() -> None:
    """Display information about the tool."""
    info_text = """
[bold cyan]Course Quiz Generator[/bold cyan]
Version: 0.1.0

[bold]Pipeline:[/bold]
  • Prompt Builder - Deterministic JSON-only prompts
  • Sanitizer - Strips markdown fences and control characters
  • Extractor - Strict parse, then bracket-matching recovery
  • Coercer - Quiz answers normalized to A-D, course fields validated
  • Scheduler - Milestone deadlines spread across the course

[bold]Model providers:[/bold] AWS Bedrock, Anthropic
    """
    console.print(Panel(info_text, title="Course Quiz Info", border_style="cyan"))


def display_quiz(questions: list[QuizQuestion]) -> None:
    """Display normalized questions."""
    table = Table(title="Quiz Questions", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="white")

    for q in questions:
        answer = escape(f"{q.correct_answer}) {q.correct_option}")
        if q.answer_defaulted:
            answer = f"[yellow]{answer} (defaulted)[/yellow]"
        table.add_row(str(q.id), escape(q.question), answer)

    console.print()
    console.print(table)


def display_course(course_info: CourseInfo) -> None:
    """Display course information and its milestone schedule."""
    table = Table(
        title=escape(course_info.name), show_header=False, border_style="cyan"
    )
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Provider", escape(course_info.provider))
    table.add_row("Duration", escape(course_info.duration))
    table.add_row("Pace", escape(course_info.pace))
    table.add_row("Skills", escape(", ".join(course_info.main_skills)))
    for milestone in course_info.milestones:
        table.add_row(escape(milestone.name), milestone.deadline.isoformat())

    console.print()
    console.print(table)


@app.callback()
def callback() -> None:
    """
    Course Quiz Generator - Quizzes and course plans from a generative model.
    """
    configure_logging(get_settings().log_level)


if __name__ == "__main__":
    app()
