"""CLI for the mdqcm questionnaire converter."""

import json
import logging
from pathlib import Path
from typing import Annotated

import jsonschema
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from mdqcm import __version__
from mdqcm import io
from mdqcm.config import (
    get_config_path,
    load_global_config,
    write_default_config,
)
from mdqcm.core.errors import QCMError
from mdqcm.core.models import ParseOptions, Questionnaire
from mdqcm.parsing.markdown import parse
from mdqcm.parsing.structured import parse_structured
from mdqcm.serialization.document import (
    json_schema,
    questionnaire_from_dict,
    questionnaire_to_json,
)
from mdqcm.serialization.markdown import serialize

app = typer.Typer(
    name="mdqcm",
    help="Convert multiple-choice questionnaires between Markdown and JSON.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"mdqcm version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _error(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    return typer.Exit(1)


def _resolve_options(enforce_single: bool, require_correct: bool) -> ParseOptions:
    """Flags can only switch constraints on; the config supplies the rest."""
    try:
        config = load_global_config()
    except ValueError as e:
        raise _error(str(e))
    return ParseOptions(
        enforce_single=enforce_single or config.enforce_single,
        require_at_least_one_correct=require_correct or config.require_at_least_one_correct,
    )


def _parse_markdown_file(input_path: Path, options: ParseOptions) -> Questionnaire:
    if not input_path.exists():
        raise _error(f"Input file not found: {input_path}")
    try:
        return parse(io.read_text(input_path), options)
    except QCMError as e:
        raise _error(f"{input_path}: {e}")


EnforceSingle = Annotated[
    bool,
    typer.Option("--enforce-single", help="Reject questions with more than one correct answer"),
]
RequireCorrect = Annotated[
    bool,
    typer.Option("--require-correct", help="Reject questions without a correct answer"),
]


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug logging"),
    ] = False,
) -> None:
    """mdqcm: Markdown <-> JSON converter for multiple-choice questionnaires."""
    _configure_logging(verbose)


@app.command("parse")
def parse_command(
    input_path: Annotated[Path, typer.Argument(help="Markdown questionnaire")],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Output JSON file (default: stdout)"),
    ] = None,
    enforce_single: EnforceSingle = False,
    require_correct: RequireCorrect = False,
) -> None:
    """Parse a Markdown questionnaire into JSON."""
    options = _resolve_options(enforce_single, require_correct)
    questionnaire = _parse_markdown_file(input_path, options)

    if output_path is None:
        typer.echo(questionnaire_to_json(questionnaire))
        return

    io.write_json(questionnaire, output_path)
    console.print(
        f"[green]Parsed[/green] {len(questionnaire.questions)} questions -> {output_path}"
    )


@app.command()
def render(
    input_path: Annotated[
        Path,
        typer.Argument(help="JSON questionnaire, JSON array or JSONL of question records"),
    ],
    out_dir: Annotated[
        Path | None,
        typer.Option("--out-dir", "-d", help="Directory for the Markdown file"),
    ] = None,
    filename: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Output filename (default: from title)"),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print Markdown instead of writing a file"),
    ] = False,
    enforce_single: EnforceSingle = False,
    require_correct: RequireCorrect = False,
) -> None:
    """Render JSON questions as a Markdown questionnaire.

    A JSON object is read as a questionnaire document; a JSON array or a
    JSONL file is read as raw question records with "[n]" scores in titles.
    """
    if not input_path.exists():
        raise _error(f"Input file not found: {input_path}")

    options = _resolve_options(enforce_single, require_correct)

    try:
        if input_path.suffix == ".jsonl":
            questionnaire = parse_structured(io.read_jsonl(input_path), options)
        else:
            data = io.read_json(input_path)
            if isinstance(data, list):
                questionnaire = parse_structured(data, options)
            elif isinstance(data, dict):
                questionnaire = questionnaire_from_dict(data, options)
            else:
                raise _error(f"Unsupported JSON content in {input_path}")
    except (ValueError, QCMError) as e:
        # pydantic.ValidationError is a ValueError
        raise _error(f"{input_path}: {e}")

    if stdout:
        typer.echo(serialize(questionnaire), nl=False)
        return

    if out_dir is None:
        config = load_global_config()
        out_dir = Path(config.output_dir) if config.output_dir else Path.cwd()

    path = io.write_markdown(questionnaire, out_dir, filename)
    console.print(
        f"[green]Rendered[/green] {len(questionnaire.questions)} questions -> {path}"
    )


@app.command()
def check(
    input_path: Annotated[Path, typer.Argument(help="Markdown questionnaire")],
    enforce_single: EnforceSingle = False,
    require_correct: RequireCorrect = False,
) -> None:
    """Parse a Markdown questionnaire and print a summary."""
    options = _resolve_options(enforce_single, require_correct)
    questionnaire = _parse_markdown_file(input_path, options)

    table = Table(title=escape(questionnaire.title or str(input_path)))
    table.add_column("#", justify="right")
    table.add_column("Question")
    table.add_column("Score", justify="right")
    table.add_column("Answers", justify="right")
    table.add_column("Correct", justify="right")
    table.add_column("Multiple")

    for position, question in enumerate(questionnaire.questions, 1):
        table.add_row(
            str(position),
            escape(question.title),
            str(question.score),
            str(len(question.answers)),
            str(question.correct_count),
            "yes" if question.multiple_answers else "no",
        )

    console.print(table)
    console.print(
        f"[green]Valid:[/green] {len(questionnaire.questions)} questions, "
        f"{questionnaire.total_score} points"
    )


@app.command()
def validate(
    input_path: Annotated[Path, typer.Argument(help="JSON questionnaire document")],
) -> None:
    """Validate a JSON questionnaire against the mdqcm schema."""
    if not input_path.exists():
        raise _error(f"Input file not found: {input_path}")

    try:
        document = io.read_json(input_path)
    except json.JSONDecodeError as e:
        raise _error(f"Invalid JSON in {input_path}: {e}")

    try:
        jsonschema.validate(document, json_schema())
    except jsonschema.ValidationError as e:
        console.print(f"[red]Invalid:[/red] {escape(e.message)}", soft_wrap=True)
        raise typer.Exit(1)

    try:
        questionnaire_from_dict(document)
    except (ValidationError, QCMError) as e:
        console.print(f"[red]Invalid:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    console.print(f"[green]Valid:[/green] {input_path}")


@app.command()
def schema(
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write the schema to this file"),
    ] = None,
) -> None:
    """Print the JSON Schema of the questionnaire document."""
    text = json.dumps(json_schema(), indent=2)
    if output_path is None:
        typer.echo(text)
        return
    output_path.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]Wrote schema[/green] -> {output_path}")


@app.command()
def init(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Create the global mdqcm config file with default settings.

    Creates:
      ~/.config/mdqcm/config.yaml  (or $MDQCM_HOME/config.yaml)
    """
    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Warning:[/yellow] Config already exists at {config_path}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    write_default_config(config_path)
    console.print(f"[green]✓[/green] Created config at {config_path}")


if __name__ == "__main__":
    app()
