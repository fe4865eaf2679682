"""
Resume Builder Command Line Interface

Provides CLI commands for parsing resume files into structured records
and checking files before upload.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="resume-builder",
    help="Resume parsing and structuring CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Resume Builder command line tools."""
    from resume_builder.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from resume_builder import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from resume_builder.utils.config import get_settings
    from resume_builder.nlp.extractors import ExtractorFactory

    settings = get_settings()

    table = Table(title="Resume Builder Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Max Upload Size", f"{settings.upload.max_file_size_mb} MB")
    table.add_row("Upload Directory", str(settings.upload.upload_dir))
    table.add_row("Supported Formats", ", ".join(ExtractorFactory.get_supported_extensions()))
    table.add_row("Enhancement Style", settings.enhancement.default_style)
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="Path to the resume file"),
    media_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="MIME type (inferred from the extension by default)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the parsed record as JSON"),
):
    """Parse a resume file and show the structured result."""
    from resume_builder.nlp import ResumeParseError, parse_resume_file

    try:
        record = parse_resume_file(path, media_type)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    except ResumeParseError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Parsed Resume: {path.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Name", record.name)
    table.add_row("Role", record.role)
    table.add_row("Email", record.email)
    table.add_row("Phone", record.phone)
    table.add_row("LinkedIn", record.linkedin or "-")
    table.add_row("Location", record.location)
    table.add_row("Summary", record.summary[:80] + ("..." if len(record.summary) > 80 else "") or "-")
    table.add_row("Experience", str(len(record.experience)))
    table.add_row("Education", str(len(record.education)))
    table.add_row("Projects", str(len(record.projects)))
    table.add_row("Achievements", str(len(record.achievements)))
    table.add_row("Certifications", str(len(record.certifications)))
    table.add_row("Courses", str(len(record.courses)))
    table.add_row("Skills", ", ".join(record.skills) or "-")
    table.add_row("Completeness", f"{record.completeness_percentage()}%")

    console.print(table)


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Path to the resume file"),
):
    """Check a file against the upload rules."""
    from resume_builder.nlp import UnsupportedMediaTypeError
    from resume_builder.nlp.extractors import media_type_for_path
    from resume_builder.services import validate_upload

    if path.is_file():
        try:
            media_type: Optional[str] = media_type_for_path(path).value
        except UnsupportedMediaTypeError:
            media_type = None
        result = validate_upload(path.name, path.stat().st_size, media_type)
    else:
        result = validate_upload(None, None, None)

    for error in result.errors:
        console.print(f"  [red]✗[/red] {error}")
    for warning in result.warnings:
        console.print(f"  [yellow]![/yellow] {warning}")

    if not result.is_valid:
        console.print(f"[red]{path.name} cannot be uploaded.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ {path.name} is ready to upload.[/green]")


if __name__ == "__main__":
    app()
