"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from resume_manager.config import DOCUMENT_TYPES, LOG_LEVELS, AppConfig, load_config
from resume_manager.history.models import GenerationRun
from resume_manager.history.run_store import RunStore
from resume_manager.pipeline.orchestrator import (
    execute_data_generation,
    execute_pdf_generation,
    resolve_doc_types,
)
from resume_manager.pipeline.tailor_context import validate_and_set_tailor_env_pipeline
from resume_manager.themes import THEMES
from resume_manager.utils.log import configure_logging
from resume_manager.utils.paths import is_valid_company_name, normalize_company_name
from resume_manager.utils.result import Err
from resume_manager.validation.path_resolution import validate_mutually_exclusive_options
from resume_manager.validation.pipeline import VALIDATION_TYPE_KEYS, validate_tailor_files_pipeline
from resume_manager.validation.types import PathResolutionInput

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="resume-manager",
    help="Generate tailored resume and cover-letter PDFs from company YAML data",
    no_args_is_help=True,
)
console = Console()


def _fail(error: Err) -> NoReturn:
    body = Text(error.error, style="bold")
    if error.details:
        body.append(f"\n\n{error.details}", style="default")
    if error.file_path:
        body.append(f"\n\nFile: {error.file_path}", style="dim")
    console.print(Panel(body, title="Error", border_style="red"))
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    try:
        config = load_config()
    except (ValueError, TypeError, yaml.YAMLError) as e:
        _fail(Err(error="Invalid configuration", details=str(e)))
    if log_level and log_level.upper() not in LOG_LEVELS:
        _fail(
            Err(
                error=f"Invalid log level: {log_level}",
                details=f"Expected one of: {', '.join(LOG_LEVELS)}",
            )
        )
    ctx.obj = config
    configure_logging(log_level or config.logging.level)


def _check_company_name(company: str) -> None:
    if not is_valid_company_name(company):
        _fail(
            Err(
                error=f"Invalid company name: {company}",
                details=(
                    "Company folders use lower-case kebab-case names. "
                    f"Did you mean '{normalize_company_name(company)}'?"
                ),
            )
        )


@app.command()
def generate(
    ctx: typer.Context,
    company: str = typer.Option(..., "--company", "-C", help="Company folder name"),
    doc_type: str = typer.Option(None, "--doc-type", "-D", help="resume, cover-letter or both"),
    output: Path = typer.Option(None, "--output", "-o", help="Output directory for PDFs"),
) -> None:
    """Validate a company's YAML files and render PDFs."""
    config: AppConfig = ctx.obj
    _check_company_name(company)
    doc_type = doc_type or config.render.default_doc_type
    if doc_type not in DOCUMENT_TYPES:
        console.print(f"[red]Invalid document type: {doc_type}[/red]")
        console.print(f"[dim]Expected one of: {', '.join(DOCUMENT_TYPES)}[/dim]")
        raise typer.Exit(1)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Generating documents...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=f"{phase}: {detail}")

        result = asyncio.run(
            execute_pdf_generation(
                company,
                doc_type,
                base_dir=config.paths.tailor_base,
                output_dir=output or config.paths.output_dir,
                on_phase=on_phase,
            )
        )

    if config.history.enabled:
        doc_types = resolve_doc_types(doc_type)
        run = GenerationRun(
            company_name=company,
            doc_types=doc_types.data if not isinstance(doc_types, Err) else [doc_type],
            success=not isinstance(result, Err),
        )
        if isinstance(result, Err):
            run.error_message = result.error
        else:
            run.theme = result.data.theme
            run.files = [str(f.file_path) for f in result.data.files]
            run.elapsed_seconds = result.data.elapsed_seconds
        try:
            RunStore(config.history.resolved_db_path).save_run(run)
        except Exception:
            logger.exception("Failed to save generation run")

    if isinstance(result, Err):
        _fail(result)

    console.print(f"[green]Generated with theme '{result.data.theme}':[/green]")
    for document in result.data.files:
        console.print(f"  [bold]{document.doc_type}[/bold]: {document.file_path}")


@app.command()
def validate(
    ctx: typer.Context,
    company: str = typer.Option(None, "--company", "-C", help="Company folder name"),
    path: str = typer.Option(None, "--path", "-P", help="Custom company folder path"),
    validation_type: str = typer.Option(
        "all", "--type", "-t", help="all, metadata, resume, job-analysis or cover-letter"
    ),
) -> None:
    """Validate a company's YAML files against their schemas."""
    config: AppConfig = ctx.obj
    if validation_type not in VALIDATION_TYPE_KEYS:
        console.print(f"[red]Invalid validation type: {validation_type}[/red]")
        console.print(f"[dim]Expected one of: {', '.join(VALIDATION_TYPE_KEYS)}[/dim]")
        raise typer.Exit(1)

    options = PathResolutionInput(company_name=company, custom_path=path)
    checked = validate_mutually_exclusive_options(options)
    if isinstance(checked, Err):
        _fail(checked)
    if company:
        _check_company_name(company)

    result = validate_tailor_files_pipeline(options, validation_type, config.paths.tailor_base)
    if isinstance(result, Err):
        _fail(result)

    report = result.data
    console.print(f"[green]Validation passed:[/green] {report.path}")
    for file in report.validated_files:
        console.print(f"  [bold]{file.display_name}[/bold] ({file.file_name})")


@app.command("generate-data")
def generate_data(
    ctx: typer.Context,
    company: str = typer.Option(..., "--company", "-C", help="Company folder name"),
    output: Path = typer.Option(None, "--output", "-o", help="Snapshot file path (.json)"),
) -> None:
    """Write the validated application data as a JSON snapshot."""
    config: AppConfig = ctx.obj
    _check_company_name(company)
    output = output or Path(config.paths.generated_data)
    result = execute_data_generation(
        company, base_dir=config.paths.tailor_base, output_path=output
    )
    if isinstance(result, Err):
        _fail(result)
    console.print(f"[green]Application data written: {output}[/green]")


@app.command("set-env")
def set_env(
    ctx: typer.Context,
    company: str = typer.Option(..., "--company", "-C", help="Company folder name"),
) -> None:
    """Make a company the active tailoring context."""
    config: AppConfig = ctx.obj
    _check_company_name(company)
    result = validate_and_set_tailor_env_pipeline(
        company,
        base_dir=config.paths.tailor_base,
        context_path=config.paths.context_file,
        data_path=config.paths.generated_data,
    )
    if isinstance(result, Err):
        _fail(result)
    console.print_json(result.data.model_dump_json(exclude_none=True))


@app.command()
def themes() -> None:
    """List the registered themes and their sections."""
    for name, theme in THEMES.items():
        console.print(f"[bold]{name}[/bold]: {theme.description}")
        for label, component in (
            ("resume", theme.components.resume),
            ("cover-letter", theme.components.cover_letter),
        ):
            if component is None:
                continue
            sections = ", ".join(s.id for s in component.sections)
            console.print(f"  {label} [{sections}]", markup=False)


@app.command()
def history(
    ctx: typer.Context,
    company: str = typer.Option(None, "--company", "-C", help="Only runs for this company"),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of runs to show"),
) -> None:
    """Show recent generation runs."""
    config: AppConfig = ctx.obj
    store = RunStore(config.history.resolved_db_path)
    runs = store.get_runs(company_name=company, limit=limit)
    if not runs:
        console.print("[yellow]No runs recorded yet.[/yellow]")
        return

    table = Table(title="Generation runs")
    table.add_column("When")
    table.add_column("Company")
    table.add_column("Documents")
    table.add_column("Theme")
    table.add_column("Result")
    table.add_column("Seconds", justify="right")
    for run in runs:
        status = "[green]ok[/green]" if run.success else f"[red]{run.error_message or 'failed'}[/red]"
        table.add_row(
            run.timestamp.strftime("%Y-%m-%d %H:%M"),
            run.company_name,
            ", ".join(run.doc_types),
            run.theme or "-",
            status,
            f"{run.elapsed_seconds:.1f}",
        )
    console.print(table)

    stats = store.get_stats()
    console.print(
        f"[dim]{stats['total_runs']} run(s), "
        f"{stats['success_rate']:.0f}% successful, "
        f"{stats['companies']} compan{'y' if stats['companies'] == 1 else 'ies'}[/dim]"
    )


if __name__ == "__main__":
    app()
