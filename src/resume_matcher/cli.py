"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_matcher.clients.llm_client import LLMClient
from resume_matcher.config import AppConfig, load_config
from resume_matcher.delivery.email_sender import EmailSender, score_color, score_label
from resume_matcher.layout.document import ResumeDocument
from resume_matcher.layout.sections import split_sections
from resume_matcher.parsers.resume_parser import parse_resume
from resume_matcher.pipeline.orchestrator import PipelineOrchestrator

app = typer.Typer(
    name="resume-matcher",
    help="Score a resume against a job description and render a tailored PDF.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(1)


def _load_config() -> AppConfig:
    try:
        return load_config()
    except ValueError as e:
        _fail(e)


def _read_text(path: Path, what: str) -> str:
    if not path.exists():
        console.print(f"[red]{what} not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


@app.command()
def render(
    input_file: Path = typer.Argument(help="Section-marked resume text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output PDF path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render section-marked resume text to a PDF."""
    _setup_logging(verbose)
    text = _read_text(input_file, "Input file")
    config = _load_config()

    document = ResumeDocument(config.layout)
    count = document.render(text)
    if count == 0:
        console.print("[yellow]No \\[SECTION] markers found; writing a blank page.[/yellow]")

    output = output or input_file.with_suffix(".pdf")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(document.to_bytes())
    console.print(
        f"[green]PDF saved: {output}[/green] "
        f"({count} sections, {document.flow.page_count} pages)"
    )


@app.command()
def sections(
    input_file: Path = typer.Argument(help="Section-marked resume text file"),
) -> None:
    """List the sections found in section-marked resume text."""
    text = _read_text(input_file, "Input file")
    found = split_sections(text)
    if not found:
        console.print("[yellow]No \\[SECTION] markers found.[/yellow]")
        return

    table = Table(title=str(input_file))
    table.add_column("#", justify="right")
    table.add_column("Marker")
    table.add_column("Kind")
    table.add_column("Lines", justify="right")
    for i, section in enumerate(found, 1):
        lines = [line for line in section.lines if line]
        table.add_row(str(i), section.key, section.kind.name, str(len(lines)))
    console.print(table)


@app.command()
def tailor(
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF/TXT/MD)"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, max=2, help="Page budget (1 or 2)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output PDF path"),
    email: str = typer.Option(None, "--email", help="Email the PDF to this address"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score a resume against a job description and render a tailored PDF."""
    _setup_logging(verbose)
    if not resume.exists():
        console.print(f"[red]Resume file not found: {resume}[/red]")
        raise typer.Exit(1)
    jd_text = _read_text(jd, "Job description").strip()
    if not jd_text:
        console.print("[red]Job description is empty.[/red]")
        raise typer.Exit(1)

    try:
        resume_text = parse_resume(resume)
    except ValueError as e:
        _fail(e)

    config = _load_config()
    llm = LLMClient(timeout=config.llm.timeout)
    sender = None
    if email:
        sender = EmailSender(
            from_email=config.email.resolved_from_email,
            subject=config.email.subject,
            attachment_filename=config.email.attachment_filename,
            api_url=config.email.api_url,
            timeout=config.email.timeout,
        )
    orchestrator = PipelineOrchestrator(
        llm,
        model=config.llm.model,
        analysis_max_tokens=config.llm.analysis_max_tokens,
        email_sender=sender,
        style=config.layout,
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Starting...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=detail)

        try:
            result = asyncio.run(
                orchestrator.run(resume_text, jd_text, pages, recipient=email, on_phase=on_phase)
            )
        except ValueError as e:
            progress.stop()
            _fail(e)

    analysis = result.analysis
    color = score_color(analysis.score)
    console.print(
        Panel(
            f"[bold {color}]{analysis.score}[/bold {color}] / 100  {score_label(analysis.score)}\n\n"
            f"{escape(analysis.summary)}\n\n"
            f"Matched: {escape(', '.join(analysis.matched_skills)) or '-'}\n"
            f"Missing: {escape(', '.join(analysis.missing_skills)) or '-'}\n"
            f"Elapsed: {result.elapsed_seconds:.1f}s",
            title="Match analysis",
        )
    )

    if result.pdf_bytes is None:
        console.print("[yellow]PDF could not be built; see the log above.[/yellow]")
        raise typer.Exit(1)

    output = output or Path("./output") / f"{resume.stem}_tailored.pdf"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.pdf_bytes)
    console.print(f"[green]PDF saved: {output}[/green]")

    if email:
        if result.email_sent:
            console.print(f"[green]Emailed to {email}[/green]")
        else:
            console.print(f"[yellow]Email to {email} failed; the PDF is saved locally.[/yellow]")

    if verbose:
        tokens = llm.get_token_summary()
        console.print(f"[dim]Tokens: {tokens['input']} in / {tokens['output']} out[/dim]")


if __name__ == "__main__":
    app()
