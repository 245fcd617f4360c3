"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console

from cv_assistant_core.config.settings import Settings
from cv_assistant_core.exceptions import CVAssistantError
from cv_assistant_core.models.profile import Profile
from cv_assistant_engine.observability import (
    bind_session_context,
    clear_session_context,
    configure_logging,
)
from cv_assistant_engine.session import ResumeSession, describe_parse
from cv_assistant_engine.tools.document_loader import DocumentLoader
from cv_assistant_engine.tools.email_sender import EmailSender
from cv_assistant_engine.tools.pdf_parser import PDFParser

app = typer.Typer(
    name="cv-assistant",
    help="Extract a structured profile from a résumé and answer questions about it",
)
console = Console()

EXIT_WORDS = {"exit", "quit"}


def _setup(verbose: bool) -> Settings:
    """Load settings and configure logging."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {exc}", style="bold")
    return typer.Exit(code=1)


def _open_session(settings: Settings, document: Path) -> tuple[ResumeSession, Profile]:
    """Create a session and parse ``document`` into it."""
    loader = DocumentLoader(
        pdf_parser=PDFParser(min_text_chars=settings.min_pdf_text_chars),
        max_size_mb=settings.max_document_size_mb,
    )
    session = ResumeSession(loader=loader)
    bind_session_context(session.session_id)
    profile = asyncio.run(session.load(document))
    return session, profile


@app.command()
def parse(
    document: Path = typer.Argument(..., help="Path to a résumé (.pdf or .txt)"),
    as_json: bool = typer.Option(False, "--json", help="Print the extracted profile as JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Parse a résumé and summarize what was found."""
    settings = _setup(verbose)
    try:
        _, profile = _open_session(settings, document)
    except CVAssistantError as exc:
        raise _fail(exc) from exc
    finally:
        clear_session_context()

    if as_json:
        typer.echo(json.dumps(profile.to_payload(), indent=2, ensure_ascii=False))
        return

    console.print(f"[bold green]{describe_parse(profile)}[/bold green]")
    console.print(f"  Name: {profile.name or '-'}", markup=False)
    console.print(f"  Email: {profile.email or '-'}", markup=False)
    console.print(f"  Phone: {profile.phone or '-'}", markup=False)
    console.print(f"  Education entries: {len(profile.education)}")


@app.command()
def ask(
    document: Path = typer.Argument(..., help="Path to a résumé (.pdf or .txt)"),
    question: str = typer.Argument(..., help='Question, e.g. "What was my last role?"'),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Parse a résumé and answer one question about it."""
    settings = _setup(verbose)
    try:
        session, _ = _open_session(settings, document)
        answer = session.ask(question)
    except CVAssistantError as exc:
        raise _fail(exc) from exc
    finally:
        clear_session_context()
    console.print(answer, markup=False, soft_wrap=True)


@app.command()
def chat(
    document: Path = typer.Argument(..., help="Path to a résumé (.pdf or .txt)"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Parse a résumé, then answer questions until 'exit'."""
    settings = _setup(verbose)
    try:
        session, profile = _open_session(settings, document)
        console.print(f"[bold green]{describe_parse(profile)}[/bold green]")
        console.print("[dim]Ask about experience, skills, education or contact. 'exit' quits.[/dim]")
        while True:
            try:
                question = console.input("[bold]> [/bold]").strip()
            except EOFError:
                break
            if not question or question.lower() in EXIT_WORDS:
                break
            console.print(session.ask(question), markup=False, soft_wrap=True)
    except CVAssistantError as exc:
        raise _fail(exc) from exc
    finally:
        clear_session_context()


@app.command("send-email")
def send_email(
    to: str = typer.Option(..., "--to", help="Recipient email address"),
    subject: str = typer.Option(..., "--subject", help="Email subject"),
    body: str = typer.Option("", "--body", help="Email body text"),
    body_file: Path | None = typer.Option(
        None, "--body-file", help="File containing the email body", exists=True
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Send an email notification over SMTP."""
    settings = _setup(verbose)
    text = body_file.read_text(encoding="utf-8") if body_file else body
    if not text.strip():
        console.print("[red]Error:[/red] Provide --body or --body-file", style="bold")
        raise typer.Exit(code=1)

    sender = EmailSender.from_settings(settings)
    try:
        asyncio.run(sender.send(to, subject, text))
    except CVAssistantError as exc:
        raise _fail(exc) from exc
    console.print(f"[green]Email sent successfully to {to}[/green]")


@app.command("check-smtp")
def check_smtp(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Verify the configured SMTP server accepts a connection."""
    settings = _setup(verbose)
    sender = EmailSender.from_settings(settings)
    if not asyncio.run(sender.verify_connection()):
        console.print(f"[red]SMTP verification failed[/red] ({settings.smtp_host})")
        raise typer.Exit(code=1)
    console.print(f"[green]SMTP connection OK[/green] ({settings.smtp_host})")


@app.command()
def version() -> None:
    """Show version."""
    console.print("cv-assistant v0.1.0")


if __name__ == "__main__":
    app()
