#!/usr/bin/env python3
"""
Resume Review CLI

Reviews a PDF resume against a job description with an LLM.

Commands:
    review  - Review a PDF resume against a job description
    extract - Print the text extracted from a PDF resume
    prompt  - Print the review prompt without calling the LLM

Examples:\n

    review_resume.py review resume.pdf --jd "Looking for a Senior Engineer"

    review_resume.py review resume.pdf --jd-file job.txt --format json

    review_resume.py review resume.pdf --jd-file job.txt --provider openai --model gpt-4o

    review_resume.py extract resume.pdf

    review_resume.py prompt resume.pdf --jd-file job.txt
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from reviewer.contexts.extraction import ExtractionError, extract_text
from reviewer.contexts.presentation import format_review_text, render_review
from reviewer.contexts.review import build_review_prompt
from reviewer.contexts.review.logger import setup_review_logger
from reviewer.session import ReviewSession
from reviewer.utils.llm import get_provider
from reviewer.utils.settings import LOGS_PATH, load_settings

load_dotenv()

OUTPUT_FORMATS = ("text", "json")


app = typer.Typer(
    help="Review a PDF resume against a job description with an LLM",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def fail(message: str) -> None:
    """Print a user-facing error and exit with status 1."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def read_pdf(path: Path) -> bytes:
    if not path.exists():
        fail(f"File not found: {path}")
    return path.read_bytes()


def read_job_description(jd: Optional[str], jd_file: Optional[Path]) -> str:
    """Job description from --jd or --jd-file (exactly one may be given)."""
    if jd is not None and jd_file is not None:
        fail("Use either --jd or --jd-file, not both.")
    if jd_file is not None:
        if not jd_file.exists():
            fail(f"File not found: {jd_file}")
        return jd_file.read_text(encoding="utf-8")
    return jd or ""


ResumeArg = Annotated[Path, typer.Argument(help="PDF resume to read")]
JDOption = Annotated[
    Optional[str], typer.Option("--jd", help="Job description text")
]
JDFileOption = Annotated[
    Optional[Path], typer.Option("--jd-file", help="File containing the job description")
]


@app.command("review")
def review_command(
    resume: ResumeArg,
    jd: JDOption = None,
    jd_file: JDFileOption = None,
    provider: Annotated[
        Optional[str],
        typer.Option("--provider", help="LLM provider: gemini, openai or anthropic"),
    ] = None,
    model: Annotated[
        Optional[str],
        typer.Option("--model", "-m", help="Model name (default: provider setting)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for this session's log file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Review a PDF resume against a job description.

    Extracts the resume text, makes one request to the LLM, and prints the
    review, the two scores, the suggestions, and any spelling errors.

    Examples:\n

        $ review_resume.py review resume.pdf --jd "Looking for a Senior Engineer"

        $ review_resume.py review resume.pdf --jd-file job.txt --format json
    """
    if output_format not in OUTPUT_FORMATS:
        fail(f"Unknown format: {output_format}. Use one of: {', '.join(OUTPUT_FORMATS)}")

    pdf_bytes = read_pdf(resume)
    job_description = read_job_description(jd, jd_file)

    provider_label = provider or str(load_settings().llm.provider)
    log_dir = log_dir or LOGS_PATH / f"review_{datetime.now():%Y%m%d_%H%M%S}"
    log_file = setup_review_logger(log_dir, provider_name=provider_label, verbose=verbose)

    try:
        llm = get_provider(provider_name=provider, model=model)
    except (ValueError, ImportError) as e:
        fail(str(e))

    session = ReviewSession()
    session.select_file(pdf_bytes)
    if session.extraction_error:
        fail(session.extraction_error)
    if session.extraction_note:
        fail(session.extraction_note)

    session.set_job_description(job_description)
    if not session.can_review:
        fail("Both resume text and a job description are required.")

    session.request_review(llm)
    if session.review_error:
        typer.echo(f"Log: {log_file}", err=True)
        fail(session.review_error)

    if output_format == "json":
        typer.echo(json.dumps(session.result.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_review_text(render_review(session.result)))


@app.command("extract")
def extract_command(resume: ResumeArg):
    """Print the text extracted from a PDF resume, one line per page."""
    try:
        text = extract_text(read_pdf(resume))
    except ExtractionError as e:
        fail(e.user_message)
    typer.echo(text, nl=False)


@app.command("prompt")
def prompt_command(resume: ResumeArg, jd: JDOption = None, jd_file: JDFileOption = None):
    """Print the review prompt that would be sent, without calling the LLM."""
    job_description = read_job_description(jd, jd_file)
    try:
        text = extract_text(read_pdf(resume))
    except ExtractionError as e:
        fail(e.user_message)
    typer.echo(build_review_prompt(text, job_description))


if __name__ == "__main__":
    app()
