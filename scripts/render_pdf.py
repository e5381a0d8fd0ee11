#!/usr/bin/env python3
"""
LaTeX Rendering CLI

Renders LaTeX documents to PDF through the rendering context.

Commands:
    render    - Render a .tex file (or stdin) to PDF
    check-log - Report whether a preserved working directory asks for a rerun

Examples:\n

    render_pdf.py render paper.tex                          # Writes paper.pdf

    render_pdf.py render paper.tex -o out/paper.pdf -r 2    # Exactly two passes

    cat paper.tex | render_pdf.py render - -o paper.pdf     # Read from stdin

    render_pdf.py check-log /tmp/gotex-abc123               # Inspect a failed render
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from typing_extensions import Annotated

from texrender.rendering import RenderConfig, RenderError, needs_rerun, render
from texrender.rendering.logger import setup_rendering_logger
from texrender.rendering.rerun import LOG_NAME

load_dotenv()

app = typer.Typer(
    help="Render LaTeX documents to PDF",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    source: Annotated[
        str,
        typer.Argument(help="Path to a .tex file, or '-' to read the document from stdin"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Where to write the PDF (default: SOURCE with .pdf suffix)",
        ),
    ] = None,
    runs: Annotated[
        int,
        typer.Option(
            "--runs",
            "-r",
            help="Number of compiler passes (default: 0, decided from the LaTeX log)",
            min=0,
        ),
    ] = 0,
    command: Annotated[
        str,
        typer.Option(
            "--command",
            "-c",
            help="Compiler executable (default: $LATEX_COMPILER or pdflatex)",
        ),
    ] = "",
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for a render.log with full debug output",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output (compiler stdout/stderr) on the console",
        ),
    ] = False,
):
    """
    Render a LaTeX document to PDF.

    On failure the compiler's working directory is kept and its log path is
    printed.

    Examples:\n

        $ render_pdf.py render paper.tex                  # Auto-detect passes

        $ render_pdf.py render paper.tex --runs 3         # Three passes

        $ render_pdf.py render paper.tex -c xelatex       # Different compiler
    """
    if source == "-":
        if output is None:
            typer.secho(
                "Error: --output is required when reading from stdin\n",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=2)
        document = sys.stdin.read()
    else:
        source_path = Path(source)
        if not source_path.is_file():
            typer.secho(f"Error: file not found: {source_path}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2)
        try:
            document = source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            typer.secho(
                f"Error: {source_path} is not valid UTF-8 ({e.reason} at byte {e.start})\n",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=2)
        if output is None:
            output = source_path.with_suffix(".pdf")

    config = RenderConfig(command=command, runs=runs)
    if log_dir is not None:
        setup_rendering_logger(log_dir, config.resolved_command())
    else:
        logger.remove()
        logger.add(
            sys.stderr,
            format="<level>{level: <7}</level> | {message}",
            level="DEBUG" if verbose else "WARNING",
        )

    typer.secho(f"\nRendering: {source}", fg=typer.colors.BLUE, bold=True, err=True)
    typer.echo(f"Passes: {runs if runs > 0 else 'auto'}", err=True)

    try:
        pdf = render(document, config)
    except RenderError as e:
        typer.secho("✗ Render failed", fg=typer.colors.RED, bold=True, err=True)
        typer.secho(f"  {e}", fg=typer.colors.RED, err=True)
        if e.working_dir:
            typer.echo(f"  Working directory kept: {e.working_dir}", err=True)
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(pdf)

    typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True, err=True)
    typer.echo(f"  PDF: {output} ({len(pdf)} bytes)", err=True)
    if log_dir is not None:
        typer.echo(f"  Log: {log_dir / 'render.log'}", err=True)


@app.command("check-log")
def check_log_command(
    working_dir: Annotated[
        Path,
        typer.Argument(help="Working directory left behind by a failed render"),
    ],
):
    """
    Report whether the compiler log in a working directory asks for a rerun.

    Exit code is 0 when no rerun is requested and 1 when one is.
    """
    log_path = working_dir / LOG_NAME
    if not log_path.exists():
        typer.secho(f"No {LOG_NAME} in {working_dir}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=0)

    if needs_rerun(working_dir):
        typer.secho(f"Rerun requested by {log_path}", fg=typer.colors.YELLOW, bold=True)
        raise typer.Exit(code=1)

    typer.secho(f"No rerun requested by {log_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
