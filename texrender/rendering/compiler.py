"""
LaTeX Compilation Module

Renders a LaTeX document to PDF bytes by running the compiler as many times as
the document needs, inside a private temporary directory.
"""

import os
import shutil
import subprocess
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from texrender.rendering.exceptions import (
    ArtifactReadError,
    CompilerInvocationError,
    WorkingAreaCreationError,
)
from texrender.rendering.logger import (
    _log_debug,
    _log_error,
    _log_warning,
    log_compiler_output,
    log_pass,
    log_render_result,
    log_render_start,
)
from texrender.rendering.rerun import LOG_NAME, needs_rerun

load_dotenv()

# Resolved through PATH when not an absolute path
DEFAULT_COMPILER = os.getenv("LATEX_COMPILER") or "pdflatex"
# Base directory for working directories (None means the system temp dir)
TEMP_ROOT = os.getenv("TEXRENDER_TMPDIR") or None

# Fixed job name so output filenames never depend on the input
JOB_NAME = "gotex"
ARTIFACT_NAME = f"{JOB_NAME}.pdf"
COMPILER_ARGS = (f"-jobname={JOB_NAME}", "-halt-on-error")

# Ceiling for auto mode so a document that always asks for a rerun cannot loop forever.
# Callers needing more passes must set RenderConfig.runs explicitly.
MAX_AUTO_RUNS = 5


@dataclass(frozen=True)
class RenderConfig:
    """
    Knobs for a render.

    Attributes:
        command: Compiler executable, by name or absolute path. Empty means
            DEFAULT_COMPILER. Use a full path if PATH is not set in your environment.
        runs: Number of compiler passes. 0 (or negative) means auto mode: run
            until the log stops asking for a rerun, at most MAX_AUTO_RUNS times.
    """

    command: str = ""
    runs: int = 0

    def resolved_command(self) -> str:
        return self.command or DEFAULT_COMPILER

    @property
    def auto(self) -> bool:
        return self.runs <= 0


def run_once(document: str, config: RenderConfig, working_dir: Path) -> None:
    """
    Run a single compiler pass.

    The document is fed over stdin and the compiler runs with working_dir as
    its cwd, so every file it writes lands there.

    Args:
        document: LaTeX source
        config: Render configuration
        working_dir: Working directory shared by all passes of this render

    Raises:
        CompilerInvocationError: If the compiler cannot be started or exits non-zero
    """
    working_dir = Path(working_dir)
    log_path = working_dir / LOG_NAME
    cmd = [config.resolved_command(), *COMPILER_ARGS]

    try:
        result = subprocess.run(
            cmd,
            cwd=working_dir,
            input=document,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",  # Replace invalid UTF-8 bytes instead of crashing
        )
    except (OSError, ValueError) as e:
        # ValueError: argv the OS cannot accept, e.g. an embedded NUL
        _log_error(f"Could not start {cmd[0]}: {e}")
        raise CompilerInvocationError(working_dir, log_path, original_error=e) from e

    log_compiler_output(result.stdout, result.stderr)

    # The exit status does not distinguish error classes; the log explains the failure
    if result.returncode != 0:
        _log_error(f"{cmd[0]} exited with status {result.returncode}")
        raise CompilerInvocationError(working_dir, log_path, returncode=result.returncode)


def render(document: str, config: Optional[RenderConfig] = None) -> bytes:
    """
    Render a LaTeX document to PDF.

    On failure the working directory is left intact so the compiler log can be
    inspected; the raised error tells you where to find it.

    Args:
        document: LaTeX source
        config: Render configuration (default: RenderConfig())

    Returns:
        The PDF as bytes

    Raises:
        WorkingAreaCreationError: If the temporary directory cannot be created
        CompilerInvocationError: If any pass fails
        ArtifactReadError: If the PDF is missing after the last pass

    Example:
        pdf = render(r"\\documentclass{article}\\begin{document}Hi\\end{document}")
        Path("out.pdf").write_bytes(pdf)
    """
    if config is None:
        config = RenderConfig()

    try:
        working_dir = Path(tempfile.mkdtemp(prefix=f"{JOB_NAME}-", dir=TEMP_ROOT))
    except OSError as e:
        raise WorkingAreaCreationError(
            f"Could not create working directory: {e}", original_error=e
        ) from e
    # Cleanup is not in a finally block: the log must survive a failed render.

    max_runs = MAX_AUTO_RUNS if config.auto else config.runs
    log_render_start(config.resolved_command(), max_runs, config.auto, working_dir)

    start_time = time.time()
    passes = 0
    rerun = True
    while rerun and passes < max_runs:
        log_pass(passes + 1, max_runs)
        run_once(document, config, working_dir)
        passes += 1
        if config.auto:
            rerun = needs_rerun(working_dir)

    artifact_path = working_dir / ARTIFACT_NAME
    try:
        output = artifact_path.read_bytes()
    except OSError as e:
        _log_error(f"Compiler reported success but no PDF was readable at {artifact_path}")
        raise ArtifactReadError(
            artifact_path, working_dir, log_path=working_dir / LOG_NAME, original_error=e
        ) from e

    log_render_result(passes, len(output), time.time() - start_time)

    # Best effort; the PDF is already in hand
    try:
        shutil.rmtree(working_dir)
    except OSError as e:
        _log_warning(f"Could not remove working directory {working_dir}: {e}")
    else:
        _log_debug(f"Removed working directory {working_dir}")

    return output
