"""
Logger setup for texrender entry points.

Configures loguru sinks for a render session and writes a provenance header
naming the compiler actually used. Context-specific wrappers live in
{context}/logger.py.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def setup_logger(
    context_name: str,
    log_dir: Path,
    compiler: str,
    console_level: str = "INFO",
) -> Path:
    """
    Send logs to <log_dir>/<context_name>.log (DEBUG) and stderr (console_level).

    stdout is left alone so a PDF can be piped out of the CLI.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Directory for this logging session, created if missing
        compiler: Compiler executable the session will run
        console_level: Minimum level shown on the console

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(compiler)

    return log_file


def log_provenance(compiler: str) -> None:
    """
    Log who ran what: command line, cwd, Python and compiler.

    Args:
        compiler: Compiler executable as passed to the subprocess
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"LaTeX compiler: {compiler}")
    logger.info("=" * 80)
