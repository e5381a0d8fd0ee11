"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from texrender.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, compiler: str) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.
    Library code never calls this; it is meant for entry points such as the CLI.

    Args:
        log_dir: Directory for this rendering session
        compiler: Compiler executable the render will run (RenderConfig.resolved_command())

    Returns:
        Path to log file

    Example:
        from texrender.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(Path("outs/logs/render_20261019_101500"), "xelatex")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        compiler=compiler,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(command: str, max_runs: int, auto: bool, working_dir: Path) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering in {working_dir}")
    _log_debug(f"  Compiler: {command}")
    if auto:
        _log_debug(f"  Passes: auto (at most {max_runs})")
    else:
        _log_debug(f"  Passes: {max_runs}")


def log_pass(pass_number: int, max_runs: int) -> None:
    """Log the start of one compiler pass."""
    _log_debug(f"Pass {pass_number}/{max_runs}")


def log_compiler_output(stdout: str, stderr: str) -> None:
    """
    Dump captured compiler output at debug level.

    Uses opt(raw=True) so multi-line output keeps its formatting instead of
    getting a timestamp/level prefix on every line.
    """
    if stdout:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nCOMPILER STDOUT:\n{'=' * 80}\n{stdout}\n")
    if stderr:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nCOMPILER STDERR:\n{'=' * 80}\n{stderr}\n")


def log_render_result(passes: int, size: int, elapsed_time: float) -> None:
    """Log a successful render."""
    _log_success(f"Render succeeded: {passes} pass(es), {size} bytes ({elapsed_time:.2f}s)")
