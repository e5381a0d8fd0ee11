"""
Rerun detection.

Decides whether another compiler pass is needed by scanning the log left by
the latest pass.
"""

from pathlib import Path

from texrender.rendering.logger import _log_debug

LOG_NAME = "gotex.log"

# Emitted by LaTeX when labels moved, e.g.
# "Label(s) may have changed. Rerun to get cross-references right."
RERUN_MARKER = "Rerun to get"


def needs_rerun(working_dir: Path) -> bool:
    """
    Check whether the compiler log asks for another pass.

    Only the log as it stands after the most recent pass is consulted. An
    unreadable or missing log counts as "no rerun".

    Args:
        working_dir: Working directory of the current render

    Returns:
        True if any log line contains the rerun marker
    """
    log_path = Path(working_dir) / LOG_NAME
    try:
        # pdflatex writes log files in latin-1 encoding (font metadata contains non-UTF-8)
        with open(log_path, "r", encoding="latin-1") as f:
            for line in f:
                if RERUN_MARKER in line:
                    _log_debug(f"Rerun requested: {line.strip()}")
                    return True
    except OSError as e:
        _log_debug(f"Log not readable, assuming no rerun: {e}")
        return False

    return False
