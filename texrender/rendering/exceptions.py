"""Custom exceptions for rendering context with pointers to diagnostic state."""

from pathlib import Path
from typing import Optional


class RenderError(Exception):
    """
    Base exception for a failed render.

    Attributes:
        message: Error description
        working_dir: Working directory of the failed render (None if never created)
        log_path: Compiler log file to inspect (None if not applicable)
    """

    def __init__(
        self,
        message: str,
        working_dir: Optional[Path] = None,
        log_path: Optional[Path] = None,
    ):
        self.message = message
        self.working_dir = working_dir
        self.log_path = log_path

        # Build enhanced error message
        parts = [message]

        if log_path and str(log_path) not in message:
            parts.append(f"Log: {log_path}")

        super().__init__("\n".join(parts))


class WorkingAreaCreationError(RenderError):
    """
    Exception raised when the temporary working directory cannot be created.

    Nothing exists on disk yet, so there is nothing to clean up.

    Attributes:
        original_error: The underlying OSError
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class CompilerInvocationError(RenderError):
    """
    Exception raised when the compiler cannot be started or exits non-zero.

    The working directory is preserved so the log can be read.

    Attributes:
        returncode: Process exit status (None if the process never started)
        original_error: The OSError raised while starting the process, if any
    """

    def __init__(
        self,
        working_dir: Path,
        log_path: Path,
        returncode: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.returncode = returncode
        self.original_error = original_error
        super().__init__(
            f"LaTeX error. Check {log_path}", working_dir=working_dir, log_path=log_path
        )


class ArtifactReadError(RenderError):
    """
    Exception raised when the compiled PDF is missing or unreadable after all passes.

    Attributes:
        artifact_path: Expected location of the PDF
        original_error: The underlying OSError
    """

    def __init__(
        self,
        artifact_path: Path,
        working_dir: Path,
        log_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.artifact_path = artifact_path
        self.original_error = original_error
        super().__init__(
            f"Could not read compiled PDF: {artifact_path}",
            working_dir=working_dir,
            log_path=log_path,
        )
