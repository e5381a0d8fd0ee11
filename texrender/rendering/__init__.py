"""
Rendering Context

Responsibilities:
- Compiles LaTeX to PDF through an external compiler
- Decides how many compiler passes a document needs
- Owns the per-render working directory
- Leaves diagnostic state behind when compilation fails

Owns: compiler invocation, pass control, PDF retrieval
Never: Parses or modifies document content
"""

from texrender.rendering.compiler import RenderConfig, render, run_once
from texrender.rendering.exceptions import (
    ArtifactReadError,
    CompilerInvocationError,
    RenderError,
    WorkingAreaCreationError,
)
from texrender.rendering.rerun import needs_rerun

__all__ = [
    "ArtifactReadError",
    "CompilerInvocationError",
    "RenderConfig",
    "RenderError",
    "WorkingAreaCreationError",
    "needs_rerun",
    "render",
    "run_once",
]
