"""
texrender - render LaTeX documents to PDF

Feeds a document to pdflatex (or a compatible compiler) as many times as it
takes to resolve cross-references and hands back the PDF bytes.

Usage:
    from texrender import RenderConfig, render

    pdf = render(document, RenderConfig(command="/usr/bin/pdflatex", runs=1))
"""

from texrender.rendering import RenderConfig, RenderError, render

__version__ = "0.1.0"

__all__ = ["RenderConfig", "RenderError", "render"]
