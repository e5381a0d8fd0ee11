"""
Shared utilities for texrender.

- Logger setup with provenance tracking
"""

from texrender.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]
