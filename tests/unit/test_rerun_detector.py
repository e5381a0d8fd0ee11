"""Unit tests for rerun detection from the compiler log."""

import pytest

from texrender.rendering.rerun import LOG_NAME, RERUN_MARKER, needs_rerun


@pytest.mark.unit
def test_marker_line_requests_rerun(working_dir):
    """Test the standard LaTeX cross-reference warning triggers a rerun."""
    (working_dir / LOG_NAME).write_text(
        "This is pdfTeX, Version 3.141592653\n"
        "LaTeX Warning: Label(s) may have changed. Rerun to get cross-references right.\n"
        "Output written on gotex.pdf (1 page, 12345 bytes).\n"
    )

    assert needs_rerun(working_dir) is True


@pytest.mark.unit
def test_bare_marker_line(working_dir):
    """Test the exact warning line on its own."""
    (working_dir / LOG_NAME).write_text(
        "Label(s) may have changed. Rerun to get cross-references right."
    )

    assert needs_rerun(working_dir) is True


@pytest.mark.unit
def test_log_without_marker(working_dir):
    """Test a clean log does not request a rerun."""
    (working_dir / LOG_NAME).write_text(
        "This is pdfTeX, Version 3.141592653\n"
        "LaTeX Warning: Citation `knuth84' on page 1 undefined on input line 3.\n"
        "Output written on gotex.pdf (1 page, 12345 bytes).\n"
    )

    assert needs_rerun(working_dir) is False


@pytest.mark.unit
def test_empty_log(working_dir):
    """Test an empty log does not request a rerun."""
    (working_dir / LOG_NAME).write_text("")

    assert needs_rerun(working_dir) is False


@pytest.mark.unit
def test_missing_log(working_dir):
    """Test a missing log is treated as no rerun instead of raising."""
    assert not (working_dir / LOG_NAME).exists()

    assert needs_rerun(working_dir) is False


@pytest.mark.unit
def test_missing_directory(tmp_path):
    """Test a nonexistent working directory is treated as no rerun."""
    assert needs_rerun(tmp_path / "does-not-exist") is False


@pytest.mark.unit
def test_unreadable_log_path(working_dir):
    """Test a directory sitting where the log should be is treated as no rerun."""
    (working_dir / LOG_NAME).mkdir()

    assert needs_rerun(working_dir) is False


@pytest.mark.unit
def test_non_utf8_log(working_dir):
    """Test logs with latin-1 bytes (font metadata) are scanned without errors."""
    (working_dir / LOG_NAME).write_bytes(
        b"Font \xe9\xe8\xff metadata\n" + RERUN_MARKER.encode() + b" the bars right.\n"
    )

    assert needs_rerun(working_dir) is True


@pytest.mark.unit
def test_marker_split_across_lines_is_not_matched(working_dir):
    """Test the scan is line-bounded."""
    (working_dir / LOG_NAME).write_text("Label(s) may have changed. Rerun\nto get cross-references right.\n")

    assert needs_rerun(working_dir) is False


@pytest.mark.unit
def test_accepts_string_path(working_dir):
    """Test a str working directory works as well as a Path."""
    (working_dir / LOG_NAME).write_text("Package rerunfilecheck Warning: Rerun to get outlines right\n")

    assert needs_rerun(str(working_dir)) is True
