"""Shared fixtures: a stand-in compiler that honours the pdflatex invocation contract."""

import stat
import sys
from pathlib import Path

import pytest

# Behaviour is driven by the document text:
#   \fail    -> writes a log with an error and exits 1
#   \nopdf   -> exits 0 without writing a PDF
#   \ref     -> asks for a rerun on the first pass only
#   \always  -> asks for a rerun on every pass
# Every call appends its argv to argv.txt and bumps passes.txt in the cwd.
FAKE_COMPILER_SOURCE = r'''
import sys
from pathlib import Path

document = sys.stdin.read()
cwd = Path.cwd()
with open(cwd / "argv.txt", "a") as f:
    f.write(" ".join(sys.argv[1:]) + "\n")
(cwd / "stdin.txt").write_text(document)

passes_file = cwd / "passes.txt"
passes = int(passes_file.read_text()) + 1 if passes_file.exists() else 1
passes_file.write_text(str(passes))

log = cwd / "gotex.log"
if "\\fail" in document:
    log.write_text("! Undefined control sequence.\nl.1 \\fail\n")
    print("! Emergency stop.")
    sys.exit(1)

lines = ["This is FakeTeX, Version 0.1", f"Pass {passes}"]
if "\\always" in document or ("\\ref" in document and passes < 2):
    lines.append("LaTeX Warning: Label(s) may have changed. Rerun to get cross-references right.")
log.write_text("\n".join(lines) + "\n")

if "\\nopdf" not in document:
    (cwd / "gotex.pdf").write_bytes(b"%PDF-1.4\n" + b"0" * 2048 + b"\n%%EOF\n")
'''


@pytest.fixture
def fake_compiler(tmp_path) -> Path:
    """Path to an executable fake compiler script."""
    script = tmp_path / "bin" / "fakelatex"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n{FAKE_COMPILER_SOURCE}")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def temp_root(tmp_path, monkeypatch) -> Path:
    """Redirect render working directories into an isolated, inspectable directory."""
    from texrender.rendering import compiler

    root = tmp_path / "work"
    root.mkdir()
    monkeypatch.setattr(compiler, "TEMP_ROOT", str(root))
    return root


@pytest.fixture
def working_dir(tmp_path) -> Path:
    """An empty directory standing in for a render's working directory."""
    path = tmp_path / "gotex-test"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore loguru's default handler after tests that reconfigure logging."""
    from loguru import logger

    yield
    logger.remove()
    logger.add(sys.stderr)
