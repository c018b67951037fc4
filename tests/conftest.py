import os
import sys
from pathlib import Path
import pytest

# Ensure we can import modules from src/ at collection time
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def sandbox(tmp_path, monkeypatch):
    # Work in an isolated temp directory; cd changes the process-wide cwd
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PATH", os.environ.get("PATH", "/usr/bin:/bin"))
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.delenv("NO_COLOR", raising=False)
    return tmp_path


@pytest.fixture()
def files(sandbox):
    """A small directory tree inside the sandbox."""
    (sandbox / "docs").mkdir()
    (sandbox / ".cache").mkdir()
    (sandbox / "notes.txt").write_text("alpha\nbeta\ngamma\n")
    (sandbox / ".hidden").write_text("secret\n")
    script = sandbox / "run.sh"
    script.write_text("#!/bin/sh\necho ran\n")
    script.chmod(0o755)
    return sandbox
