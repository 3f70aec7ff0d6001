"""Shared fixtures: a fake git on PATH."""

import os
import stat
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parent.parent / "src"

# Echoes its argv and stdin as JSON, then exits as instructed by env vars.
FAKE_GIT = """\
#!{python}
import json
import os
import signal
import sys
import time

data = sys.stdin.read() if os.environ.get("FAKE_GIT_READ_STDIN") else ""
print(json.dumps({{"argv": sys.argv[1:], "stdin": data}}))
sys.stdout.flush()
sys.stderr.write(os.environ.get("FAKE_GIT_STDERR", ""))
sys.stderr.flush()
if os.environ.get("FAKE_GIT_INTERRUPT_PARENT"):
    os.kill(os.getppid(), signal.SIGINT)
    time.sleep(0.5)
if os.environ.get("FAKE_GIT_SIGNAL"):
    os.kill(os.getpid(), signal.SIGTERM)
sys.exit(int(os.environ.get("FAKE_GIT_EXIT", "0")))
"""


def write_executable(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_bin(tmp_path):
    """Directory holding a fake `git` script."""
    bin_dir = tmp_path / "bin"
    write_executable(bin_dir, "git", FAKE_GIT.format(python=sys.executable))
    return bin_dir


@pytest.fixture
def empty_bin(tmp_path):
    bin_dir = tmp_path / "empty"
    bin_dir.mkdir()
    return bin_dir


def gut_env(bin_dir: Path, **extra: str) -> dict[str, str]:
    """Environment for running src/gut.py as a subprocess with only bin_dir on PATH."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("FAKE_GIT_")}
    env["PATH"] = str(bin_dir)
    env["PYTHONIOENCODING"] = "utf-8"
    env.update(extra)
    return env
