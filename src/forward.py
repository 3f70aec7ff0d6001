"""Locate the real tool on PATH and hand the command line over to it.

The child inherits stdin/stdout/stderr directly; nothing is captured or
rewritten. Its exit code is returned as-is. Only two outcomes are errors:

  ResolutionFailure  target not found on PATH (install guidance attached)
  ExecutionFailure   target found but could not be run, or died from a signal
"""

import os
import shutil
import signal
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

TARGET = "git"

INSTALL_HINTS: list[tuple[str, str]] = [
    ("Windows", "Download from https://git-scm.com/download/win"),
    (
        "macOS",
        "brew install git or download from https://git-scm.com/download/mac",
    ),
    ("Linux", "apt install git / yum install git / pacman -S git"),
]


class ForwardError(Exception):
    exit_code = 1


class ResolutionFailure(ForwardError):
    def __init__(self, target: str):
        self.target = target
        super().__init__(missing_message(target))


class ExecutionFailure(ForwardError):
    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Error executing {target}: {reason}")


def missing_message(name: str = TARGET) -> str:
    """Install guidance shown when *name* is not on PATH."""
    lines = [
        f"Error: {name} is not installed or not found in PATH.",
        f"Please install {name} first:",
    ]
    for platform_name, hint in INSTALL_HINTS:
        lines.append(f"  - {platform_name}: {hint}")
    return "\n".join(lines)


def _same_file(a: str, b: str | None) -> bool:
    if not b:
        return False
    return os.path.realpath(a) == os.path.realpath(b)


def resolve_target(
    name: str, *, path: str | None = None, exclude: str | None = None
) -> str:
    """Return the full path of *name* on PATH.

    Matches that resolve to *exclude* (default: the running script) are
    skipped, so a copy of this shim installed as ``git`` never calls itself.
    """
    if path is None:
        path = os.environ.get("PATH", os.defpath)
    if exclude is None:
        exclude = sys.argv[0]
    for entry in path.split(os.pathsep):
        if not entry:
            continue
        found = shutil.which(name, path=entry)
        if found is None or _same_file(found, exclude):
            continue
        return found
    raise ResolutionFailure(name)


def _describe_signal(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


@contextmanager
def _sigint_ignored() -> Iterator[None]:
    """Leave Ctrl-C to the child; the terminal delivers it to both processes."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(
            signal.SIGINT, previous if previous is not None else signal.SIG_DFL
        )


def forward(executable: str, args: list[str], *, name: str | None = None) -> int:
    """Run *executable* with *args* on the inherited streams; return its exit code."""
    if name is None:
        name = Path(executable).stem
    try:
        proc = subprocess.Popen([executable, *args])
    except OSError as e:
        raise ExecutionFailure(name, str(e)) from e
    with _sigint_ignored():
        returncode = proc.wait()
    if returncode < 0:
        raise ExecutionFailure(name, f"terminated by {_describe_signal(-returncode)}")
    return returncode
