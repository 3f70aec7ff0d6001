"""gut: for when your fingers type 'gut' but you meant 'git'.

Usage:
    gut [any git arguments...]

Prints a random greeting, then runs git with exactly the same arguments,
stdin/stdout/stderr attached, and exits with git's exit code. Nothing is
parsed; ``gut --help`` is ``git --help``.
"""

import random
import sys

import quotes
from forward import TARGET, ForwardError, forward, resolve_target

__version__ = "1.0.0"


def run(args: list[str], *, rng: random.Random | None = None) -> int:
    """Greet, then forward *args* to git. Returns the exit code."""
    quotes.greet(rng if rng is not None else quotes.new_rng())

    try:
        executable = resolve_target(TARGET)
        return forward(executable, list(args), name=TARGET)
    except ForwardError as e:
        # ResolutionFailure carries install guidance, ExecutionFailure the cause
        print(e, file=sys.stderr)
        return e.exit_code


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
