"""Witty greetings printed when someone types 'gut' instead of 'git'."""

import random
import sys
import time
from typing import TextIO

QUOTES: tuple[str, ...] = (
    "🤔 I see you typed 'gut' instead of 'git'. Don't worry, happens to the best of us!",
    "😄 'gut' feeling tells me you meant 'git'! Let me fix that for you...",
    "🎯 Close! You typed 'gut' but I think you meant 'git'. Forwarding your command...",
    "😅 Trust your gut... I mean git! Redirecting your 'gut' command to 'git'.",
    "🔧 Gut instinct: you probably meant 'git'. Running the correct command now!",
    "💡 'gut' reaction: this should be 'git'! No worries, I've got you covered.",
    "🚀 From 'gut' to 'git' in 0.1 seconds! Here we go...",
    "😊 Typo detected! Transforming 'gut' into 'git' like magic.",
    "🎪 Welcome to the 'gut' to 'git' translation service! Your command is being processed.",
    "🤓 Fun fact: 'gut' backwards is 'tug', but you probably want 'git'!",
)


def new_rng() -> random.Random:
    """Return a fresh generator seeded from the clock."""
    return random.Random(time.time_ns())


def pick(rng: random.Random) -> str:
    return QUOTES[rng.randrange(len(QUOTES))]


def greet(rng: random.Random, file: TextIO | None = None) -> None:
    """Print one quote and a blank line. Best-effort: output errors are dropped."""
    out = file if file is not None else sys.stdout
    try:
        print(pick(rng), file=out)
        print(file=out, flush=True)
    except (OSError, ValueError):
        pass
