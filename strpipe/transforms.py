"""String transforms applied by pipeline stages, looked up by stage name."""

from __future__ import annotations

import string
import sys
import time
from collections.abc import Callable

Transform = Callable[[str], str]

TYPEWRITER_DELAY = 0.1
"""Seconds the typewriter waits after printing each character."""

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def log(text: str) -> str:
    """Print ``text`` with a ``[logger]`` prefix and pass it on unchanged."""
    print(f"[logger] {text}", flush=True)
    return text


def typewrite(text: str) -> str:
    """Print ``text`` one character at a time, then pass it on unchanged."""
    out = sys.stdout
    out.write("[typewriter] ")
    for char in text:
        out.write(char)
        out.flush()
        time.sleep(TYPEWRITER_DELAY)
    out.write("\n")
    out.flush()
    return text


def uppercase(text: str) -> str:
    """Convert ASCII letters to upper case; other characters are kept."""
    return text.translate(_ASCII_UPPER)


def rotate(text: str) -> str:
    """Move every character one place right; the last one wraps to the front."""
    return text[-1:] + text[:-1]


def flip(text: str) -> str:
    """Reverse the order of the characters."""
    return text[::-1]


def expand(text: str) -> str:
    """Put a single space between neighbouring characters."""
    return " ".join(text)


_TRANSFORMS: dict[str, Transform] = {
    "logger": log,
    "typewriter": typewrite,
    "uppercaser": uppercase,
    "rotator": rotate,
    "flipper": flip,
    "expander": expand,
}


def get_transform(name: str) -> Transform:
    """Return the transform registered under the stage ``name``."""
    try:
        return _TRANSFORMS[name]
    except KeyError:
        raise ValueError(f"Unknown plugin: {name}") from None