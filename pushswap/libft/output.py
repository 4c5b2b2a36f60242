"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; write nothing for None."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` and a newline; write nothing for None."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``number``."""
    _target(stream).write(str(number))