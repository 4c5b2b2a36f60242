"""Searching, comparing and bounded copying of NUL-terminated style strings.

A ``"\\0"`` character inside a string ends it, as a terminator would.
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class Bounded(NamedTuple):
    """Result of a size-bounded copy: the text produced and the length wanted."""

    text: str
    needed: int


def _terminated(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def string_length(text: str) -> int:
    """Number of characters before the first ``"\\0"`` or the end."""
    return len(_terminated(text))


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Looking for ``"\\0"`` gives the index of the end of the string.
    """
    char = _single(char)
    body = _terminated(text)
    if char == "\0":
        return len(body)
    index = body.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Looking for ``"\\0"`` gives the index of the end of the string.
    """
    char = _single(char)
    body = _terminated(text)
    if char == "\0":
        return len(body)
    index = body.rfind(char)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; otherwise a zero ``length`` or an empty
    haystack finds nothing.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    body = _terminated(haystack)
    target = _terminated(needle)
    if not target:
        return 0
    if length == 0 or not body:
        return None
    index = body[:length].find(target)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns 0 when they agree, else the code difference at the first
    character where they part; the end of a string counts as code 0.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    left = _terminated(first)
    right = _terminated(second)
    for index in range(count):
        a = ord(left[index]) if index < len(left) else 0
        b = ord(right[index]) if index < len(right) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def copy_bounded(source: str, size: int) -> Bounded:
    """Copy ``source`` into room for ``size`` characters, terminator included.

    ``needed`` is always the full length of ``source``; the copy was cut
    short when it is not smaller than ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    body = _terminated(source)
    if size == 0:
        return Bounded("", len(body))
    return Bounded(body[: size - 1], len(body))


def concat_bounded(destination: str, source: str, size: int) -> Bounded:
    """Append ``source`` to ``destination`` within a total room of ``size``.

    When ``size`` leaves no room past ``destination`` it is returned as is
    and ``needed`` is the length of ``source`` plus ``size``; otherwise
    ``needed`` is the combined length of both strings.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(destination)
    tail = _terminated(source)
    if size == 0 or size <= len(head):
        return Bounded(head, len(tail) + size)
    room = size - len(head) - 1
    return Bounded(head + tail[:room], len(head) + len(tail))