from __future__ import annotations

from typing import Optional, Tuple

from .constants import DECORATION_START, DECORATION_STOP, ESCAPE_CHAR
from .errors import MalformedDecoration


def decorate(text: Optional[str]) -> str:
    return DECORATION_START + (text or "") + DECORATION_STOP


def find_decoration(text: Optional[str]) -> Optional[Tuple[int, int]]:
    """Locate the decorated region in ``text``.

    Returns ``(begin, end)`` so that ``text[begin:end]`` is the inner region,
    or None when there is none.

    Rules:
    - A backslash escapes the following character, so ``\\{`` and ``\\}``
      are literal and never delimit
    - The region opens at the first unescaped ``{``
    - The region closes at the next unescaped ``}``; an unescaped ``{`` inside
      it is ordinary content
    - Anything before the opening and after the closing brace is ignored
    """
    if not text:
        return None
    n = len(text)
    i = 0
    begin = -1
    while i < n:
        c = text[i]
        if c == ESCAPE_CHAR:
            i += 2
            continue
        if c == DECORATION_START:
            begin = i + 1
            break
        i += 1
    if begin < 0:
        return None

    i = begin
    while i < n:
        c = text[i]
        if c == ESCAPE_CHAR:
            i += 2
            continue
        if c == DECORATION_STOP:
            return begin, i
        i += 1
    return None


def is_decorated(text: Optional[str]) -> bool:
    return find_decoration(text) is not None


def undecorate(text: Optional[str]) -> str:
    span = find_decoration(text)
    if span is None:
        raise MalformedDecoration("Text does not contain a {...} decorated region")
    begin, end = span
    return text[begin:end]
