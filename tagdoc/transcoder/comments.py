"""Scanning for Java documentation comments."""

from __future__ import annotations

from typing import Optional, Tuple

DOC_OPEN = "/**"
DOC_CLOSE = "*/"


def find_doc_comment(text: str, start: int = 0) -> Optional[Tuple[int, int]]:
    """Return the ``(begin, end)`` span of the first doc comment at or after ``start``.

    The span runs from the opening ``/**`` through the first ``*/`` that
    follows it. Comments do not nest, so an inner ``/**`` is plain text.
    ``None`` is returned when no complete comment exists.
    """
    begin = text.find(DOC_OPEN, start)
    if begin == -1:
        return None
    close = text.find(DOC_CLOSE, begin + len(DOC_OPEN))
    if close == -1:
        return None
    return begin, close + len(DOC_CLOSE)
