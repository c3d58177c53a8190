"""Split an annotation source into its header and body regions."""

from __future__ import annotations

import re

from ..models import SplitResult
from .base import StructureError
from .comments import find_doc_comment


def _declaration_pattern(class_name: str) -> re.Pattern[str]:
    return re.compile(r"\s@interface\s+" + re.escape(class_name) + r"\b")


def split_source(class_name: str, text: str) -> SplitResult:
    """Split ``text`` into the header ending at ``class_name`` and the braced body.

    The header runs from the start of the file, through the first doc comment,
    up to and including the declared name. The body runs from the first ``{``
    after the declaration to the last ``}`` of the file; bodies are assumed to
    hold no nested braces.
    """
    span = find_doc_comment(text)
    if span is None:
        raise StructureError(class_name, "no documentation comment found")
    _, doc_end = span
    top, remainder = text[:doc_end], text[doc_end:]

    declaration = _declaration_pattern(class_name).search(remainder)
    if declaration is None:
        raise StructureError(
            class_name, f"no '@interface {class_name}' declaration after the doc comment"
        )

    open_brace = remainder.find("{", declaration.end())
    close_brace = remainder.rfind("}")
    if open_brace == -1 or close_brace < open_brace:
        raise StructureError(class_name, "declaration has no braced body")

    return SplitResult(
        header=top + remainder[: declaration.end()],
        body=remainder[open_brace : close_brace + 1],
    )
