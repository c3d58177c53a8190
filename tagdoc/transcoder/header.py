"""Rewrite the header region while keeping doc comments intact."""

from __future__ import annotations

import re
from typing import Tuple

from .comments import find_doc_comment

# Java-only constructs removed from every code span around the doc comments.
STRIP_RULES: Tuple[re.Pattern[str], ...] = (
    re.compile(r"@Retention\(.*?\)"),
    re.compile(r"@Target\(.*?\)"),
    re.compile(r"@TagAnnotation\b.*\)"),
    re.compile(r"@TagAnnotation\b"),
    re.compile(r"@Inherited\b"),
    re.compile(r"public *@interface"),
    re.compile(r"^import.*$", re.MULTILINE),
)


def strip_code(code: str) -> str:
    """Remove annotation plumbing and imports from a span of Java code."""
    for rule in STRIP_RULES:
        code = rule.sub("", code)
    return code


def rewrite_header(header: str) -> str:
    """Return ``header`` with code stripped and every doc comment preserved verbatim."""
    span = find_doc_comment(header)
    if span is None:
        return strip_code(header)
    begin, end = span
    return strip_code(header[:begin]) + header[begin:end] + rewrite_header(header[end:])
