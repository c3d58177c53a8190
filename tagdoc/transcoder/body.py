"""Rewrite the value() accessor of an annotation body as a Scala def."""

from __future__ import annotations

import re
from typing import Dict

from .base import UnexpectedValueTypeError

_VALUE_ACCESSOR = re.compile(r"^(\s*)(.*?) *value\(\);", re.MULTILINE)

VALUE_TYPES: Dict[str, str] = {
    "Class<? extends Suite>": "Class[_ <: Suite]",
    "String": "String",
    "String[]": "Array[String]",
}


def map_value_type(value_type: str) -> str:
    """Return the Scala type for a Java ``value()`` return type."""
    try:
        return VALUE_TYPES[value_type]
    except KeyError:
        raise UnexpectedValueTypeError(value_type) from None


def rewrite_body(body: str) -> str:
    """Return ``body`` with its value() accessor rewritten, or ``""`` when it has none."""
    match = _VALUE_ACCESSOR.search(body)
    if match is None:
        return ""
    indent, value_type = match.group(1), match.group(2)
    declaration = f"{indent}def value(): {map_value_type(value_type)}"
    return body[: match.start()] + declaration + body[match.end() :]
