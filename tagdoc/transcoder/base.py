"""Errors raised by the transcoding pipeline."""

from __future__ import annotations


class TranscodeError(RuntimeError):
    """Base class for failures while rewriting a Java tag source."""


class StructureError(TranscodeError):
    """Raised when a source file does not have the expected declaration shape."""

    def __init__(self, class_name: str, detail: str) -> None:
        super().__init__(f"{class_name}: {detail}")
        self.class_name = class_name
        self.detail = detail


class UnexpectedValueTypeError(TranscodeError):
    """Raised when a value() accessor returns a type with no Scala mapping."""

    def __init__(self, value_type: str) -> None:
        super().__init__(f"unexpected value type [{value_type}]")
        self.value_type = value_type
