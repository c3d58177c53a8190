"""Text transforms that turn Java annotation declarations into Scala doc sources."""

from .base import StructureError, TranscodeError, UnexpectedValueTypeError
from .body import VALUE_TYPES, map_value_type, rewrite_body
from .comments import find_doc_comment
from .header import STRIP_RULES, rewrite_header, strip_code
from .splitter import split_source

__all__ = [
    "STRIP_RULES",
    "StructureError",
    "TranscodeError",
    "UnexpectedValueTypeError",
    "VALUE_TYPES",
    "find_doc_comment",
    "map_value_type",
    "rewrite_body",
    "rewrite_header",
    "split_source",
    "strip_code",
]
