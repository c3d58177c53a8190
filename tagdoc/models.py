"""Core data models shared across tagdoc components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceUnit:
    """A Java annotation source file loaded for transcoding."""

    filename: str
    raw_text: str
    class_name: str


@dataclass(frozen=True)
class SplitResult:
    """Header and body regions of an annotation declaration."""

    header: str
    body: str


@dataclass
class OutputUnit:
    """Rendered Scala source destined for the docsrc tree."""

    filename: str
    path: Path
    text: str
    special_patch: Optional[str] = None

    @property
    def contents(self) -> str:
        """Return the text as written to disk, including any special patch."""
        if self.special_patch:
            return self.text + self.special_patch
        return self.text
