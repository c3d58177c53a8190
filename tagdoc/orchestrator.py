"""Pipeline orchestration for porting Java tag annotations to Scala doc sources."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import TagDocConfig
from .logging import get_logger
from .models import OutputUnit, SourceUnit
from .transcoder import StructureError, rewrite_body, rewrite_header, split_source

TRAIT_TEMPLATE = "trait {name} extends java.lang.annotation.Annotation {body}\n"


def assemble(class_name: str, header: str, body: str) -> str:
    """Replace the trailing declared name of ``header`` with the Scala trait declaration."""
    if not header.endswith(class_name):
        raise StructureError(class_name, "rewritten header does not end with the declared name")
    declaration = TRAIT_TEMPLATE.format(name=class_name, body=body)
    return header[: -len(class_name)] + declaration


class Orchestrator:
    """Coordinates loading, rewriting and writing of every configured tag file."""

    def __init__(self, config: TagDocConfig) -> None:
        self.config = config
        self.logger = get_logger("orchestrator")

    def load(self, filename: str) -> SourceUnit:
        path = self.config.source_path(filename)
        self.logger.debug("Reading %s", path)
        return SourceUnit(
            filename=filename,
            raw_text=path.read_text(encoding="utf-8"),
            class_name=self.config.class_name(filename),
        )

    def transcode(self, unit: SourceUnit) -> OutputUnit:
        """Rewrite a loaded source unit into its Scala output unit."""
        split = split_source(unit.class_name, unit.raw_text)
        text = assemble(unit.class_name, rewrite_header(split.header), rewrite_body(split.body))
        special_patch = self.config.patches.get(unit.filename)
        if special_patch:
            self.logger.debug("Applying special patch to %s", unit.filename)
        return OutputUnit(
            filename=unit.filename,
            path=self.config.output_path(unit.filename),
            text=text,
            special_patch=special_patch,
        )

    def render(self, filename: str) -> OutputUnit:
        """Return the rendered output for ``filename`` without writing it."""
        return self.transcode(self.load(filename))

    def run(self, *, dry_run: bool = False) -> List[OutputUnit]:
        """Render every configured file, then write them all.

        Nothing is written unless every file renders, so a failure leaves the
        docsrc tree untouched.
        """
        filenames = sorted(self.config.filenames)
        self.logger.info(
            "Porting %d tag files from %s to %s",
            len(filenames),
            self.config.src_dir,
            self.config.docsrc_dir,
        )
        outputs = [self.render(filename) for filename in filenames]

        if dry_run:
            self.logger.info("Dry-run completed; %d files not written", len(outputs))
            return outputs

        for output in outputs:
            self._write(output)
        self.logger.info("Wrote %d Scala files under %s", len(outputs), self.config.docsrc_dir)
        return outputs

    def _write(self, output: OutputUnit) -> Path:
        output.path.parent.mkdir(parents=True, exist_ok=True)
        output.path.write_text(output.contents, encoding="utf-8")
        self.logger.debug("Wrote %s", output.path)
        return output.path
