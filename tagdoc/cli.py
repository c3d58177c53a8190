"""CLI entrypoint for tagdoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator
from .transcoder import TranscodeError

STATUS_LINE = "tagdoc: porting java tag files to scala"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagdoc",
        description="Port Java tag annotation sources to Scala files for scaladoc.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root holding the sources and .tagdoc.yml (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render every file and list the outputs without writing them.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tagdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    print(STATUS_LINE)

    try:
        config = load_config(Path(args.path))
        outputs = Orchestrator(config).run(dry_run=bool(args.dry_run))
    except ConfigError as exc:
        parser.exit(1, f"tagdoc failed: {exc}\n")
    except TranscodeError as exc:
        parser.exit(1, f"tagdoc failed: {exc}\nRun with --verbose for more details.\n")
    except OSError as exc:
        parser.exit(1, f"tagdoc failed: {exc}\n")

    if args.dry_run:
        print("Scala files (dry-run):")
        for output in outputs:
            print(f"  {_relativize(output.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
