"""Command-line tool to convert Psion Series 3 Word files to text or Markdown."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .errors import ProcessError
from .reader import WordReader
from .settings import ProcessSettings

logger = logging.getLogger("psionwrd")

WORD_FILE_SUFFIX = ".wrd"


def configure_logging(verbose: bool, stream=None) -> None:
    """Send the psionwrd log hierarchy to stderr with coloured level labels."""
    console = Console(file=stream or sys.stderr)
    handler = RichHandler(console=console, show_time=False, show_path=False, show_level=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False


def collect_files(paths: Iterable[str]) -> List[Path]:
    """Expand directory arguments into the Word files they contain."""
    files: List[Path] = []
    for raw in paths:
        path = Path(raw).expanduser()
        if path.is_dir():
            files.extend(
                sorted(
                    child for child in path.iterdir()
                    if child.is_file() and child.suffix.lower() == WORD_FILE_SUFFIX
                )
            )
        else:
            files.append(path)
    return files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psionwrd",
        description="Convert Psion Series 3 Word documents to plain text or Markdown",
    )
    parser.add_argument("paths", nargs="*", help="Word files, or directories containing them")
    parser.add_argument("-v", "--verbose", action="store_true", help="show progress information")
    parser.add_argument("-s", "--stop", action="store_true", help="stop at the first file that can't be processed")
    parser.add_argument("-o", "--outer", action="store_true", help="include header and footer text in the output")
    parser.add_argument("-m", "--markdown", action="store_true", help="output Markdown instead of plain text")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.paths:
        parser.print_help()
        return 0

    configure_logging(args.verbose)
    settings = ProcessSettings(
        show_diagnostics=args.verbose,
        include_outer_text=args.outer,
        produce_markdown=args.markdown,
    )
    for path in collect_files(args.paths):
        try:
            with WordReader(path) as reader:
                text = reader.read_text(settings)
        except ProcessError as exc:
            if args.stop:
                logger.error("File %s could not be processed: %s -- exiting", path, exc)
                return exc.exit_code
            logger.warning("File %s could not be processed: %s", path, exc)
            continue
        logger.info("File %s processed", path)
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
