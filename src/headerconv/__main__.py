"""
=============================================================================
HEADERCONV CLI ENTRY POINT
=============================================================================

    # Convert a live capture
    curl -sI https://example.com | python -m headerconv

    # Convert a saved capture
    python -m headerconv headers.txt

    # Show timing and per-line match details on stderr
    python -m headerconv --log-level DEBUG < headers.txt

Standard output only ever receives the single result line. Logs go to
standard error.

Exit status:
    0   Converted; the result was printed
    1   Conversion failed; nothing was printed
    2   Bad arguments or unreadable input file (argparse)

=============================================================================
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import LOG_LEVELS, ConverterConfig
from .converter import HeaderConverter
from .models import ConversionError


logger = logging.getLogger("headerconv")


def _setup_logging(config: ConverterConfig) -> None:
    """Configure stderr logging based on config."""
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("headerconv").setLevel(config.log_level_value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headerconv",
        description="Convert captured HTTP response headers into JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  curl -sI https://example.com | headerconv
  headerconv headers.txt
  headerconv --log-level INFO < headers.txt
        """
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File holding the captured headers (default: standard input)"
    )

    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Queue capacity between classifier and aggregator (default: CPU count)"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Logging level on stderr (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"headerconv {__version__}"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Environment first, then explicit flags on top
    try:
        config = ConverterConfig.from_env()
        if args.workers is not None:
            config.num_workers = args.workers
        if args.log_level is not None:
            config.log_level = args.log_level
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    _setup_logging(config)

    # Raw bytes, so invalid UTF-8 is replaced line by line instead of
    # failing the text decoder
    source = getattr(sys.stdin, "buffer", sys.stdin)
    if args.file is not None:
        try:
            source = open(args.file, encoding="utf-8", errors="replace")
        except OSError as e:
            parser.error(f"cannot open {args.file}: {e.strerror}")

    try:
        converter = HeaderConverter(config, raw_header=source)
        output = converter.output()
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return e.exit_code
    finally:
        if args.file is not None:
            source.close()

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
