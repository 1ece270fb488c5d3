"""Main CLI entry point for clangdconf.

Prints a clangd ``CompileFlags`` block built from
``pkg-config --cflags chafa ncursesw``.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from clangdconf.cli.generate import generate_command

logger = logging.getLogger("clangdconf.cli")


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Stdout is reserved for the configuration block, so the Rich console
    writes to stderr.

    Args:
        verbose: Enable verbose logging.
        log_file: Also write log records to this file (optional).
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers: List[logging.Handler] = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clangdconf",
        description=(
            "Clangdconf - print a clangd CompileFlags block for the chafa "
            "and ncursesw libraries, as reported by pkg-config"
        ),
        epilog=(
            "exit status:\n"
            "  0  configuration written\n"
            "  1  pkg-config failed (\"Pkg fail\" on stdout), or the --output\n"
            "     file could not be written (error logged on stderr, stdout empty)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the configuration to this file (e.g. .clangd) instead of stdout",
    )
    parser.add_argument(
        "--log-file",
        help="Output log to file (optional), in addition to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when omitted.

    Returns:
        int: Exit code.
    """
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    logger.debug("Arguments: %s", vars(args))

    return generate_command(args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
