"""Generate command: query pkg-config and print the clangd block.

Control flow is strictly linear. The query runs first; if it fails the
fixed failure message goes to stdout and the command returns 1 without
formatting anything. Otherwise the flags are formatted once and the
three-line block is written to stdout (or to ``--output``).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from clangdconf.config import FlagQueryConfig
from clangdconf.formatter import format_flags, render_config
from clangdconf.query import (
    OUTPUT_ENCODING,
    OUTPUT_ERRORS,
    QueryFailure,
    retrieve_flags,
)

logger = logging.getLogger("clangdconf.cli.generate")


def generate_command(args, config: Optional[FlagQueryConfig] = None) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments.
        config: Query settings; the fixed defaults when omitted.

    Returns:
        int: Exit code (0 for success, 1 when the query fails or the
        output file cannot be written).
    """
    config = config or FlagQueryConfig.default()
    output = getattr(args, "output", None)

    try:
        raw = retrieve_flags(config)
    except QueryFailure as e:
        logger.debug("Flag query failed: %s", e)
        print(config.failure_message)
        return 1

    block = render_config(format_flags(raw), compiler=config.compiler)
    data = block.encode(OUTPUT_ENCODING, errors=OUTPUT_ERRORS)

    if output:
        out_path = Path(output).expanduser()
        try:
            out_path.write_bytes(data)
        except OSError as e:
            logger.error("Failed to write %s: %s", out_path, e)
            return 1
        logger.info("Wrote clangd configuration to %s", out_path)
        return 0

    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return 0
