"""pkg-config invocation.

Runs the fixed query synchronously and captures its stdout and exit
status. A non-zero status is the only failure mode; it is raised as
``QueryFailure`` and never retried.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from clangdconf.config import FlagQueryConfig

logger = logging.getLogger("clangdconf.query")

# Shell convention for "command not found".
LAUNCH_FAILURE_STATUS = 127

# Undecodable bytes round-trip through surrogates so output is never altered.
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"


@dataclass
class QueryResult:
    """Captured output of one query run."""

    stdout: str
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class QueryFailure(RuntimeError):
    """Raised when the query tool exits with a non-zero status."""

    def __init__(self, reason: str, result: QueryResult) -> None:
        super().__init__(reason)
        self.reason = reason
        self.result = result


def run_query(config: FlagQueryConfig) -> QueryResult:
    """Run the query command and capture stdout and exit status.

    Args:
        config: Query settings providing the command line.

    Returns:
        QueryResult: Captured stdout, stderr and exit status. Stdout is
        decoded without newline translation. A tool that cannot be launched
        at all is reported with status 127.
    """
    cmd = config.command()
    logger.debug("Running flag query: %s", " ".join(cmd))
    try:
        res = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as e:
        logger.debug("Could not launch %s: %s", config.tool, e)
        return QueryResult(stdout="", returncode=LAUNCH_FAILURE_STATUS, stderr=str(e))

    return QueryResult(
        stdout=res.stdout.decode(OUTPUT_ENCODING, errors=OUTPUT_ERRORS),
        returncode=res.returncode,
        stderr=res.stderr.decode(OUTPUT_ENCODING, errors="replace"),
    )


def retrieve_flags(config: FlagQueryConfig) -> str:
    """Return the raw flag string reported by the query tool.

    Args:
        config: Query settings.

    Returns:
        str: Captured stdout, unmodified.

    Raises:
        QueryFailure: If the tool exits with a non-zero status.
    """
    result = run_query(config)
    if not result.ok:
        logger.warning(
            "%s exited with status %d: %s",
            config.tool,
            result.returncode,
            result.stderr.strip() or "<no stderr>",
        )
        raise QueryFailure(
            f"{config.tool} exited with status {result.returncode}", result=result
        )

    logger.debug("Flag query returned %r", result.stdout)
    return result.stdout
