"""Turn pkg-config output into a clangd CompileFlags block."""

from __future__ import annotations

_REPLACEMENTS = {
    " ": ", ",
    "\n": " ",
}


def format_flags(text: str) -> str:
    """Rewrite a space-delimited flag string as a flow-list body.

    Each space becomes ``", "`` and each newline becomes a single space;
    every other character is copied through. The result is meant to sit
    between ``[`` and ``]``. Apply it once: a second pass would rewrite the
    spaces the first pass introduced.

    Args:
        text: Raw stdout of the flag query.

    Returns:
        str: Formatted flag list.
    """
    return "".join(_REPLACEMENTS.get(c, c) for c in text)


def render_config(flags: str, compiler: str = "clang") -> str:
    """Render the three-line clangd configuration block.

    Args:
        flags: Output of :func:`format_flags`.
        compiler: Compiler identifier for the ``Compiler:`` key.

    Returns:
        str: The block, newline-terminated.
    """
    lines = [
        "CompileFlags:",
        f"  Add: [{flags}]",
        f"  Compiler: {compiler}",
    ]
    return "\n".join(lines) + "\n"
