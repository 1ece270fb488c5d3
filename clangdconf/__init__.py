"""clangdconf - emit a clangd CompileFlags block from pkg-config output."""

__version__ = "0.1.0"
