"""Command implementations for the clangdconf CLI."""
