"""String, character, byte-buffer, output and linked-list helpers with C-library semantics."""

__version__ = "0.1.0"

__all__ = ["build", "chars", "compare", "convert", "linkedlist", "memory", "output", "search"]