"""Character, number, byte-buffer, string, output, linked-list and line-reading helpers with C library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "output", "linked", "lines"]