"""Block-shifted Vernam (XOR) cipher for files and byte strings, with a command line entry point."""

__version__ = "1.0.0"
__all__ = ["cipher", "cli"]