"""Reference solutions to classic array, string and hashing exercises."""

__version__ = "0.1.0"
__all__ = ["easy", "medium"]