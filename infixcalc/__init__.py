"""A four-function infix calculator with a simple desktop window."""

__version__ = "0.1.0"
__all__ = ["__version__"]