"""Sort small lists of integers on two stacks and print the named operations used."""

__version__ = "0.1.0"

__all__ = ["__version__"]