"""Curses interface for listing, adding and removing CUPS printers."""

__version__ = "0.1.0"
__all__ = ["__version__"]