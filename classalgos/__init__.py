"""Classic algorithms: sorting, complex arithmetic, tour search and string search."""

__version__ = "0.1.0"
__all__ = ["complexnum", "route", "sortable", "textsearch"]