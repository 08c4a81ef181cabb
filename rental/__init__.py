"""Vehicle rental management package."""

__version__ = "0.1.0"
