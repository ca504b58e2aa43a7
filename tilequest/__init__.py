"""Tile-based collect-and-escape puzzle game with an XPM image loader."""

__version__ = "0.1.0"
__all__ = ["__version__"]