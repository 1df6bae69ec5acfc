"""Map loading and validation for a tile-based puzzle game, with small text, buffer and list helpers."""

__version__ = "1.0.0"