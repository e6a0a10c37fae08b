"""Application state, emoji handling and layout logic for a terminal chat client."""

__version__ = "0.1.0"