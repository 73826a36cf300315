"""Schack — click-to-move chess client."""

__version__ = "0.1.0"
