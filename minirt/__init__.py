"""Colours, number parsing, line reading and text, byte, list and output helpers."""

__version__ = "0.1.0"