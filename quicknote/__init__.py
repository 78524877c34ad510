"""Quicknote: capture a timestamped note in your editor, then publish it."""

__version__ = "0.1.0"
