"""Textual user interface for quickrun."""
