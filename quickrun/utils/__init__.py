"""Utility modules for quickrun."""
