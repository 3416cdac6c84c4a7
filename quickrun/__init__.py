"""
quickrun - filterable command launcher overlay for the terminal
"""

__version__ = "0.3.0"
