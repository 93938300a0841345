"""Budget Splitter Assistant.

A chat assistant that keeps per-user weighted budget categories and splits
a requested amount across them in round hundreds.
"""

__version__ = "0.1.0"
