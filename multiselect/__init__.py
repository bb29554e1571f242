"""
MultiSelect Spinner

A single-line drop-down control for picking several options at once.
"""

__version__ = "1.0.0"
