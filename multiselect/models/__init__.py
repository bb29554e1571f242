"""
Models package for multi-select data structures
"""

from multiselect.models.selection_model import (
    SelectionModel,
    SelectionError,
    OutOfRangeError,
    IllegalStateError,
    UnsupportedOperationError,
)

__all__ = [
    'SelectionModel',
    'SelectionError',
    'OutOfRangeError',
    'IllegalStateError',
    'UnsupportedOperationError',
]
