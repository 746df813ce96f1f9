"""
UI logic package - portable across platforms.

Row list handling, indicator color resolution and delete/move edits on top
of the selection store. No UI framework dependencies.
"""
from .selectable_rows import SelectableRows

__all__ = [
    'SelectableRows'
]
