"""
Core selection logic - no UI framework dependencies.
"""
from .data_models import (
    IndicatorAlignment,
    IndicatorStyle,
    RowState,
    SelectionIndicator,
    SelectionMode,
)
from .selection_store import SelectionStore

__all__ = [
    'IndicatorAlignment',
    'IndicatorStyle',
    'RowState',
    'SelectionIndicator',
    'SelectionMode',
    'SelectionStore'
]
