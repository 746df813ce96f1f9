from .selectable_rows_model import SelectableRowsModel

__all__ = [
    'SelectableRowsModel'
]
