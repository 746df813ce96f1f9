"""
Desktop UI package - Qt (PySide6) bindings for selectable rows.
"""
