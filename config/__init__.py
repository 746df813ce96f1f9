"""
Configuration package.

Environment-driven defaults for selection mode, indicator style and logging.
"""
from .base import BaseConfiguration, ConfigurationError

__all__ = [
    'BaseConfiguration',
    'ConfigurationError'
]
