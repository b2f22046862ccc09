"""
Utility modules
"""

from .logger import setup_logger, ColorfulFormatter

__all__ = [
    'setup_logger',
    'ColorfulFormatter',
]
