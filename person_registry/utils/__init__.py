"""
Utility modules for Person Registry
"""

from .logger import setup_logger, get_logger
from .text import capitalize_words

__all__ = [
    "setup_logger",
    "get_logger",
    "capitalize_words",
]
