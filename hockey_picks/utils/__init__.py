"""Utility modules for constants, categories, helpers, and console logging."""

from .constants import *
from .helpers import *
from .categories import Category, CategoryProfile, describe
from .log import info, warn, set_verbosity, set_use_emoji

__all__ = [
    'Category',
    'CategoryProfile',
    'describe',
    'info',
    'warn',
    'set_verbosity',
    'set_use_emoji',
]
