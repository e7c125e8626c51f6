"""
REST backend for the bookmarks model.
"""

from .account import Account
from .rest_factory import BookmarksRESTModelFactory, parse_items

__all__ = [
    'Account',
    'BookmarksRESTModelFactory',
    'parse_items',
]
