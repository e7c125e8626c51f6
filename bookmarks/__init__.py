"""
Bookmark snapshot models and the backends that produce them.
"""

from .bookmark import (BookmarkNode, BookmarkItem, BookmarkFolder, MemoryBookmarkFolder,
                       MutableBookmarkFolder, IconHint, ShareItem)
from .bookmarks_model import BookmarksModel
from .errors import BookmarksError, FolderNotFoundError, NotSupportedError
from .model_factory import BookmarksModelFactory
from .stub_factory import StubBookmarksModelFactory
from .rest import Account, BookmarksRESTModelFactory
from .backends import create_model_factory

__all__ = [
    'Account',
    'BookmarkFolder',
    'BookmarkItem',
    'BookmarkNode',
    'BookmarksError',
    'BookmarksModel',
    'BookmarksModelFactory',
    'BookmarksRESTModelFactory',
    'FolderNotFoundError',
    'IconHint',
    'MemoryBookmarkFolder',
    'MutableBookmarkFolder',
    'NotSupportedError',
    'ShareItem',
    'StubBookmarksModelFactory',
    'create_model_factory',
]
