"""
User interface adapters for bookmarks models.
"""

from .bookmarks_list_model import BookmarksListModel

__all__ = [
    'BookmarksListModel',
]
