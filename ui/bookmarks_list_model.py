from typing import Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Signal

from bookmarks.bookmark import BookmarkFolder, BookmarkItem
from bookmarks.bookmarks_model import BookmarksModel
from utils.utils import logger

NO_BOOKMARK_TEXT = "No bookmark"

class BookmarksListModel(QAbstractListModel):
    """Qt list model showing the children of the current bookmarks snapshot"""
    IdRole = Qt.UserRole + 1
    UrlRole = Qt.UserRole + 2
    IconKeyRole = Qt.UserRole + 3
    IsFolderRole = Qt.UserRole + 4

    model_changed = Signal()
    load_failed = Signal(str)  # error message

    def __init__(self, bookmarks_model: BookmarksModel, parent=None):
        super().__init__(parent)
        self._bookmarks = bookmarks_model

    @property
    def bookmarks_model(self) -> BookmarksModel:
        return self._bookmarks

    def set_model(self, bookmarks_model: BookmarksModel):
        """Swap in a new snapshot"""
        self.beginResetModel()
        self._bookmarks = bookmarks_model
        self.endResetModel()
        logger.debug(f"Showing folder {bookmarks_model.root.id}", component="BookmarksListModel")
        self.model_changed.emit()

    def rowCount(self, parent=QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return self._bookmarks.root.count

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        node = self._bookmarks.root.get(index.row())
        if node is None:
            # Rows are indexed optimistically; the snapshot may be shorter.
            return NO_BOOKMARK_TEXT if role == Qt.DisplayRole else None

        if role == Qt.DisplayRole:
            return node.title
        if role == self.IdRole:
            return node.id
        if role == self.UrlRole:
            return node.url if isinstance(node, BookmarkItem) else None
        if role == self.IconKeyRole:
            return node.display_hint.key
        if role == self.IsFolderRole:
            return isinstance(node, BookmarkFolder)
        return None

    def roleNames(self):
        roles = super().roleNames()
        roles[self.IdRole] = b"id"
        roles[self.UrlRole] = b"url"
        roles[self.IconKeyRole] = b"iconKey"
        roles[self.IsFolderRole] = b"isFolder"
        return roles

    def _on_failure(self, error: BaseException):
        self.load_failed.emit(str(error))

    def open_row(self, row: int):
        """Navigate into the folder at row. Returns the pending task, or None for items."""
        node = self._bookmarks.root.get(row)
        if not isinstance(node, BookmarkFolder):
            return None
        return self._bookmarks.select_folder(node.id, self.set_model, self._on_failure)

    def go_home(self):
        return self._bookmarks.select_root(self.set_model, self._on_failure)

    def refresh(self):
        return self._bookmarks.reload_data(self.set_model, self._on_failure)
