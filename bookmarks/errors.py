class BookmarksError(Exception):
    """Base class for failures reported by a bookmarks model factory"""


class FolderNotFoundError(BookmarksError):
    """The requested folder does not resolve in the backend's view of the store"""

    def __init__(self, guid: str):
        super().__init__(f"Folder not found: {guid}")
        self.guid = guid


class NotSupportedError(BookmarksError):
    """The backend does not offer this operation"""

    def __init__(self, operation: str, backend: str = ""):
        message = f"Not supported: {operation}"
        if backend:
            message = f"{message} ({backend})"
        super().__init__(message)
        self.operation = operation
        self.backend = backend
