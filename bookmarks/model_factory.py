from .bookmark import BookmarkFolder
from .bookmarks_model import BookmarksModel


class BookmarksModelFactory:
    """
    Interface implemented by every bookmarks backend.

    Each coroutine produces a brand new BookmarksModel that refers back to
    this factory. Backends that lack a capability raise NotSupportedError
    rather than substituting a different folder.
    """

    async def model_for_root(self) -> BookmarksModel:
        """Model rooted at the top-level folder. Must not fail in normal operation."""
        raise NotImplementedError

    async def model_for_folder(self, guid: str) -> BookmarksModel:
        """Model rooted at the folder with this ID."""
        raise NotImplementedError

    async def model_for_existing_folder(self, folder: BookmarkFolder) -> BookmarksModel:
        """Model rooted at a fresh resolution of a folder we already hold."""
        raise NotImplementedError

    @property
    def null_model(self) -> BookmarksModel:
        """
        Placeholder returned synchronously, without I/O, so a view has
        something to render while the real root loads.
        """
        raise NotImplementedError
