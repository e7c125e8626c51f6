from typing import Callable, Optional

from .bookmark import BookmarkFolder, DEFAULT_TITLE, MemoryBookmarkFolder, MutableBookmarkFolder, snapshot_folder
from .bookmarks_model import BookmarksModel
from .errors import FolderNotFoundError
from .model_factory import BookmarksModelFactory
from utils.utils import logger

ROOT_FOLDER_ID = "root"
MOBILE_FOLDER_ID = "mobile"
NULL_FOLDER_ID = "stub"


def default_stub_tree() -> MemoryBookmarkFolder:
    """A top folder holding one empty Mobile Bookmarks folder"""
    root = MutableBookmarkFolder(id=ROOT_FOLDER_ID, title="Root")
    root.add_child(MutableBookmarkFolder(id=MOBILE_FOLDER_ID, title="Mobile Bookmarks"))
    return root.freeze()


class StubBookmarksModelFactory(BookmarksModelFactory):
    """
    In-memory backend for tests and offline use.

    By default folder lookups are lenient: any ID resolves to an empty
    folder and any folder value is taken as already resolved. With
    strict=True both look the ID up in the backing tree and raise
    FolderNotFoundError when it is gone.
    """

    def __init__(self, root: Optional[BookmarkFolder] = None, strict: bool = False,
                 id_generator: Optional[Callable[[], str]] = None):
        self._store = snapshot_folder(root) if root is not None else default_stub_tree()
        self.strict = strict
        self.id_generator = id_generator

    def reset(self, root: BookmarkFolder) -> None:
        """Replace the backing tree, as if the store changed underneath us"""
        self._store = snapshot_folder(root)
        logger.debug(f"Store reset to root {root.id}", component="StubFactory")

    def _model(self, root: BookmarkFolder) -> BookmarksModel:
        return BookmarksModel(self, root, id_generator=self.id_generator)

    def _lookup(self, guid: str) -> MemoryBookmarkFolder:
        found = self._store.find(guid)
        if found is None:
            logger.warning(f"No folder {guid} in store", component="StubFactory")
            raise FolderNotFoundError(guid)
        return snapshot_folder(found)

    async def model_for_root(self) -> BookmarksModel:
        return self._model(self._store.snapshot())

    async def model_for_folder(self, guid: str) -> BookmarksModel:
        if self.strict:
            return self._model(self._lookup(guid))
        return self._model(MemoryBookmarkFolder(id=guid, title=DEFAULT_TITLE))

    async def model_for_existing_folder(self, folder: BookmarkFolder) -> BookmarksModel:
        if self.strict:
            return self._model(self._lookup(folder.id))
        return self._model(snapshot_folder(folder))

    @property
    def null_model(self) -> BookmarksModel:
        return self._model(MemoryBookmarkFolder(id=NULL_FOLDER_ID, title=""))
