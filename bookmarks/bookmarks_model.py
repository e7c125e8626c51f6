import asyncio
import threading
from typing import Any, Awaitable, Callable, FrozenSet, List, Optional, Set, Tuple, TYPE_CHECKING

from .bookmark import BookmarkFolder, BookmarkItem, ShareItem
from utils.utils import generate_guid, logger

if TYPE_CHECKING:
    from .model_factory import BookmarksModelFactory

SuccessCallback = Callable[['BookmarksModel'], None]
FailureCallback = Callable[[BaseException], None]


class BookmarksModel:
    """
    A read-only snapshot of the bookmark tree rooted at one folder, plus
    the queue of shared items that have not reached the store yet.

    Navigation never changes a model. Each navigation call asks the factory
    for a new model and hands it to the success callback; the caller then
    drops the old one.
    """

    def __init__(self, model_factory: 'BookmarksModelFactory', root: BookmarkFolder,
                 id_generator: Optional[Callable[[], str]] = None):
        self._factory = model_factory
        self._root = root
        self._id_generator = id_generator or generate_guid
        self._queue: List[BookmarkItem] = []
        self._queued_urls: Set[str] = set()
        self._queue_lock = threading.Lock()

    @property
    def root(self) -> BookmarkFolder:
        return self._root

    @property
    def factory(self) -> 'BookmarksModelFactory':
        return self._factory

    @property
    def queue(self) -> Tuple[BookmarkItem, ...]:
        with self._queue_lock:
            return tuple(self._queue)

    @property
    def pending_urls(self) -> FrozenSet[str]:
        with self._queue_lock:
            return frozenset(self._queued_urls)

    def share_item(self, item: ShareItem) -> bool:
        """
        Queue a shared item as a new bookmark. Items whose url is already
        queued are ignored, so the first title shared for a url is kept.
        Returns True if the item was queued.
        """
        with self._queue_lock:
            # Don't create duplicates.
            if item.url in self._queued_urls:
                logger.debug(f"Already queued: {item.url}", component="BookmarksModel")
                return False
            self._queued_urls.add(item.url)
            self._queue.append(BookmarkItem(id=self._id_generator(), title=item.title, url=item.url))

        logger.info(f"Queued shared item {item.url}", component="BookmarksModel")
        return True

    def select_folder(self, guid: str, success: SuccessCallback, failure: FailureCallback) -> asyncio.Task:
        """Produce a model rooted at the folder with the given ID."""
        return self._dispatch(f"select_folder({guid})", self._factory.model_for_folder, (guid,),
                              success, failure)

    def select_root(self, success: SuccessCallback, failure: FailureCallback) -> asyncio.Task:
        """Produce a model rooted at the backend's top-level folder."""
        return self._dispatch("select_root", self._factory.model_for_root, (), success, failure)

    def reload_data(self, success: SuccessCallback, failure: FailureCallback) -> asyncio.Task:
        """Produce a fresh snapshot of this model's root folder."""
        return self._dispatch(f"reload_data({self._root.id})", self._factory.model_for_existing_folder,
                              (self._root,), success, failure)

    def _dispatch(self, operation: str, produce: Callable[..., Awaitable['BookmarksModel']],
                  args: Tuple[Any, ...], success: SuccessCallback, failure: FailureCallback) -> asyncio.Task:
        """
        Run a factory coroutine on the running loop and report its outcome to
        exactly one of the callbacks. A cancelled task reports to neither.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(produce(*args))

        def on_done(finished: asyncio.Task):
            if finished.cancelled():
                logger.debug(f"{operation} abandoned", component="BookmarksModel")
                return
            error = finished.exception()
            if error is not None:
                logger.warning(f"{operation} failed: {error}", component="BookmarksModel")
                failure(error)
                return
            model = finished.result()
            logger.debug(f"{operation} produced root {model.root.id}", component="BookmarksModel")
            success(model)

        task.add_done_callback(on_done)
        return task

    def __repr__(self) -> str:
        with self._queue_lock:
            queued = len(self._queue)
        return f"BookmarksModel(root={self._root.id!r}, count={self._root.count}, queued={queued})"
