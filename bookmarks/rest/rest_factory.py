from typing import Any, Callable, List, Optional

from ..bookmark import BookmarkFolder, BookmarkItem, MemoryBookmarkFolder
from ..bookmarks_model import BookmarksModel
from ..errors import NotSupportedError
from ..model_factory import BookmarksModelFactory
from utils.utils import logger

RECENT_BOOKMARKS_RESOURCE = "bookmarks/recent"
UNSORTED_FOLDER_ID = "unsorted"
UNSORTED_FOLDER_TITLE = "Unsorted"
NULL_FOLDER_ID = "stub"

# Field names of one record in the recent bookmarks response
TITLE_FIELD = "title"
URL_FIELD = "bmkUri"
ID_FIELD = "id"


def parse_items(response: Any) -> List[BookmarkItem]:
    """
    Turn the decoded response body into bookmark items.

    Anything other than a list yields no items. A record missing one of
    the title, url or id strings is skipped on its own.
    """
    items = []
    if not isinstance(response, list):
        logger.debug(f"Ignoring response of type {type(response).__name__}", component="RESTFactory")
        return items

    for index, record in enumerate(response):
        if not isinstance(record, dict):
            logger.debug(f"Skipping record {index}: not an object", component="RESTFactory")
            continue

        title = record.get(TITLE_FIELD)
        url = record.get(URL_FIELD)
        guid = record.get(ID_FIELD)
        if not (isinstance(title, str) and isinstance(url, str) and isinstance(guid, str)):
            logger.debug(f"Skipping malformed record {index}", component="RESTFactory")
            continue

        items.append(BookmarkItem(id=guid, title=title, url=url))

    return items


class BookmarksRESTModelFactory(BookmarksModelFactory):
    """
    Backend for the bookmarks REST service.

    The service exposes a single flat list of recent bookmarks, so the
    root is an "Unsorted" folder and folder navigation is not supported.
    """

    def __init__(self, account, resource: str = RECENT_BOOKMARKS_RESOURCE,
                 fallback_to_empty_root: bool = False,
                 id_generator: Optional[Callable[[], str]] = None):
        self.account = account
        self.resource = resource
        self.fallback_to_empty_root = fallback_to_empty_root
        self.id_generator = id_generator

    def _model(self, root: BookmarkFolder) -> BookmarksModel:
        return BookmarksModel(self, root, id_generator=self.id_generator)

    def parse_response(self, response: Any) -> BookmarksModel:
        items = parse_items(response)
        logger.info(f"Parsed {len(items)} bookmarks", component="RESTFactory")
        folder = MemoryBookmarkFolder(id=UNSORTED_FOLDER_ID, title=UNSORTED_FOLDER_TITLE, children=tuple(items))
        return self._model(folder)

    async def model_for_root(self) -> BookmarksModel:
        try:
            data = await self.account.make_auth_request(self.resource)
        except Exception as e:
            if not self.fallback_to_empty_root:
                raise
            logger.error(f"Could not fetch {self.resource}, showing an empty root: {e}", component="RESTFactory")
            return self.null_model
        return self.parse_response(data)

    async def model_for_folder(self, guid: str) -> BookmarksModel:
        raise NotSupportedError("model_for_folder", backend="rest")

    async def model_for_existing_folder(self, folder: BookmarkFolder) -> BookmarksModel:
        raise NotSupportedError("model_for_existing_folder", backend="rest")

    # Available synchronously so a view can render before the root arrives.
    @property
    def null_model(self) -> BookmarksModel:
        return self._model(MemoryBookmarkFolder(id=NULL_FOLDER_ID, title=""))
