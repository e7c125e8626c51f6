from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

DEFAULT_TITLE = "Untitled"
FOLDER_ICON_KEY = "folder"
ITEM_PLACEHOLDER_ICON = "leaf.png"
FOLDER_PLACEHOLDER_ICON = "bookmark_folder_closed.png"


def _title_or_default(title: Optional[str]) -> str:
    return title if title else DEFAULT_TITLE


@dataclass(frozen=True)
class IconHint:
    """Lookup key for the icon provider plus the image shown until it answers"""
    key: str
    placeholder: str


class BookmarkNode:
    """The immutable base interface for bookmarks and folders"""
    id: str
    title: str

    @property
    def display_hint(self) -> IconHint:
        raise NotImplementedError


@dataclass(frozen=True)
class BookmarkItem(BookmarkNode):
    """
    An immutable item representing a bookmark.

    To change one, issue changes against the backing store and navigate
    to a fresh model.
    """
    id: str
    title: str
    url: str

    def __post_init__(self):
        object.__setattr__(self, 'title', _title_or_default(self.title))

    @property
    def display_hint(self) -> IconHint:
        return IconHint(key=self.url, placeholder=ITEM_PLACEHOLDER_ICON)

    def to_dict(self) -> dict:
        return {'id': self.id, 'title': self.title, 'url': self.url}


class BookmarkFolder(BookmarkNode):
    """
    A folder is an immutable abstraction over a named thing that can
    return its child nodes by index.
    """

    @property
    def count(self) -> int:
        raise NotImplementedError

    def get(self, index: int) -> Optional[BookmarkNode]:
        """Return the child at index, or None when the index is out of range"""
        raise NotImplementedError

    @property
    def display_hint(self) -> IconHint:
        return IconHint(key=FOLDER_ICON_KEY, placeholder=FOLDER_PLACEHOLDER_ICON)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[BookmarkNode]:
        for index in range(self.count):
            yield self.get(index)

    def find(self, guid: str) -> Optional['BookmarkFolder']:
        """Find this folder or a descendant folder by its ID"""
        if self.id == guid:
            return self
        for child in self:
            if isinstance(child, BookmarkFolder):
                found = child.find(guid)
                if found is not None:
                    return found
        return None


@dataclass(frozen=True)
class MemoryBookmarkFolder(BookmarkFolder):
    """A folder whose children are fixed when it is constructed"""
    id: str
    title: str
    children: Tuple[BookmarkNode, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'title', _title_or_default(self.title))
        object.__setattr__(self, 'children', tuple(self.children))

    @property
    def count(self) -> int:
        return len(self.children)

    def get(self, index: int) -> Optional[BookmarkNode]:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def snapshot(self) -> 'MemoryBookmarkFolder':
        """Copy this tree into fresh folder objects"""
        return snapshot_folder(self)


@dataclass
class MutableBookmarkFolder:
    """
    Append-only folder used while a factory assembles a tree.
    Call freeze() before handing the tree to a model.
    """
    id: str
    title: str
    children: List[Union[BookmarkItem, 'MutableBookmarkFolder']] = field(default_factory=list)

    def add_child(self, child: Union[BookmarkItem, 'MutableBookmarkFolder']) -> None:
        """Add a child bookmark or folder to this folder"""
        self.children.append(child)

    def freeze(self) -> MemoryBookmarkFolder:
        return MemoryBookmarkFolder(
            id=self.id,
            title=self.title,
            children=tuple(
                child.freeze() if isinstance(child, MutableBookmarkFolder) else child
                for child in self.children
            )
        )


def snapshot_folder(folder: BookmarkFolder) -> MemoryBookmarkFolder:
    """Build a new MemoryBookmarkFolder tree with the same content as folder"""
    children = []
    for child in folder:
        if isinstance(child, BookmarkFolder):
            children.append(snapshot_folder(child))
        else:
            children.append(BookmarkItem(id=child.id, title=child.title, url=child.url))
    return MemoryBookmarkFolder(id=folder.id, title=folder.title, children=tuple(children))


@dataclass(frozen=True)
class ShareItem:
    """Content shared into the application from outside, not yet a bookmark"""
    url: str
    title: Optional[str] = None
