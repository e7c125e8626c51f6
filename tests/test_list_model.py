import asyncio

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from bookmarks.stub_factory import StubBookmarksModelFactory
from bookmarks.rest import BookmarksRESTModelFactory
from ui.bookmarks_list_model import BookmarksListModel, NO_BOOKMARK_TEXT


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


def run(start):
    async def main():
        task = start()
        await asyncio.wait([task])
        await asyncio.sleep(0)

    asyncio.run(main())


def test_rows_follow_the_snapshot(qt_app, strict_factory):
    list_model = BookmarksListModel(asyncio.run(strict_factory.model_for_folder("toolbar")))

    assert list_model.rowCount() == 3
    first = list_model.index(0, 0)
    assert list_model.data(first) == "Python"
    assert list_model.data(first, BookmarksListModel.UrlRole) == "https://www.python.org/"
    assert list_model.data(first, BookmarksListModel.IconKeyRole) == "https://www.python.org/"
    assert list_model.data(list_model.index(2, 0), BookmarksListModel.IsFolderRole) is True
    assert list_model.data(list_model.index(2, 0), BookmarksListModel.IconKeyRole) == "folder"


def test_missing_row_renders_placeholder(qt_app, stub_factory):
    list_model = BookmarksListModel(stub_factory.null_model)
    stale = list_model.createIndex(5, 0)

    assert list_model.data(stale) == NO_BOOKMARK_TEXT
    assert list_model.data(stale, BookmarksListModel.IdRole) is None


def test_open_row_swaps_in_child_snapshot(qt_app, strict_factory):
    list_model = BookmarksListModel(asyncio.run(strict_factory.model_for_root()))
    changes = []
    list_model.model_changed.connect(lambda: changes.append(list_model.bookmarks_model.root.id))

    run(lambda: list_model.open_row(0))

    assert changes == ["toolbar"]
    assert list_model.rowCount() == 3


def test_open_row_ignores_items(qt_app, strict_factory):
    list_model = BookmarksListModel(asyncio.run(strict_factory.model_for_folder("toolbar")))

    assert list_model.open_row(0) is None
    assert list_model.open_row(99) is None


def test_failed_refresh_keeps_current_rows(qt_app):
    class Account:
        async def make_auth_request(self, path):
            return [{"title": "A", "bmkUri": "https://a.example/", "id": "a"}]

    factory = BookmarksRESTModelFactory(Account())
    list_model = BookmarksListModel(factory.null_model)
    errors = []
    list_model.load_failed.connect(errors.append)

    run(list_model.go_home)
    assert list_model.rowCount() == 1

    run(list_model.refresh)

    assert len(errors) == 1
    assert "Not supported" in errors[0]
    assert list_model.rowCount() == 1
