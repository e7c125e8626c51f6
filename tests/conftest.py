import asyncio
import os
import tempfile

# Keep log files out of the user's data directory while testing.
os.environ.setdefault("XDG_DATA_HOME", tempfile.mkdtemp(prefix="bookmarks-navigator-tests-"))

import pytest

from bookmarks.bookmark import BookmarkItem, MutableBookmarkFolder
from bookmarks.stub_factory import StubBookmarksModelFactory


class Recorder:
    """Collects what a navigation call reported"""

    def __init__(self):
        self.successes = []
        self.failures = []

    def success(self, model):
        self.successes.append(model)

    def failure(self, error):
        self.failures.append(error)


def run_navigation(start):
    """
    Call start(success, failure) inside a fresh event loop, wait for the
    task it returns and give done callbacks a chance to run.
    """
    recorder = Recorder()

    async def main():
        task = start(recorder.success, recorder.failure)
        await asyncio.wait([task])
        await asyncio.sleep(0)

    asyncio.run(main())
    return recorder


@pytest.fixture
def navigate():
    return run_navigation


@pytest.fixture
def sample_tree():
    root = MutableBookmarkFolder(id="root", title="Root")
    toolbar = MutableBookmarkFolder(id="toolbar", title="Toolbar")
    toolbar.add_child(BookmarkItem(id="b1", title="Python", url="https://www.python.org/"))
    toolbar.add_child(BookmarkItem(id="b2", title="PyPI", url="https://pypi.org/"))
    news = MutableBookmarkFolder(id="news", title="News")
    news.add_child(BookmarkItem(id="b3", title="LWN", url="https://lwn.net/"))
    toolbar.add_child(news)
    root.add_child(toolbar)
    root.add_child(MutableBookmarkFolder(id="mobile", title="Mobile Bookmarks"))
    return root.freeze()


@pytest.fixture
def stub_factory():
    return StubBookmarksModelFactory()


@pytest.fixture
def strict_factory(sample_tree):
    return StubBookmarksModelFactory(root=sample_tree, strict=True)
