import asyncio

from bookmarks.bookmark import DEFAULT_TITLE, BookmarkFolder, MemoryBookmarkFolder, MutableBookmarkFolder
from bookmarks.errors import FolderNotFoundError


def test_root_has_one_empty_mobile_folder(stub_factory):
    model = asyncio.run(stub_factory.model_for_root())

    assert model.root.count == 1
    mobile = model.root.get(0)
    assert isinstance(mobile, BookmarkFolder)
    assert mobile.title == "Mobile Bookmarks"
    assert mobile.count == 0
    assert model.root.get(1) is None


def test_select_root_always_succeeds_once(stub_factory, navigate):
    result = navigate(stub_factory.null_model.select_root)

    assert len(result.successes) == 1
    assert result.failures == []


def test_each_root_is_a_fresh_tree(stub_factory):
    first = asyncio.run(stub_factory.model_for_root())
    second = asyncio.run(stub_factory.model_for_root())

    assert first.root == second.root
    assert first.root is not second.root
    assert first.root.get(0) is not second.root.get(0)


def test_lenient_lookup_fabricates_empty_folder(stub_factory, navigate):
    result = navigate(lambda ok, err: stub_factory.null_model.select_folder("anything", ok, err))

    assert result.failures == []
    root = result.successes[0].root
    assert root.id == "anything"
    assert root.title == DEFAULT_TITLE
    assert root.count == 0


def test_lenient_reload_wraps_the_given_folder(stub_factory, navigate):
    folder = MemoryBookmarkFolder(id="elsewhere", title="Elsewhere")
    model = asyncio.run(stub_factory.model_for_existing_folder(folder))

    result = navigate(model.reload_data)

    assert result.successes[0].root == folder
    assert result.successes[0].root is not model.root


def test_strict_lookup_resolves_known_folder(strict_factory, navigate):
    model = asyncio.run(strict_factory.model_for_root())
    result = navigate(lambda ok, err: model.select_folder("toolbar", ok, err))

    toolbar = result.successes[0].root
    assert [child.title for child in toolbar] == ["Python", "PyPI", "News"]


def test_strict_lookup_reports_unknown_folder(strict_factory, navigate):
    model = strict_factory.null_model
    result = navigate(lambda ok, err: model.select_folder("nope", ok, err))

    assert result.successes == []
    assert isinstance(result.failures[0], FolderNotFoundError)


def test_reload_fails_after_root_removed(strict_factory, navigate):
    toolbar_model = asyncio.run(strict_factory.model_for_folder("toolbar"))
    original_root = toolbar_model.root

    strict_factory.reset(MutableBookmarkFolder(id="root", title="Root").freeze())
    result = navigate(toolbar_model.reload_data)

    assert result.successes == []
    assert isinstance(result.failures[0], FolderNotFoundError)
    assert toolbar_model.root is original_root
    assert toolbar_model.root.count == 3


def test_reload_sees_store_changes(strict_factory, navigate):
    model = asyncio.run(strict_factory.model_for_folder("mobile"))
    assert model.root.count == 0

    root = MutableBookmarkFolder(id="root", title="Root")
    mobile = MutableBookmarkFolder(id="mobile", title="Mobile Bookmarks")
    mobile.add_child(MutableBookmarkFolder(id="new", title="New"))
    root.add_child(mobile)
    strict_factory.reset(root.freeze())

    result = navigate(model.reload_data)

    assert result.successes[0].root.count == 1
    assert model.root.count == 0


def test_null_model_is_empty_and_shares_factory(stub_factory):
    model = stub_factory.null_model

    assert model.root.id == "stub"
    assert model.root.count == 0
    assert model.root.get(0) is None
    assert model.factory is stub_factory
