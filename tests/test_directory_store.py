import pytest

from homeaccounts.directory_store import DirectoryStore
from homeaccounts.errors import DirCreateError, SectionNotFoundError


def test_contains(tmp_path):
    (tmp_path / "TestDirectoryStore").write_bytes(b"x")
    store = DirectoryStore(tmp_path)
    store.open()
    assert store.contains("TestDirectoryStore")
    assert not store.contains("missing")


def test_write_read_delete(tmp_path):
    root = tmp_path / "directory-test"
    section = "a1b2c3"
    text = "This is a test."
    store = DirectoryStore(root)
    store.create()
    store.write_section(section, text)

    store = DirectoryStore(root)
    store.open()
    assert store.contains(section)
    assert store.read_section(section) == text.encode()
    store.delete_section(section)
    assert not store.contains(section)
    assert root.is_dir()


def test_write_with_subdir(tmp_path):
    section = "a1/b2/c3"
    text = "This is a test."
    store = DirectoryStore(tmp_path)
    store.open()
    store.write_section(section, text)

    store = DirectoryStore(tmp_path)
    store.open()
    assert store.contains(section)
    assert store.read_section(section) == text.encode()
    store.delete_section(section)
    assert not store.contains(section)
    assert not (tmp_path / "a1").exists()
    assert tmp_path.is_dir()


def test_delete_keeps_nonempty_parents(tmp_path):
    store = DirectoryStore(tmp_path)
    store.write_section("a/b", b"1")
    store.write_section("a/c", b"2")
    store.delete_section("a/b")
    assert store.section_names() == ["a/c"]


def test_equality(tmp_path):
    assert DirectoryStore("abc") == DirectoryStore("abc")
    assert DirectoryStore("abc") != DirectoryStore("abd")


def test_create_existing_directory_fails(tmp_path):
    store = DirectoryStore(tmp_path)
    with pytest.raises(DirCreateError):
        store.create()


def test_read_missing_section(tmp_path):
    store = DirectoryStore(tmp_path)
    with pytest.raises(SectionNotFoundError) as info:
        store.read_section("nothing")
    assert info.value.name == "nothing"


def test_section_names_and_clear(tmp_path):
    store = DirectoryStore(tmp_path / "data")
    store.create()
    store.write_section("b", b"2")
    store.write_section("x/a", b"1")
    assert store.section_names() == ["b", "x/a"]
    store.clear()
    assert store.section_names() == []
    assert list((tmp_path / "data").iterdir()) == []


def test_overwrite_section(tmp_path):
    store = DirectoryStore(tmp_path)
    store.write_section("s", "long content here")
    store.write_section("s", b"short")
    assert store.read_section("s") == b"short"