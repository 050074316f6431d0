"""Tests for descriptor discovery."""

import pytest

from gendoc import find_files


@pytest.fixture
def tree(tmp_path):
    """
    root/
        a.json
        notes.txt
        sub/
            c.json
            deeper/
                d.json
    """
    for rel in ["a.json", "notes.txt", "sub/c.json", "sub/deeper/d.json"]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}")
    return tmp_path


def _names(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]


def test_depth_zero_stays_at_root(tree):
    assert _names(find_files(tree, depth=0), tree) == ["a.json"]


def test_depth_one(tree):
    assert _names(find_files(tree, depth=1), tree) == ["sub/c.json", "a.json"]


def test_default_depth_finds_everything(tree):
    assert _names(find_files(tree), tree) == [
        "sub/deeper/d.json",
        "sub/c.json",
        "a.json",
    ]


def test_custom_pattern(tree):
    assert _names(find_files(tree, pattern="*.txt"), tree) == ["notes.txt"]


def test_does_not_match_directories(tmp_path):
    (tmp_path / "folder.json").mkdir()
    assert find_files(tmp_path) == []


def test_order_is_stable(tree):
    (tree / "b.json").write_text("{}")
    (tree / "0.json").write_text("{}")
    first = find_files(tree)
    assert first == find_files(tree)
    assert _names(first, tree)[-3:] == ["0.json", "a.json", "b.json"]


def test_missing_root_raises(tmp_path):
    with pytest.raises(OSError):
        find_files(tmp_path / "nope")
