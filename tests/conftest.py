"""Shared pytest fixtures for gendoc tests."""

import json

import pytest


@pytest.fixture
def player_table():
    """A single instance table with one fully documented function."""
    return {
        "alias": "Player{}",
        "functions": [
            {
                "alias": "SetHealth",
                "description": "Sets the player's health.",
                "arguments": [
                    {
                        "alias": "hp",
                        "type": "number",
                        "optional": False,
                        "description": "New health",
                    }
                ],
                "returns": [{"type": "boolean", "description": "Whether it changed"}],
                "admonitions": [
                    {"type": "note", "title": "Heads up", "data": "Clamped to max."}
                ],
            }
        ],
    }


@pytest.fixture
def write_descriptor(tmp_path):
    """
    Factory writing a descriptor file under tmp_path.

    Example:
        path = write_descriptor("api/player.json", [table])
        path = write_descriptor("bad.json", raw="{not json")
    """

    def _write(relpath, tables=None, kind="LuaFunctionsTableArray", raw=None):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is None:
            raw = json.dumps({"type": kind, "MyArray": tables or []})
        path.write_text(raw, encoding="utf-8")
        return path

    return _write
