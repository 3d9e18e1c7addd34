from __future__ import annotations

"""
Unit tests for configuration persistence.

Verifies load/save round trips to an explicit file and fallback to
defaults for missing or corrupted files.
"""

import json

from fsgraph.domain.config import get_default_config, load_config, save_config


def test_missing_file_returns_defaults(tmp_path) -> None:
    assert load_config(str(tmp_path / "none.json")) == get_default_config()


def test_saved_settings_are_loaded(tmp_path) -> None:
    path = tmp_path / "cfg" / "config.json"
    cfg = get_default_config()
    cfg["follow_symlinks"] = False
    cfg["start_policy"] = "insertion"
    save_config(cfg, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"]
    loaded = load_config(str(path))
    assert loaded["follow_symlinks"] is False
    assert loaded["start_policy"] == "insertion"


def test_unknown_keys_are_not_persisted(tmp_path) -> None:
    path = tmp_path / "config.json"
    save_config({"show_graph": True, "junk": 1}, str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["settings"] == {"show_graph": True}


def test_corrupted_file_returns_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_non_object_file_returns_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()
