#!/usr/bin/env python3
"""Tests for recents store loading and saving."""

import yaml

from pockettools import RECENTS_KEY, load_recents, save_recents

VIN_A = "1HGCM82633A004352"
VIN_B = "2T1BURHE0JC012345"


class TestLoadRecents:
    """Tests for load_recents."""

    def test_missing_file(self, tmp_path):
        assert load_recents(tmp_path / "nope.yaml") == []

    def test_loads_list(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text(f"{RECENTS_KEY}:\n  - {VIN_A}\n  - {VIN_B}\n")
        assert load_recents(path) == [VIN_A, VIN_B]

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text("vin_recents_v1: [unclosed\n")
        assert load_recents(path) == []

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text(f"{RECENTS_KEY}: {VIN_A}\n")
        assert load_recents(path) == []

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text("- a\n- b\n")
        assert load_recents(path) == []

    def test_empty_file(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text("")
        assert load_recents(path) == []

    def test_drops_non_strings(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text(f"{RECENTS_KEY}:\n  - {VIN_A}\n  - 42\n  - null\n")
        assert load_recents(path) == [VIN_A]


class TestSaveRecents:
    """Tests for save_recents."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "recents.yaml"
        save_recents(path, [VIN_B, VIN_A])
        assert load_recents(path) == [VIN_B, VIN_A]

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "recents.yaml"
        save_recents(path, [VIN_A])
        assert path.exists()

    def test_preserves_other_keys(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_text("theme: dark\n")
        save_recents(path, [VIN_A])
        data = yaml.safe_load(path.read_text())
        assert data == {"theme": "dark", RECENTS_KEY: [VIN_A]}

    def test_overwrites_list(self, tmp_path):
        path = tmp_path / "recents.yaml"
        save_recents(path, [VIN_A])
        save_recents(path, [])
        assert load_recents(path) == []


class TestUndecodableStore:
    """Stores that are not valid UTF-8 read as empty."""

    def test_invalid_bytes(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_bytes(b"vin_recents_v1:\n  - \xff\xfe\n")
        assert load_recents(path) == []

    def test_save_replaces_undecodable_store(self, tmp_path):
        path = tmp_path / "recents.yaml"
        path.write_bytes(b"theme: \xfd\xfe\n")
        save_recents(path, [VIN_A])
        assert load_recents(path) == [VIN_A]
