"""Tests for the tracking aggregator."""

from __future__ import annotations

import pytest

from dotstatus.core.aggregator import aggregate, top_level_key


class TestTopLevelKey:
    def test_bare_file(self):
        assert top_level_key("a.txt") == "a.txt"

    def test_nested_file(self):
        assert top_level_key("b/x.txt") == "b/"

    def test_deeply_nested_file(self):
        assert top_level_key(".config/nvim/lua/init.lua") == ".config/"

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            top_level_key("")


class TestAggregate:
    def test_empty(self):
        assert aggregate([]) == {}

    def test_single_file(self):
        assert aggregate(["a.txt"]) == {"a.txt": 1}

    def test_directory_counts(self):
        assert aggregate(["b/x.txt", "b/y.txt"]) == {"b/": 2}

    def test_nested_paths_roll_up(self):
        paths = [".config/git/config", ".config/nvim/init.lua", ".config/nvim/lua/a.lua", ".bashrc"]
        assert aggregate(paths) == {".config/": 3, ".bashrc": 1}

    def test_file_and_directory_with_same_name(self):
        assert aggregate(["foo", "foo/bar"]) == {"foo": 1, "foo/": 1}

    def test_duplicate_bare_name_counted_twice(self):
        assert aggregate(["dup.txt", "dup.txt"]) == {"dup.txt": 2}

    def test_accepts_any_iterable(self):
        assert aggregate(p for p in ["a", "d/a", "d/b"]) == {"a": 1, "d/": 2}

    def test_order_independent(self):
        paths = ["b/x", "a", "c/d/e", "b/y", "c/f"]
        assert aggregate(paths) == aggregate(list(reversed(paths)))
        assert aggregate(paths) == aggregate(sorted(paths))

    def test_file_keys_are_exactly_one(self):
        counts = aggregate(["a", "b", "d/x", "d/y", "e/f/g"])
        assert all(v == 1 for k, v in counts.items() if not k.endswith("/"))

    def test_counts_match_first_component(self):
        paths = ["d/x", "d/y/z", "e/f", "g"]
        counts = aggregate(paths)
        for key, value in counts.items():
            expected = sum(1 for p in paths if (p.startswith(key) if key.endswith("/") else p == key))
            assert value == expected
        assert sum(counts.values()) == len(paths)

    def test_empty_path_fails_fast(self):
        with pytest.raises(ValueError):
            aggregate(["a.txt", ""])
