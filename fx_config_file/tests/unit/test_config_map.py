"""
Unit tests for ConfigMap
"""

import json

import pytest

from fx_config_file.domain.config_map import ConfigMap


class TestConfigMap:
    """Test suite for the ConfigMap value object."""

    def test_empty_has_no_keys(self):
        assert len(ConfigMap.empty()) == 0
        assert ConfigMap.empty().keys() == []

    def test_of_pairs_matches_constructed_map(self):
        pairs = [("b", "2"), ("a", "1"), ("c", "3")]
        config = ConfigMap.of_pairs(pairs)

        assert config == ConfigMap({"a": "1", "b": "2", "c": "3"})
        assert sorted(config.keys()) == sorted(key for key, _ in pairs)

    def test_of_pairs_later_duplicate_wins(self):
        config = ConfigMap.of_pairs([("a", "1"), ("a", "2")])
        assert config["a"] == "2"
        assert len(config) == 1

    def test_iteration_is_sorted_by_key(self):
        config = ConfigMap({"zeta": "1", "alpha": "2", "mid": "3"})
        assert list(config) == ["alpha", "mid", "zeta"]
        assert config.items() == [("alpha", "2"), ("mid", "3"), ("zeta", "1")]

    def test_with_value_returns_new_map(self):
        original = ConfigMap({"a": "1"})
        updated = original.with_value("a", "2")

        assert original["a"] == "1"
        assert updated["a"] == "2"

    def test_union_left_side_wins(self):
        overrides = ConfigMap({"b": "9"})
        base = ConfigMap({"a": "1", "b": "2"})

        assert overrides.union(base) == ConfigMap({"a": "1", "b": "9"})

    def test_rejects_non_string_values(self):
        with pytest.raises(TypeError):
            ConfigMap({"a": 1})

    def test_equal_maps_hash_equal(self):
        assert hash(ConfigMap({"a": "1", "b": "2"})) == hash(ConfigMap.of_pairs([("b", "2"), ("a", "1")]))

    def test_to_json_is_independent_of_insertion_order(self):
        first = ConfigMap.of_pairs([("b", "2"), ("a", "1")])
        second = ConfigMap.of_pairs([("a", "1"), ("b", "2")])

        assert first.to_json() == {"a": "1", "b": "2"}
        assert list(first.to_json()) == ["a", "b"]
        assert first.to_json_string() == second.to_json_string() == '{"a": "1", "b": "2"}'

    def test_to_json_string_values_are_strings(self):
        config = ConfigMap({"workers": "4", "enabled": "true"})
        assert json.loads(config.to_json_string()) == {"enabled": "true", "workers": "4"}
