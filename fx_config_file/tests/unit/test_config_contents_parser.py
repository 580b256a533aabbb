"""
Unit tests for parse_contents
"""

import pytest

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.exceptions import ConfigParseException, ParseError
from fx_config_file.parsing.config_contents_parser import parse_contents, parse_line


class TestParseContents:

    def test_skips_comments_and_blank_lines(self):
        assert parse_contents("# hi\n\nkey = v\n") == ConfigMap({"key": "v"})

    def test_splits_on_first_equals_only(self):
        assert parse_contents("a=b=c") == ConfigMap({"a": "b=c"})

    def test_bare_key_gets_empty_value(self):
        assert parse_contents("standalone") == ConfigMap({"standalone": ""})

    def test_trims_key_and_value(self):
        assert parse_contents("  key   =   value  ") == ConfigMap({"key": "value"})

    def test_indented_hash_is_not_a_comment(self):
        assert parse_contents("  # x") == ConfigMap({"# x": ""})

    def test_indented_hash_with_equals_is_a_key_value_line(self):
        assert parse_contents("  # a = b") == ConfigMap({"# a": "b"})

    def test_whitespace_only_lines_are_skipped(self):
        assert parse_contents(" \t \n\r\nk=v") == ConfigMap({"k": "v"})

    def test_carriage_return_is_trimmed(self):
        assert parse_contents("a = 1\r\nb = 2\r\n") == ConfigMap({"a": "1", "b": "2"})

    def test_last_duplicate_wins(self):
        assert parse_contents("a = 1\na = 2") == ConfigMap({"a": "2"})

    def test_empty_text_gives_empty_map(self):
        assert parse_contents("") == ConfigMap.empty()

    def test_value_with_spaces_is_kept(self):
        config = parse_contents("key2=value with spaces")
        assert config["key2"] == "value with spaces"

    def test_empty_value_after_equals(self):
        assert parse_contents("key =") == ConfigMap({"key": ""})

    def test_full_example_file(self):
        contents = (
            "# comment line\n"
            "key = value\n"
            "key2=value with spaces\n"
            "bareKeyNoValue\n"
        )
        assert parse_contents(contents) == ConfigMap(
            {"key": "value", "key2": "value with spaces", "bareKeyNoValue": ""}
        )


class TestParseLine:

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("a = b", ("a", "b")),
            ("a==b", ("a", "=b")),
            ("flag", ("flag", "")),
            ("=value", ("", "value")),
        ],
    )
    def test_parse_line(self, line, expected):
        assert parse_line(line) == expected

    def test_split_yielding_no_parts_raises(self, monkeypatch):
        monkeypatch.setattr(
            "fx_config_file.parsing.config_contents_parser._split_key_value",
            lambda line: [],
        )

        with pytest.raises(ConfigParseException, match="failed to parse config"):
            parse_contents("key = value")

    def test_parse_error_alias(self):
        assert ParseError is ConfigParseException
        assert issubclass(ParseError, ValueError)
