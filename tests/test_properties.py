"""Tests for parse_properties() and store_properties()."""

from __future__ import annotations

from dfpack.properties import parse_properties, store_properties


class TestParseProperties:
    def test_key_value_lines(self) -> None:
        assert parse_properties("class=org.acme.Csv\nname=csv\n") == {"class": "org.acme.Csv", "name": "csv"}

    def test_comments_and_blank_lines_ignored(self) -> None:
        text = "# Licensed to the ASF\n! legacy comment\n\n   \nclass=org.acme.Csv\n"
        assert parse_properties(text) == {"class": "org.acme.Csv"}

    def test_whitespace_trimmed(self) -> None:
        assert parse_properties("  class =  org.acme.Csv  \n") == {"class": "org.acme.Csv"}

    def test_colon_separator(self) -> None:
        assert parse_properties("class: org.acme.Csv") == {"class": "org.acme.Csv"}

    def test_first_separator_wins(self) -> None:
        assert parse_properties("url=http://example.com/a=b") == {"url": "http://example.com/a=b"}

    def test_key_without_value(self) -> None:
        assert parse_properties("flag\n") == {"flag": ""}

    def test_crlf_line_endings(self) -> None:
        assert parse_properties("class=org.acme.Csv\r\nname=csv\r\n") == {"class": "org.acme.Csv", "name": "csv"}

    def test_empty_text(self) -> None:
        assert parse_properties("") == {}

    def test_whitespace_separator(self) -> None:
        assert parse_properties("class org.acme.Csv\n") == {"class": "org.acme.Csv"}

    def test_whitespace_then_equals(self) -> None:
        assert parse_properties("class \t = org.acme.Csv") == {"class": "org.acme.Csv"}

    def test_escaped_separators_unescaped(self) -> None:
        text = "projectName=Acme \\:\\: Formats\nk\\ ey=a\\=b\\#c\n"
        assert parse_properties(text) == {"projectName": "Acme :: Formats", "k ey": "a=b#c"}

    def test_unicode_escapes(self) -> None:
        assert parse_properties("d=caf\\u00E9\\tx\\nend") == {"d": "caf\u00e9\tx\nend"}

    def test_surrogate_pair_escape_combined(self) -> None:
        assert parse_properties("d=Data \\uD83D\\uDE00") == {"d": "Data \U0001F600"}

    def test_line_continuation(self) -> None:
        text = "dataFormats=csv \\\n    json \\\n    zip\nversion=1.0\n"
        assert parse_properties(text) == {"dataFormats": "csv json zip", "version": "1.0"}

    def test_even_backslashes_do_not_continue(self) -> None:
        assert parse_properties("path=C:\\\\\nname=csv") == {"path": "C:\\", "name": "csv"}

    def test_comment_inside_continuation_is_value(self) -> None:
        assert parse_properties("a=x\\\n  # y\n") == {"a": "x# y"}


class TestStoreProperties:
    def test_insertion_order_and_comment(self) -> None:
        text = store_properties({"dataFormats": "csv json", "groupId": "org.acme"}, comment="Generated")
        assert text == "#Generated\ndataFormats=csv json\ngroupId=org.acme\n"

    def test_no_comment(self) -> None:
        assert store_properties({"a": "b"}) == "a=b\n"

    def test_special_characters_escaped(self) -> None:
        text = store_properties({"projectName": "Acme :: Formats", "k ey": "a=b#c"})
        assert "projectName=Acme \\:\\: Formats\n" in text
        assert "k\\ ey=a\\=b\\#c\n" in text

    def test_leading_space_and_newline_escaped(self) -> None:
        assert store_properties({"d": " two\nlines"}) == "d=\\ two\\nlines\n"

    def test_non_ascii_escaped(self) -> None:
        assert store_properties({"d": "café"}) == "d=caf\\u00E9\n"

    def test_astral_character_escaped_as_surrogate_pair(self) -> None:
        assert store_properties({"projectDescription": "Data \U0001F600"}) == "projectDescription=Data \\uD83D\\uDE00\n"

    def test_trailing_space_escaped(self) -> None:
        assert store_properties({"d": "a "}) == "d=a\\ \n"

    def test_stored_text_parses_back(self) -> None:
        values = {"dataFormats": "csv json", "version": "1.0"}
        assert parse_properties(store_properties(values, comment="x")) == values

    def test_escaped_values_parse_back(self) -> None:
        values = {
            "projectName": "Acme :: Formats",
            "projectDescription": " Data \U0001F600 caf\u00e9 ",
            "k ey": "a=b#c!d\\e",
            "multi": "one\ntwo\tthree",
            "empty": "",
        }
        assert parse_properties(store_properties(values, comment="Generated")) == values
