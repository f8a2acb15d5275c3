"""Tests for line classification, escaping and tokenizing helpers."""

import pytest

from ontodag.graph.parsers.lines import (
    ClassifiedLine,
    classify_line,
    split_fields,
    strip_escaped,
    tokenize_relations,
    trim_left,
)


class TestClassifyLine:
    """Tests for classify_line()."""

    def test_content_line(self):
        line = classify_line("  % term ; 0001\n", 7)
        assert line == ClassifiedLine(line_number=7, indent=2, content="% term ; 0001")

    def test_unindented_line(self):
        line = classify_line("$ root ; 1", 1)
        assert line.indent == 0
        assert line.content == "$ root ; 1"

    def test_crlf_terminator_removed(self):
        line = classify_line(" % a ; 1\r\n", 1)
        assert line.content == "% a ; 1"

    @pytest.mark.parametrize("raw", ["", "\n", "\r\n", "   \n", "\t\n"])
    def test_blank_lines_skipped(self, raw):
        assert classify_line(raw, 1) is None

    def test_comment_skipped(self):
        assert classify_line("!version: 1.0\n", 1) is None

    def test_indented_comment_marker_is_content(self):
        line = classify_line(" ! not a comment ; 1\n", 1)
        assert line is not None
        assert line.content.startswith("!")

    def test_custom_comment_prefix(self):
        assert classify_line("# note\n", 1, comment_prefix="#") is None
        assert classify_line("!x ; 1\n", 1, comment_prefix="#") is not None

    def test_trailing_whitespace_kept(self):
        line = classify_line(" % a ; 1  \n", 1)
        assert line.content == "% a ; 1  "

    def test_trim_left(self):
        assert trim_left(" \t x ") == "x "


class TestStripEscaped:
    """Tests for strip_escaped()."""

    def test_plain_text_unchanged(self):
        assert strip_escaped("cell wall") == "cell wall"

    def test_escaped_punctuation(self):
        assert strip_escaped("1\\,2-diol") == "1,2-diol"
        assert strip_escaped("a\\:b") == "a:b"

    def test_escaped_marker_characters(self):
        assert strip_escaped("5\\% solution") == "5% solution"

    def test_escaped_backslash(self):
        assert strip_escaped("a\\\\b") == "a\\b"

    def test_trailing_backslash_dropped(self):
        assert strip_escaped("abc\\") == "abc"

    def test_digits_and_letters_kept(self):
        assert strip_escaped("GO 0001 alpha") == "GO 0001 alpha"


class TestTokenizeRelations:
    """Tests for tokenize_relations()."""

    def test_single_descriptor(self):
        assert tokenize_relations(" root ; 0001") == [" root ; 0001"]

    def test_markers_kept_as_tokens(self):
        assert tokenize_relations(" a ; 1 % b ; 2 < c ; 3") == [
            " a ; 1 ",
            "%",
            " b ; 2 ",
            "<",
            " c ; 3",
        ]

    def test_adjacent_markers_produce_no_empty_tokens(self):
        assert tokenize_relations("a ; 1 %$ b ; 2") == ["a ; 1 ", "%", "$", " b ; 2"]

    def test_empty(self):
        assert tokenize_relations("") == []


class TestSplitFields:
    """Tests for split_fields()."""

    def test_name_and_id(self):
        assert split_fields(" root ; 0001 ") == ["root", "0001"]

    def test_extra_fields(self):
        assert split_fields("a ; 1 ; synonym:b ; xref:X") == ["a", "1", "synonym:b", "xref:X"]

    def test_name_only(self):
        assert split_fields("incomplete") == ["incomplete"]

    def test_semicolon_without_spaces_is_not_a_delimiter(self):
        assert split_fields("a;1") == ["a;1"]

    def test_custom_delimiter(self):
        assert split_fields("a | 1", delimiter=" | ") == ["a", "1"]
