# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the N-Triples reader."""

from pathlib import Path

import pytest

from schemadts.triples.nodes import SchemaString, Triple, TypedLiteral, UrlNode
from schemadts.triples.reader import TripleSourceError, TripleSyntaxError, parse_ntriples, read_ntriples

# ###############
# Test Helpers
# ###############

_THING = "<https://schema.org/Thing>"
_TYPE = "<http://www.w3.org/1999/02/22-rdf-syntax-ns#type>"
_CLASS = "<http://www.w3.org/2000/01/rdf-schema#Class>"
_COMMENT = "<http://www.w3.org/2000/01/rdf-schema#comment>"


def _single(source: str) -> Triple:
    """Parse source that must contain exactly one statement."""
    triples = parse_ntriples(source)
    assert len(triples) == 1
    return triples[0]


def _assert_syntax_error(source: str, fragment: str) -> TripleSyntaxError:
    with pytest.raises(TripleSyntaxError) as exc_info:
        parse_ntriples(source)
    assert fragment in str(exc_info.value)
    return exc_info.value


# ###############
# Well-formed Input
# ###############


class TestStatements:
    def test_empty_input(self) -> None:
        assert parse_ntriples("") == []

    def test_blank_lines_and_comments_only(self) -> None:
        assert parse_ntriples("\n# a comment\n   \n") == []

    def test_iri_object(self) -> None:
        triple = _single(f"{_THING} {_TYPE} {_CLASS} .")
        assert triple.subject == UrlNode.parse("https://schema.org/Thing")
        assert triple.predicate.name == "type"
        assert triple.object == UrlNode.parse("http://www.w3.org/2000/01/rdf-schema#Class")

    def test_plain_literal(self) -> None:
        triple = _single(f'{_THING} {_COMMENT} "The most generic type of item." .')
        assert triple.object == SchemaString("The most generic type of item.")

    def test_language_tagged_literal(self) -> None:
        triple = _single(f'{_THING} {_COMMENT} "Ding"@de-AT .')
        assert triple.object == SchemaString("Ding", language="de-AT")

    def test_datatyped_literal(self) -> None:
        triple = _single(f'{_THING} {_COMMENT} "1"^^<http://www.w3.org/2001/XMLSchema#integer> .')
        assert isinstance(triple.object, TypedLiteral)
        assert triple.object.value == "1"
        assert triple.object.datatype.name == "integer"

    def test_escape_sequences(self) -> None:
        triple = _single(f'{_THING} {_COMMENT} "a\\"b\\nc\\\\d\\u00e9" .')
        assert triple.object == SchemaString('a"b\nc\\dé')

    def test_multiple_statements_keep_order(self) -> None:
        source = f'{_THING} {_TYPE} {_CLASS} .\n{_THING} {_COMMENT} "x" .\r\n'
        triples = parse_ntriples(source)
        assert [t.predicate.name for t in triples] == ["type", "comment"]

    def test_trailing_comment_after_statement(self) -> None:
        triple = _single(f"{_THING} {_TYPE} {_CLASS} . # trailing")
        assert triple.object.name == "Class"

    def test_no_whitespace_before_dot(self) -> None:
        triple = _single(f"{_THING} {_TYPE} {_CLASS}.")
        assert triple.subject.name == "Thing"


# ###############
# Malformed Input
# ###############


class TestErrors:
    def test_missing_dot(self) -> None:
        _assert_syntax_error(f"{_THING} {_TYPE} {_CLASS}", "Expected '.'")

    def test_unterminated_iri(self) -> None:
        _assert_syntax_error("<https://schema.org/Thing", "Unterminated IRI")

    def test_unterminated_literal(self) -> None:
        _assert_syntax_error(f'{_THING} {_COMMENT} "oops .\n', "Unterminated string literal")

    def test_blank_node_subject(self) -> None:
        _assert_syntax_error(f"_:b0 {_TYPE} {_CLASS} .", "Blank nodes are not supported")

    def test_literal_subject(self) -> None:
        _assert_syntax_error(f'"x" {_TYPE} {_CLASS} .', "Expected IRI as subject")

    def test_invalid_escape(self) -> None:
        _assert_syntax_error(f'{_THING} {_COMMENT} "\\q" .', "Invalid escape sequence")

    def test_invalid_unicode_escape(self) -> None:
        _assert_syntax_error(f'{_THING} {_COMMENT} "\\u12" .', "Invalid unicode escape")

    @pytest.mark.parametrize("escape", ["\\UFFFFFFFF", "\\U00110000", "\\uD800"])
    def test_unicode_escape_outside_code_point_range(self, escape: str) -> None:
        _assert_syntax_error(f'{_THING} {_COMMENT} "{escape}" .', "is not a code point")

    def test_trailing_garbage(self) -> None:
        _assert_syntax_error(f"{_THING} {_TYPE} {_CLASS} . extra", "Unexpected content")

    def test_error_carries_position(self) -> None:
        err = _assert_syntax_error(f"{_THING} {_TYPE} {_CLASS} .\n{_THING} {_TYPE}", "Expected IRI as object")
        assert err.line == 2
        assert err.column > 1


# ###############
# Files
# ###############


def test_read_ntriples_from_file(tmp_path: Path) -> None:
    path = tmp_path / "schema.nt"
    path.write_text(f"{_THING} {_TYPE} {_CLASS} .\n", encoding="utf-8")
    assert len(read_ntriples(path)) == 1


def test_read_ntriples_directory(tmp_path: Path) -> None:
    with pytest.raises(TripleSourceError, match="Cannot read source file"):
        read_ntriples(tmp_path)


def test_read_ntriples_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.nt"
    path.write_bytes(f'{_THING} {_COMMENT} "'.encode() + b"\xff\xfe" + b'" .\n')
    with pytest.raises(TripleSourceError, match="Cannot decode"):
        read_ntriples(path)
