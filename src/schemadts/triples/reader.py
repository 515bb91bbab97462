# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""N-Triples reader.

Converts the text of an ``.nt`` file into a list of triples. Each statement is
``<subject> <predicate> object .`` on a single line, where the object is an
IRI or a string literal with an optional language tag or datatype.
"""

from pathlib import Path

from schemadts.triples.nodes import ObjectNode, SchemaString, Triple, TypedLiteral, UrlNode

# ###############
# Public Interface
# ###############


class TripleSyntaxError(Exception):
    """Raised when the reader encounters malformed N-Triples input.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def parse_ntriples(source: str) -> list[Triple]:
    """Parse N-Triples text into triples, in source order.

    Blank lines and ``#`` comments are skipped.

    Raises:
        TripleSyntaxError: On malformed statements, unterminated IRIs or
            literals, invalid escapes, or blank-node terms.
    """
    return _Reader(source).read()


class TripleSourceError(Exception):
    """Raised when an N-Triples file cannot be read or is not UTF-8 text."""


def read_ntriples(path: Path) -> list[Triple]:
    """Read and parse the N-Triples file at *path*.

    Raises:
        TripleSourceError: If the file cannot be read or decoded.
        TripleSyntaxError: If its content is malformed.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TripleSourceError(f"Cannot decode '{path}' as UTF-8: {exc}") from exc
    except OSError as exc:
        raise TripleSourceError(f"Cannot read source file '{path}': {exc}") from exc
    return parse_ntriples(source)


# ################
# Implementation
# ################

_SIMPLE_ESCAPES: dict[str, str] = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


class _Reader:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def read(self) -> list[Triple]:
        """Run the scanner and return every statement as a triple."""
        triples: list[Triple] = []
        while True:
            self._skip_blank_lines_and_comments()
            if self._pos >= len(self._source):
                return triples
            triples.append(self._statement())

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _error(self, message: str) -> TripleSyntaxError:
        return TripleSyntaxError(message, self._line, self._column)

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def _skip_blank_lines_and_comments(self) -> None:
        while self._pos < len(self._source):
            ch = self._current()
            if ch in " \t\r\n":
                self._advance()
            elif ch == "#":
                self._skip_comment()
            else:
                break

    def _skip_inline_whitespace(self) -> None:
        while self._current() in (" ", "\t"):
            self._advance()

    def _skip_comment(self) -> None:
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()

    # ------------------------------------------------------------------
    # Statements and terms
    # ------------------------------------------------------------------

    def _statement(self) -> Triple:
        subject = self._iri("subject")
        self._skip_inline_whitespace()
        predicate = self._iri("predicate")
        self._skip_inline_whitespace()
        obj = self._object()
        self._skip_inline_whitespace()
        if self._current() != ".":
            raise self._error("Expected '.' at end of statement")
        self._advance()
        self._skip_inline_whitespace()
        if self._current() == "#":
            self._skip_comment()
        if self._current() not in ("\n", "\r", ""):
            raise self._error(f"Unexpected content after statement: {self._current()!r}")
        return Triple(subject=subject, predicate=predicate, object=obj)

    def _iri(self, role: str) -> UrlNode:
        ch = self._current()
        if ch == "_":
            raise self._error(f"Blank nodes are not supported as {role}")
        if ch != "<":
            raise self._error(f"Expected IRI as {role}")
        self._advance()  # <
        chars: list[str] = []
        while True:
            ch = self._current()
            if ch in ("", "\n"):
                raise self._error("Unterminated IRI")
            if ch == ">":
                self._advance()
                return UrlNode.parse("".join(chars))
            if ch == "\\":
                chars.append(self._escape(unicode_only=True))
            else:
                chars.append(self._advance())

    def _object(self) -> ObjectNode:
        if self._current() == '"':
            return self._literal()
        return self._iri("object")

    def _literal(self) -> ObjectNode:
        self._advance()  # opening "
        chars: list[str] = []
        while True:
            ch = self._current()
            if ch in ("", "\n"):
                raise self._error("Unterminated string literal")
            if ch == '"':
                self._advance()
                break
            if ch == "\\":
                chars.append(self._escape(unicode_only=False))
            else:
                chars.append(self._advance())
        value = "".join(chars)

        if self._current() == "@":
            self._advance()
            start = self._pos
            while self._current().isalnum() or self._current() == "-":
                self._advance()
            if self._pos == start:
                raise self._error("Empty language tag")
            return SchemaString(value=value, language=self._source[start : self._pos])
        if self._current() == "^":
            self._advance()
            if self._current() != "^":
                raise self._error("Expected '^^' before datatype IRI")
            self._advance()
            return TypedLiteral(value=value, datatype=self._iri("datatype"))
        return SchemaString(value=value)

    def _escape(self, *, unicode_only: bool) -> str:
        self._advance()  # backslash
        esc = self._current()
        if esc in ("u", "U"):
            self._advance()
            width = 4 if esc == "u" else 8
            digits = self._source[self._pos : self._pos + width]
            if len(digits) != width or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise self._error(f"Invalid unicode escape: '\\{esc}{digits}'")
            code_point = int(digits, 16)
            if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
                raise self._error(f"Invalid unicode escape: '\\{esc}{digits}' is not a code point")
            for _ in range(width):
                self._advance()
            return chr(code_point)
        if not unicode_only and esc in _SIMPLE_ESCAPES:
            self._advance()
            return _SIMPLE_ESCAPES[esc]
        raise self._error(f"Invalid escape sequence: '\\{esc}'")
