# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source fact graph: nodes, triples, the N-Triples reader and well-known predicates."""

from schemadts.triples.nodes import (
    Fact,
    ObjectNode,
    SchemaString,
    Topic,
    Triple,
    TypedLiteral,
    UrlNode,
    group_by_subject,
)
from schemadts.triples.reader import TripleSourceError, TripleSyntaxError, parse_ntriples, read_ntriples

__all__ = [
    "Fact",
    "ObjectNode",
    "SchemaString",
    "Topic",
    "Triple",
    "TypedLiteral",
    "UrlNode",
    "group_by_subject",
    "TripleSourceError",
    "TripleSyntaxError",
    "parse_ntriples",
    "read_ntriples",
]
