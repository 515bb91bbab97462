# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for subjects, facts and topic grouping."""

from schemadts.triples.nodes import Fact, SchemaString, Triple, UrlNode, group_by_subject

_S = "https://schema.org/"
_RDF_TYPE = UrlNode.parse("http://www.w3.org/1999/02/22-rdf-syntax-ns#type")


# ###############
# UrlNode
# ###############


class TestUrlNode:
    def test_parse_slash_url(self) -> None:
        node = UrlNode.parse("https://schema.org/Thing")
        assert node.name == "Thing"
        assert node.href == "https://schema.org/Thing"
        assert node.context == "https://schema.org/"

    def test_parse_hash_url(self) -> None:
        node = UrlNode.parse("http://www.w3.org/2000/01/rdf-schema#subClassOf")
        assert node.name == "subClassOf"
        assert node.context == "http://www.w3.org/2000/01/rdf-schema#"

    def test_str_is_href(self) -> None:
        assert str(UrlNode.parse(_S + "Book")) == _S + "Book"

    def test_orders_by_name_then_href(self) -> None:
        a = UrlNode.parse("https://schema.org/Book")
        b = UrlNode.parse("http://example.org/Book")
        c = UrlNode.parse("http://example.org/Anchor")
        assert sorted([a, b, c]) == [c, b, a]

    def test_ordering_is_ordinal(self) -> None:
        """Uppercase sorts before lowercase, unlike locale-aware collation."""
        upper = UrlNode.parse(_S + "Zebra")
        lower = UrlNode.parse(_S + "apple")
        assert upper < lower

    def test_equality_ignores_nothing_but_name_and_href(self) -> None:
        assert UrlNode.parse(_S + "Thing") == UrlNode(name="Thing", href=_S + "Thing")

    def test_matches_context_ignores_scheme(self) -> None:
        node = UrlNode.parse("http://schema.org/Thing")
        assert node.matches_context("https://schema.org/")
        assert node.matches_context("https://schema.org")
        assert not node.matches_context("https://example.org/")


# ###############
# Grouping
# ###############


def _triple(subject: str, obj: str) -> Triple:
    return Triple(subject=UrlNode.parse(_S + subject), predicate=_RDF_TYPE, object=UrlNode.parse(_S + obj))


class TestGroupBySubject:
    def test_groups_in_first_seen_order(self) -> None:
        topics = group_by_subject([_triple("B", "X"), _triple("A", "X"), _triple("B", "Y")])
        assert [t.subject.name for t in topics] == ["B", "A"]
        assert len(topics[0].facts) == 2

    def test_drops_duplicate_facts(self) -> None:
        topics = group_by_subject([_triple("A", "X"), _triple("A", "X")])
        assert len(topics) == 1
        assert topics[0].facts == [Fact(predicate=_RDF_TYPE, object=UrlNode.parse(_S + "X"))]

    def test_literal_objects(self) -> None:
        comment = UrlNode.parse("http://www.w3.org/2000/01/rdf-schema#comment")
        triple = Triple(subject=UrlNode.parse(_S + "A"), predicate=comment, object=SchemaString("hi"))
        topics = group_by_subject([triple])
        assert topics[0].facts[0].object == SchemaString("hi")

    def test_empty_input(self) -> None:
        assert group_by_subject([]) == []
