# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizers for the well-known RDF, RDFS and Schema.org predicates."""

from __future__ import annotations

from dataclasses import dataclass

from schemadts.triples.nodes import Fact, SchemaString, Topic, UrlNode

# ###############
# Public Interface
# ###############

RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NAMESPACE = "http://www.w3.org/2000/01/rdf-schema#"
SCHEMA_NAMESPACE = "https://schema.org/"


@dataclass(frozen=True)
class CommentFact:
    """The payload of an ``rdfs:comment`` fact."""

    comment: str


@dataclass(frozen=True)
class SubClassOfFact:
    """The payload of an ``rdfs:subClassOf`` fact."""

    sub_class_of: UrlNode


def get_comment(fact: Fact) -> CommentFact | None:
    """Return the comment carried by *fact*, or None if it is not a comment fact."""
    if not _is(fact.predicate, RDFS_NAMESPACE, "comment"):
        return None
    if not isinstance(fact.object, SchemaString):
        return None
    return CommentFact(comment=fact.object.value)


def get_subclass_of(fact: Fact) -> SubClassOfFact | None:
    """Return the parent named by *fact*, or None if it is not a subclass fact."""
    if not _is(fact.predicate, RDFS_NAMESPACE, "subClassOf"):
        return None
    if not isinstance(fact.object, UrlNode):
        return None
    return SubClassOfFact(sub_class_of=fact.object)


def is_superseded_by(predicate: UrlNode) -> bool:
    return _is(predicate, SCHEMA_NAMESPACE, "supersededBy")


def is_type(predicate: UrlNode) -> bool:
    return _is(predicate, RDF_NAMESPACE, "type")


def is_domain_includes(predicate: UrlNode) -> bool:
    return _is(predicate, SCHEMA_NAMESPACE, "domainIncludes")


def is_range_includes(predicate: UrlNode) -> bool:
    return _is(predicate, SCHEMA_NAMESPACE, "rangeIncludes")


def get_types(topic: Topic) -> list[UrlNode]:
    """Return the ``rdf:type`` objects declared for *topic*."""
    return [f.object for f in topic.facts if is_type(f.predicate) and isinstance(f.object, UrlNode)]


def is_class(topic: Topic) -> bool:
    """True if *topic* is declared as an ``rdfs:Class``."""
    return any(_is(t, RDFS_NAMESPACE, "Class") for t in get_types(topic))


def is_property(topic: Topic) -> bool:
    """True if *topic* is declared as an ``rdf:Property``."""
    return any(_is(t, RDF_NAMESPACE, "Property") for t in get_types(topic))


# ################
# Implementation
# ################


def _is(node: UrlNode, namespace: str, name: str) -> bool:
    return node.name == name and node.matches_context(namespace)
