# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Subjects, predicates and objects of the source fact graph."""

from __future__ import annotations

from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


@dataclass(frozen=True, order=True)
class UrlNode:
    """An entity reference: a display name plus its canonical URL.

    Instances compare and sort by ``(name, href)`` using ordinal string
    comparison. ``str(node)`` is the href, which is also the registry key.

    Attributes:
        name: The local name, e.g. ``"Thing"``.
        href: The full URL, e.g. ``"https://schema.org/Thing"``.
        context: The namespace the name lives in, e.g. ``"https://schema.org/"``.
    """

    name: str
    href: str
    context: str = field(default="", compare=False)

    @classmethod
    def parse(cls, url: str) -> UrlNode:
        """Split *url* into namespace and local name.

        The local name follows the last ``#`` if present, otherwise the last
        ``/``. A URL ending in a separator keeps an empty name.
        """
        cut = url.rfind("#")
        if cut == -1:
            cut = url.rfind("/")
        return cls(name=url[cut + 1 :], href=url, context=url[: cut + 1])

    def matches_context(self, namespace: str) -> bool:
        """Return True if this node lives in *namespace*, ignoring the URL scheme."""
        return _strip_scheme(self.context).rstrip("/#") == _strip_scheme(namespace).rstrip("/#")

    def __str__(self) -> str:
        return self.href


@dataclass(frozen=True)
class SchemaString:
    """A literal string object, optionally language-tagged."""

    value: str
    language: str | None = None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TypedLiteral:
    """A literal carrying an explicit datatype IRI, e.g. ``"1"^^xsd:integer``."""

    value: str
    datatype: UrlNode

    def __str__(self) -> str:
        return self.value


ObjectNode = UrlNode | SchemaString | TypedLiteral


@dataclass(frozen=True)
class Fact:
    """One ``(predicate, object)`` statement about an implied subject."""

    predicate: UrlNode
    object: ObjectNode


@dataclass(frozen=True)
class Triple:
    """A full ``(subject, predicate, object)`` statement."""

    subject: UrlNode
    predicate: UrlNode
    object: ObjectNode

    def fact(self) -> Fact:
        """Return this triple without its subject."""
        return Fact(predicate=self.predicate, object=self.object)


@dataclass
class Topic:
    """All facts known about a single subject, in first-seen order."""

    subject: UrlNode
    facts: list[Fact] = field(default_factory=list)


def group_by_subject(triples: list[Triple]) -> list[Topic]:
    """Group *triples* into topics, one per subject.

    Topics appear in the order their subject was first seen. Identical facts
    about the same subject are kept only once.
    """
    topics: dict[str, Topic] = {}
    seen: set[tuple[str, Fact]] = set()
    for triple in triples:
        key = str(triple.subject)
        topic = topics.get(key)
        if topic is None:
            topic = Topic(subject=triple.subject)
            topics[key] = topic
        fact = triple.fact()
        if (key, fact) in seen:
            continue
        seen.add((key, fact))
        topic.facts.append(fact)
    return list(topics.values())


# ################
# Implementation
# ################


def _strip_scheme(url: str) -> str:
    for scheme in ("https://", "http://"):
        if url.startswith(scheme):
            return url[len(scheme) :]
    return url
