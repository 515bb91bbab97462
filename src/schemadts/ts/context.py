# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON-LD ``@context`` namespaces used to scope emitted property names."""

from __future__ import annotations

from dataclasses import dataclass, field

from schemadts.triples.nodes import UrlNode

# ###############
# Public Interface
# ###############

DEFAULT_CONTEXT = "https://schema.org"


@dataclass
class Context:
    """Ordered ``(prefix, namespace)`` pairs.

    The pair with an empty prefix is the default namespace: names inside it are
    emitted bare, names inside any other namespace as ``prefix:name``.
    """

    namespaces: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Context:
        """Parse ``"https://schema.org"`` or ``"schema:https://schema.org,rdf:http://..."``.

        Each comma-separated entry is either a bare URL (the default
        namespace) or ``prefix:URL``.

        Raises:
            ValueError: If *text* names no namespace or repeats a prefix.
        """
        namespaces: list[tuple[str, str]] = []
        for raw in text.split(","):
            entry = raw.strip()
            if not entry:
                continue
            prefix, sep, rest = entry.partition(":")
            if sep and not rest.startswith("//"):
                namespaces.append((prefix, rest))
            else:
                namespaces.append(("", entry))
        if not namespaces:
            raise ValueError(f"Context {text!r} names no namespace")
        prefixes = [p for p, _ in namespaces]
        if len(set(prefixes)) != len(prefixes):
            raise ValueError(f"Context {text!r} repeats a prefix")
        return cls(namespaces=namespaces)

    def scoped_name(self, node: UrlNode) -> str:
        """Return the name *node* is written as inside a document using this context."""
        for prefix, namespace in self.namespaces:
            if node.matches_context(namespace):
                return f"{prefix}:{node.name}" if prefix else node.name
        return node.href
