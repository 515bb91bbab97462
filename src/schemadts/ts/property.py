# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Properties of classes, rendered as fields of structural records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from schemadts.model.types import PropertySignature, StringLiteral, TypeNode, TypeReference, UnionType
from schemadts.triples.nodes import Fact, UrlNode
from schemadts.triples.wellknown import get_comment, is_range_includes, is_superseded_by
from schemadts.ts.context import Context
from schemadts.ts.names import to_class_name
from schemadts.ts.registry import EntityRegistry, UnresolvedReferenceError

if TYPE_CHECKING:
    from schemadts.ts.entities import Class

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############

ID_PROPERTY = "@id"
TYPE_PROPERTY = "@type"


class Property:
    """A Schema.org property, attached to every class in its domain."""

    def __init__(self, key: UrlNode) -> None:
        self.key = key
        self._comment: str | None = None
        self._types: list[Class] = []
        self._superseded_by: list[UrlNode] = []

    @property
    def deprecated(self) -> bool:
        return len(self._superseded_by) > 0

    @property
    def comment(self) -> str | None:
        if not self.deprecated:
            return self._comment
        names = " or ".join(node.name for node in self._superseded_by)
        deprecated = f"@deprecated Consider using {names} instead."
        return f"{self._comment}\n{deprecated}" if self._comment else deprecated

    def add(self, fact: Fact, registry: EntityRegistry) -> bool:
        """Consume *fact* if it describes this property; return whether it did.

        Raises:
            UnresolvedReferenceError: If a range class is not registered.
        """
        c = get_comment(fact)
        if c:
            if self._comment:
                logger.warning("duplicate_comment", subject=str(self.key))
            self._comment = c.comment
            return True

        if is_range_includes(fact.predicate):
            range_class = registry.get(str(fact.object))
            if range_class is None:
                raise UnresolvedReferenceError(
                    f"Could not find class {fact.object} in the range of property {self.key.name}"
                )
            self._types.append(range_class)
            return True

        if is_superseded_by(fact.predicate) and isinstance(fact.object, UrlNode):
            self._superseded_by.append(fact.object)
            return True

        return False

    def to_node(self, context: Context) -> PropertySignature:
        types = sorted(self._types, key=lambda t: t.subject)
        refs: list[TypeNode] = [TypeReference(name=to_class_name(t.subject)) for t in types]
        if not refs:
            type_node: TypeNode = TypeReference(name="unknown")
        elif len(refs) == 1:
            type_node = refs[0]
        else:
            type_node = UnionType(types=refs)
        return PropertySignature(
            name=context.scoped_name(self.key),
            type=type_node,
            optional=True,
            comment=self.comment,
        )


def id_property() -> PropertySignature:
    """The implicit identifier field carried by every root class."""
    return PropertySignature(name=ID_PROPERTY, type=TypeReference(name="string"), optional=True)


def type_property(subject: UrlNode) -> PropertySignature:
    """The literal discriminant tag identifying *subject*'s own variant."""
    return PropertySignature(name=TYPE_PROPERTY, type=StringLiteral(value=subject.name), optional=False)
