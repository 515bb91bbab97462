# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entities of the class graph: Schema.org classes and builtin data types.

A :class:`Class` is populated incrementally from facts about its subject.
Links to parents and superseding classes must resolve to entities that are
already registered; the inverse ``children`` links are maintained
automatically and do not keep children alive.

The builtin variants represent data types that map onto target-language
primitives and are leaves of the inheritance lattice. Each variant overrides
only its own declarations and its own base name.
"""

from __future__ import annotations

import enum
import weakref
from typing import ClassVar

import structlog

from schemadts.model.declarations import Declaration, EnumDeclaration, EnumMember, TypeAliasDeclaration
from schemadts.model.types import TypeReference, UnionType
from schemadts.triples.nodes import Fact, UrlNode
from schemadts.triples.wellknown import get_comment, get_subclass_of, is_superseded_by
from schemadts.ts import algebra
from schemadts.ts.context import Context
from schemadts.ts.enums import EnumValue
from schemadts.ts.names import to_class_name
from schemadts.ts.property import Property
from schemadts.ts.registry import EntityRegistry, UnresolvedReferenceError

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


class EntityKind(enum.Enum):
    """The closed set of entity variants."""

    CLASS = "class"
    BUILTIN = "builtin"
    BOOLEAN_ENUM = "boolean-enum"
    DATA_TYPE_UNION = "data-type-union"


class UnresolvedParentError(UnresolvedReferenceError):
    """Raised when a subclass-of fact names a class that is not registered."""


class UnresolvedSupersessionError(UnresolvedReferenceError):
    """Raised when a superseded-by fact names a class that is not registered."""


class Class:
    """A Schema.org class, emitted as up to three declarations.

    1. If the class has enum values, an enum declaration.
    2. A ``<Name>Base`` alias for its own and inherited properties.
    3. A ``<Name>`` alias: the tagged leaf type, united with every child and
       (when allowed) a bare string, and with the enum when there is one.
    """

    kind: ClassVar[EntityKind] = EntityKind.CLASS

    def __init__(self, subject: UrlNode, allow_string_type: bool = False) -> None:
        self.subject = subject
        self.allow_string_type = allow_string_type
        self._comment: str | None = None
        self._parents: list[Class] = []
        self._children: list[weakref.ref[Class]] = []
        self._props: list[Property] = []
        self._enums: list[EnumValue] = []
        self._superseded_by: list[Class] = []

    # ------------------------------------------------------------------
    # Graph accessors
    # ------------------------------------------------------------------

    @property
    def is_builtin(self) -> bool:
        return self.kind is not EntityKind.CLASS

    @property
    def parents(self) -> tuple[Class, ...]:
        return tuple(self._parents)

    @property
    def children(self) -> tuple[Class, ...]:
        alive = (ref() for ref in self._children)
        return tuple(child for child in alive if child is not None)

    @property
    def superseded_by(self) -> tuple[Class, ...]:
        return tuple(self._superseded_by)

    @property
    def is_root(self) -> bool:
        return not self._parents

    @property
    def deprecated(self) -> bool:
        return len(self._superseded_by) > 0

    @property
    def comment(self) -> str | None:
        if not self.deprecated:
            return self._comment
        names = " or ".join(c.class_name() for c in self._superseded_by)
        deprecated = f"@deprecated Use {names} instead."
        return f"{self._comment}\n{deprecated}" if self._comment else deprecated

    def properties(self) -> list[Property]:
        """Return the properties sorted by ``(name, href)``."""
        self._props.sort(key=lambda p: p.key)
        return list(self._props)

    def enum_values(self) -> list[EnumValue]:
        """Return the enum values sorted by ``(name, href)``."""
        self._enums.sort(key=lambda e: e.value)
        return list(self._enums)

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def class_name(self) -> str:
        return to_class_name(self.subject)

    def base_name(self) -> str:
        return self.class_name() + "Base"

    def enum_name(self) -> str:
        return self.class_name() + "Enum"

    # ------------------------------------------------------------------
    # Fact ingestion
    # ------------------------------------------------------------------

    def add(self, fact: Fact, registry: EntityRegistry) -> bool:
        """Consume *fact* if it is a comment, subclass-of or superseded-by fact.

        Returns:
            True if the fact was consumed; unrecognized facts are left to
            the caller.

        Raises:
            UnresolvedParentError: If the named parent is not registered.
            UnresolvedSupersessionError: If the superseding class is not registered.
            RegistryFrozenError: If the graph is already frozen.
        """
        registry.check_mutable()

        c = get_comment(fact)
        if c:
            if self._comment:
                logger.warning(
                    "duplicate_comment",
                    subject=str(self.subject),
                    detail="Duplicate comments provided on class. It will be overwritten.",
                )
            self._comment = c.comment
            return True

        s = get_subclass_of(fact)
        if s:
            parent = registry.get(str(s.sub_class_of))
            if parent is None:
                raise UnresolvedParentError(f"Couldn't find parent of {self.subject.name}, {s.sub_class_of}")
            self._parents.append(parent)
            parent._children.append(weakref.ref(self))
            return True

        if is_superseded_by(fact.predicate):
            superseded_by = registry.get(str(fact.object))
            if superseded_by is None:
                raise UnresolvedSupersessionError(
                    f"Couldn't find class {fact.object}, which supersedes class {self.subject.name}"
                )
            self._superseded_by.append(superseded_by)
            return True

        return False

    def add_prop(self, prop: Property) -> None:
        self._props.append(prop)

    def add_enum(self, value: EnumValue) -> None:
        self._enums.append(value)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def to_declarations(
        self,
        context: Context | None = None,
        *,
        skip_deprecated_properties: bool = True,
    ) -> list[Declaration]:
        return algebra.class_declarations(self, context, skip_deprecated_properties=skip_deprecated_properties)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.subject.href!r})"


class Builtin(Class):
    """A data type best represented as an alias of a target-language type."""

    kind: ClassVar[EntityKind] = EntityKind.BUILTIN

    def __init__(self, url: str, equivalent_type_name: str | None, doc: str | None) -> None:
        super().__init__(UrlNode.parse(url), allow_string_type=False)
        self.equivalent_type_name = equivalent_type_name
        self.doc = doc

    def base_name(self) -> str:
        return self.subject.name

    def to_declarations(
        self,
        context: Context | None = None,
        *,
        skip_deprecated_properties: bool = True,
    ) -> list[Declaration]:
        return [
            TypeAliasDeclaration(
                name=self.subject.name,
                type=TypeReference(name=self.equivalent_type_name or "unknown"),
                comment=self.doc,
            )
        ]


class BooleanEnum(Builtin):
    """A boolean data type whose two values are themselves URLs."""

    kind: ClassVar[EntityKind] = EntityKind.BOOLEAN_ENUM

    def __init__(self, url: str, true_url: str, false_url: str, doc: str | None) -> None:
        super().__init__(url, None, doc)
        self.true_url = true_url
        self.false_url = false_url

    def to_declarations(
        self,
        context: Context | None = None,
        *,
        skip_deprecated_properties: bool = True,
    ) -> list[Declaration]:
        return [
            EnumDeclaration(
                name=self.subject.name,
                members=[
                    EnumMember(name="True", value=self.true_url),
                    EnumMember(name="False", value=self.false_url),
                ],
                comment=self.doc,
            )
        ]


class DataTypeUnion(Builtin):
    """The ``DataType`` union over all other builtins."""

    kind: ClassVar[EntityKind] = EntityKind.DATA_TYPE_UNION

    def __init__(self, url: str, members: list[Builtin], doc: str | None) -> None:
        super().__init__(url, None, doc)
        self.members = list(members)

    def to_declarations(
        self,
        context: Context | None = None,
        *,
        skip_deprecated_properties: bool = True,
    ) -> list[Declaration]:
        return [
            TypeAliasDeclaration(
                name=self.subject.name,
                type=UnionType(types=[TypeReference(name=m.subject.name) for m in self.members]),
                comment=self.doc,
            )
        ]
