# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type algebra over a fully linked class graph.

Computes, for one class:

- its *base type*: own fields plus the intersection of its parents' bases;
- its *leaf type*: the base tagged with a literal ``"@type"`` discriminant,
  unless some ancestor is a builtin data type;
- its *non-enum type*: the leaf united with every child (and ``string`` when
  bare strings are allowed anywhere up the lattice);
- its *total type*: the non-enum type united with its enum, if any.

Every function here is a pure read of the frozen graph. The derived flags are
recomputed per query.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemadts.model.declarations import Declaration, EnumDeclaration, TypeAliasDeclaration
from schemadts.model.types import (
    IntersectionType,
    ParenthesizedType,
    PropertySignature,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)
from schemadts.ts.context import DEFAULT_CONTEXT, Context
from schemadts.ts.property import id_property, type_property

if TYPE_CHECKING:
    from schemadts.ts.entities import Class

# ###############
# Public Interface
# ###############


def inherits_data_type(c: Class) -> bool:
    """True if any ancestor of *c* is a builtin data type."""
    return any(parent.is_builtin or inherits_data_type(parent) for parent in c.parents)


def allow_string(c: Class) -> bool:
    """True if *c* or any of its ancestors may be written as a bare string."""
    return c.allow_string_type or any(allow_string(parent) for parent in c.parents)


def base_type(
    c: Class,
    context: Context | None = None,
    *,
    skip_deprecated_properties: bool = True,
) -> TypeNode:
    """Return the structural shape of *c*: inherited bases and own fields.

    Parents are referenced by their base alias names, in insertion order.
    A root class gets an implicit ``"@id"`` field ahead of its properties.
    """
    context = context or Context.parse(DEFAULT_CONTEXT)
    parent_refs: list[TypeNode] = [TypeReference(name=p.base_name()) for p in c.parents]
    if not parent_refs:
        parent_node: TypeNode | None = None
    elif len(parent_refs) == 1:
        parent_node = parent_refs[0]
    else:
        parent_node = ParenthesizedType(type=IntersectionType(types=parent_refs))

    members: list[PropertySignature] = []
    if parent_node is None:
        members.append(id_property())
    members.extend(
        prop.to_node(context)
        for prop in c.properties()
        if not (prop.deprecated and skip_deprecated_properties)
    )
    own_fields = TypeLiteral(members=members)

    if parent_node is not None and members:
        return IntersectionType(types=[parent_node, own_fields])
    if parent_node is not None:
        return parent_node
    return own_fields


def leaf_type(c: Class) -> TypeNode:
    """Return *c*'s own variant: a reference to its base, tagged unless data-type backed."""
    base_ref = TypeReference(name=c.base_name())
    if inherits_data_type(c):
        return base_ref
    return IntersectionType(types=[TypeLiteral(members=[type_property(c.subject)]), base_ref])


def non_enum_type(c: Class) -> TypeNode:
    """Return the leaf type united with every child and, if allowed, ``string``."""
    children = sorted(c.children, key=lambda child: child.subject)
    child_refs: list[TypeNode] = [TypeReference(name=child.class_name()) for child in children]
    if allow_string(c):
        child_refs.append(TypeReference(name="string"))

    this_type = leaf_type(c)
    if not child_refs:
        return this_type
    if len(child_refs) == 1:
        return UnionType(types=[this_type, child_refs[0]])
    return UnionType(types=[this_type, ParenthesizedType(type=UnionType(types=child_refs))])


def total_type(c: Class) -> TypeNode:
    """Return the public type of *c*, including its enum arm when it has values."""
    if c.enum_values():
        return UnionType(
            types=[
                TypeReference(name=c.enum_name()),
                ParenthesizedType(type=non_enum_type(c)),
            ]
        )
    return non_enum_type(c)


def class_declarations(
    c: Class,
    context: Context | None = None,
    *,
    skip_deprecated_properties: bool = True,
) -> list[Declaration]:
    """Return the enum (if any), base alias and public alias of *c*, in that order."""
    declarations: list[Declaration] = []
    enum_values = c.enum_values()
    if enum_values:
        declarations.append(
            EnumDeclaration(
                name=c.enum_name(),
                members=[value.to_node() for value in enum_values],
            )
        )
    declarations.append(
        TypeAliasDeclaration(
            name=c.base_name(),
            type=base_type(c, context, skip_deprecated_properties=skip_deprecated_properties),
            exported=False,
        )
    )
    declarations.append(
        TypeAliasDeclaration(
            name=c.class_name(),
            type=total_type(c),
            comment=c.comment,
        )
    )
    return declarations
