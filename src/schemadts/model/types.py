# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-expression tree for emitted declarations.

The set of expression kinds is closed: references by name, string literals,
structural records, unions, intersections and parenthesized groupings.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class TypeReference(BaseModel):
    """Reference to a declared type (or a target-language primitive) by name."""

    kind: Literal["reference"] = "reference"
    name: str


class StringLiteral(BaseModel):
    """A literal string type, e.g. the value of a discriminant tag."""

    kind: Literal["literal"] = "literal"
    value: str


class PropertySignature(BaseModel):
    """A named field of a structural record."""

    name: str
    type: TypeNode
    optional: bool = True
    comment: str | None = None


class TypeLiteral(BaseModel):
    """A structural record with an ordered list of fields."""

    kind: Literal["record"] = "record"
    members: list[PropertySignature] = _Field(default_factory=list)


class UnionType(BaseModel):
    """A union over two or more type expressions."""

    kind: Literal["union"] = "union"
    types: list[TypeNode]


class IntersectionType(BaseModel):
    """An intersection over two or more type expressions."""

    kind: Literal["intersection"] = "intersection"
    types: list[TypeNode]


class ParenthesizedType(BaseModel):
    """A grouping that keeps its inner expression together when printed."""

    kind: Literal["parenthesized"] = "parenthesized"
    type: TypeNode


# A type expression: one of the closed set of node kinds.
# The `kind` discriminator field enables fast, unambiguous deserialization.
TypeNode = Annotated[
    TypeReference | StringLiteral | TypeLiteral | UnionType | IntersectionType | ParenthesizedType,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that use TypeNode.
PropertySignature.model_rebuild()
TypeLiteral.model_rebuild()
UnionType.model_rebuild()
IntersectionType.model_rebuild()
ParenthesizedType.model_rebuild()
