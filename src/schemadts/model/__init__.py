# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration model emitted by the generator (type expressions and declarations)."""

from schemadts.model.declarations import (
    Declaration,
    EnumDeclaration,
    EnumMember,
    TypeAliasDeclaration,
)
from schemadts.model.types import (
    IntersectionType,
    ParenthesizedType,
    PropertySignature,
    StringLiteral,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)

__all__ = [
    # Type expressions
    "TypeReference",
    "StringLiteral",
    "PropertySignature",
    "TypeLiteral",
    "UnionType",
    "IntersectionType",
    "ParenthesizedType",
    "TypeNode",
    # Declarations
    "EnumMember",
    "EnumDeclaration",
    "TypeAliasDeclaration",
    "Declaration",
]
