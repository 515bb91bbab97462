# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct the declaration model."""

import pytest
from pydantic import TypeAdapter, ValidationError

from schemadts.model import (
    Declaration,
    EnumDeclaration,
    EnumMember,
    IntersectionType,
    ParenthesizedType,
    PropertySignature,
    StringLiteral,
    TypeAliasDeclaration,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)


def test_reference_and_literal() -> None:
    """References and literals carry their kind discriminator."""
    ref = TypeReference(name="ThingBase")
    lit = StringLiteral(value="Thing")
    assert ref.kind == "reference"
    assert lit.kind == "literal"
    assert lit.value == "Thing"


def test_record_fields_keep_order() -> None:
    """A TypeLiteral keeps its members in the order given."""
    record = TypeLiteral(
        members=[
            PropertySignature(name="@id", type=TypeReference(name="string")),
            PropertySignature(name="name", type=TypeReference(name="Text")),
        ]
    )
    assert [m.name for m in record.members] == ["@id", "name"]
    assert all(m.optional for m in record.members)


def test_empty_record() -> None:
    """An empty record is valid and has no members."""
    assert TypeLiteral().members == []


def test_nested_expressions() -> None:
    """Unions, intersections and groupings nest arbitrarily."""
    node = UnionType(
        types=[
            IntersectionType(types=[TypeLiteral(), TypeReference(name="ThingBase")]),
            ParenthesizedType(type=UnionType(types=[TypeReference(name="Book"), TypeReference(name="Movie")])),
        ]
    )
    inner = node.types[1]
    assert isinstance(inner, ParenthesizedType)
    assert isinstance(inner.type, UnionType)
    assert [t.name for t in inner.type.types] == ["Book", "Movie"]


def test_models_compare_structurally() -> None:
    """Two separately built trees with the same shape are equal."""
    a = IntersectionType(types=[TypeReference(name="A"), TypeReference(name="B")])
    b = IntersectionType(types=[TypeReference(name="A"), TypeReference(name="B")])
    assert a == b
    assert a != UnionType(types=[TypeReference(name="A"), TypeReference(name="B")])


def test_type_node_validates_by_kind() -> None:
    """The kind field selects the concrete node type when validating raw data."""
    adapter: TypeAdapter[TypeNode] = TypeAdapter(TypeNode)
    node = adapter.validate_python({"kind": "parenthesized", "type": {"kind": "reference", "name": "X"}})
    assert node == ParenthesizedType(type=TypeReference(name="X"))


def test_unknown_kind_is_rejected() -> None:
    adapter: TypeAdapter[TypeNode] = TypeAdapter(TypeNode)
    with pytest.raises(ValidationError):
        adapter.validate_python({"kind": "tuple", "types": []})


def test_enum_declaration() -> None:
    """An EnumDeclaration holds members bound to literal URLs."""
    decl = EnumDeclaration(
        name="DayOfWeekEnum",
        members=[EnumMember(name="Monday", value="https://schema.org/Monday")],
    )
    assert decl.kind == "enum"
    assert decl.exported is True
    assert decl.members[0].value == "https://schema.org/Monday"


def test_alias_declaration() -> None:
    decl = TypeAliasDeclaration(name="ThingBase", type=TypeLiteral(), exported=False)
    assert decl.kind == "alias"
    assert decl.comment is None
    assert decl.exported is False


def test_declaration_union_validates_by_kind() -> None:
    adapter: TypeAdapter[Declaration] = TypeAdapter(Declaration)
    decl = adapter.validate_python({"kind": "enum", "name": "Boolean", "members": []})
    assert isinstance(decl, EnumDeclaration)
