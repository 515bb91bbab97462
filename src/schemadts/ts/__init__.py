# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Class graph and the type algebra that turns it into declarations."""

from schemadts.ts.algebra import (
    allow_string,
    base_type,
    class_declarations,
    inherits_data_type,
    leaf_type,
    non_enum_type,
    total_type,
)
from schemadts.ts.context import DEFAULT_CONTEXT, Context
from schemadts.ts.entities import (
    BooleanEnum,
    Builtin,
    Class,
    DataTypeUnion,
    EntityKind,
    UnresolvedParentError,
    UnresolvedSupersessionError,
)
from schemadts.ts.enums import EnumValue
from schemadts.ts.ordering import compare, sort_entities, sort_key
from schemadts.ts.property import Property, id_property, type_property
from schemadts.ts.registry import (
    DuplicateEntityError,
    EntityRegistry,
    GraphError,
    RegistryFrozenError,
    UnresolvedReferenceError,
)

__all__ = [
    # Entities
    "Class",
    "Builtin",
    "BooleanEnum",
    "DataTypeUnion",
    "EntityKind",
    "Property",
    "EnumValue",
    "id_property",
    "type_property",
    # Registry and errors
    "EntityRegistry",
    "GraphError",
    "UnresolvedReferenceError",
    "UnresolvedParentError",
    "UnresolvedSupersessionError",
    "DuplicateEntityError",
    "RegistryFrozenError",
    # Algebra
    "inherits_data_type",
    "allow_string",
    "base_type",
    "leaf_type",
    "non_enum_type",
    "total_type",
    "class_declarations",
    # Ordering and context
    "sort_key",
    "compare",
    "sort_entities",
    "Context",
    "DEFAULT_CONTEXT",
]
