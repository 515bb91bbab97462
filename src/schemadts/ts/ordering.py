# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Deterministic order in which entities' declarations are emitted.

Plain builtins come first, then the ``DataType`` union, then every other
class. Within a group entities are ordered by ``(name, href)`` using ordinal
(code point) string comparison, so output does not depend on the locale.
"""

from __future__ import annotations

from collections.abc import Iterable

from schemadts.ts.entities import Class, EntityKind

# ###############
# Public Interface
# ###############

BUILTIN_GROUP = 0
DATA_TYPE_UNION_GROUP = 1
CLASS_GROUP = 2


def sort_key(entity: Class) -> tuple[int, str, str]:
    """Return the key placing *entity* in the global order."""
    if entity.kind is EntityKind.DATA_TYPE_UNION:
        group = DATA_TYPE_UNION_GROUP
    elif entity.is_builtin:
        group = BUILTIN_GROUP
    else:
        group = CLASS_GROUP
    return (group, entity.subject.name, entity.subject.href)


def compare(a: Class, b: Class) -> int:
    """Three-way comparison consistent with :func:`sort_key`."""
    ka, kb = sort_key(a), sort_key(b)
    return (ka > kb) - (ka < kb)


def sort_entities(entities: Iterable[Class]) -> list[Class]:
    """Return *entities* in emission order. Stable."""
    return sorted(entities, key=sort_key)
