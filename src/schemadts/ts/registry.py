# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""The entity registry: sole owner of every entity in one generated graph.

The registry has a two-phase lifecycle. During the build phase entities are
registered and linked; :meth:`EntityRegistry.freeze` ends it, after which any
further registration or linking raises :class:`RegistryFrozenError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from schemadts.ts.entities import Class

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


class GraphError(Exception):
    """Raised when the source graph cannot be linked into entities."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnresolvedReferenceError(GraphError):
    """Raised when a fact refers to an entity that is not registered."""


class DuplicateEntityError(GraphError):
    """Raised when two entities are registered under the same key."""


class RegistryFrozenError(GraphError):
    """Raised when the graph is mutated after the build phase ended."""


class EntityRegistry:
    """Maps each entity's canonical href to the entity itself."""

    def __init__(self) -> None:
        self._entities: dict[str, Class] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, entity: Class) -> Class:
        """Add *entity* under ``str(entity.subject)`` and return it.

        Raises:
            DuplicateEntityError: If the key is already taken.
            RegistryFrozenError: If the registry has been frozen.
        """
        self.check_mutable()
        key = str(entity.subject)
        if key in self._entities:
            raise DuplicateEntityError(f"Entity '{key}' is already registered")
        self._entities[key] = entity
        return entity

    def get(self, key: str) -> Class | None:
        return self._entities.get(key)

    def freeze(self) -> None:
        """End the build phase. Idempotent."""
        if not self._frozen:
            self._frozen = True
            logger.debug("registry_frozen", entities=len(self._entities))

    def check_mutable(self) -> None:
        """Raise :class:`RegistryFrozenError` once the build phase has ended."""
        if self._frozen:
            raise RegistryFrozenError("Entity registry is frozen; the graph can no longer change")

    def __contains__(self, key: object) -> bool:
        return key in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Class]:
        return iter(self._entities.values())
