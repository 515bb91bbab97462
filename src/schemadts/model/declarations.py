# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration objects handed to the printer and artifact writer."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from schemadts.model.types import TypeNode

# ###############
# Public Interface
# ###############


class EnumMember(BaseModel):
    """A single enum member bound to a literal resource locator."""

    name: str
    value: str
    comment: str | None = None


class EnumDeclaration(BaseModel):
    """An enum declaration, e.g. ``DayOfWeekEnum``."""

    kind: Literal["enum"] = "enum"
    name: str
    members: list[EnumMember] = _Field(default_factory=list)
    comment: str | None = None
    exported: bool = True


class TypeAliasDeclaration(BaseModel):
    """A type alias binding a name to a type expression."""

    kind: Literal["alias"] = "alias"
    name: str
    type: TypeNode
    comment: str | None = None
    exported: bool = True


Declaration = Annotated[
    EnumDeclaration | TypeAliasDeclaration,
    _Field(discriminator="kind"),
]


TypeAliasDeclaration.model_rebuild()
