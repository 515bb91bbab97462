# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Enumerated values of classes, rendered as enum members."""

from __future__ import annotations

from schemadts.model.declarations import EnumMember
from schemadts.triples.nodes import Fact, UrlNode
from schemadts.triples.wellknown import get_comment
from schemadts.ts.names import to_enum_name


class EnumValue:
    """A named instance of one or more enumeration classes, e.g. ``Monday``."""

    def __init__(self, value: UrlNode) -> None:
        self.value = value
        self._comment: str | None = None

    def add(self, fact: Fact) -> bool:
        c = get_comment(fact)
        if c:
            self._comment = c.comment
            return True
        return False

    def to_node(self) -> EnumMember:
        return EnumMember(name=to_enum_name(self.value), value=self.value.href, comment=self._comment)
