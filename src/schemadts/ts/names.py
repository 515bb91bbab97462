# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier sanitizing for emitted declaration and member names."""

import re

from schemadts.triples.nodes import UrlNode

# ###############
# Public Interface
# ###############


def to_class_name(subject: UrlNode) -> str:
    """Return a valid identifier for the declarations of *subject*.

    ``3DModel`` becomes ``_3DModel``; ``Foo-Bar`` becomes ``Foo_Bar``.
    """
    return _sanitize(subject.name)


def to_enum_name(value: UrlNode) -> str:
    """Return a valid identifier for an enum member named after *value*."""
    return _sanitize(value.name)


# ################
# Implementation
# ################

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


def _sanitize(name: str) -> str:
    sanitized = _INVALID_CHARS.sub("_", name)
    if not sanitized or sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized
