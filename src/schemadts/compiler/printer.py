# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Prints declarations as TypeScript source text."""

from __future__ import annotations

import json

from schemadts.model.declarations import Declaration, EnumDeclaration
from schemadts.model.types import (
    IntersectionType,
    ParenthesizedType,
    StringLiteral,
    TypeLiteral,
    TypeNode,
    TypeReference,
    UnionType,
)

# ###############
# Public Interface
# ###############

INDENT = "    "


def render(declarations: list[Declaration]) -> str:
    """Render *declarations* as one TypeScript module, separated by blank lines."""
    return "\n".join(render_declaration(d) for d in declarations)


def render_declaration(declaration: Declaration) -> str:
    """Render a single declaration, including its JSDoc comment, ending in a newline."""
    lines: list[str] = []
    if declaration.comment:
        lines.extend(_jsdoc(declaration.comment, ""))
    export = "export " if declaration.exported else ""
    if isinstance(declaration, EnumDeclaration):
        lines.append(f"{export}enum {declaration.name} {{")
        for member in declaration.members:
            if member.comment:
                lines.extend(_jsdoc(member.comment, INDENT))
            lines.append(f"{INDENT}{member.name} = {_quote(member.value)},")
        lines.append("}")
    else:
        lines.append(f"{export}type {declaration.name} = {render_type(declaration.type)};")
    return "\n".join(lines) + "\n"


def render_type(node: TypeNode, depth: int = 0) -> str:
    """Render a type expression. *depth* is the nesting level of enclosing records."""
    if isinstance(node, TypeReference):
        return node.name
    if isinstance(node, StringLiteral):
        return _quote(node.value)
    if isinstance(node, UnionType):
        return " | ".join(render_type(t, depth) for t in node.types)
    if isinstance(node, IntersectionType):
        return " & ".join(render_type(t, depth) for t in node.types)
    if isinstance(node, ParenthesizedType):
        return f"({render_type(node.type, depth)})"
    return _render_record(node, depth)


# ################
# Implementation
# ################


def _render_record(node: TypeLiteral, depth: int) -> str:
    if not node.members:
        return "{}"
    inner = INDENT * (depth + 1)
    lines = ["{"]
    for member in node.members:
        if member.comment:
            lines.extend(_jsdoc(member.comment, inner))
        optional = "?" if member.optional else ""
        lines.append(f"{inner}{_quote(member.name)}{optional}: {render_type(member.type, depth + 1)};")
    lines.append(INDENT * depth + "}")
    return "\n".join(lines)


def _jsdoc(comment: str, indent: str) -> list[str]:
    body = comment.replace("*/", "*\\/").splitlines() or [""]
    if len(body) == 1:
        return [f"{indent}/** {body[0]} */"]
    lines = [f"{indent}/**"]
    lines.extend(f"{indent} * {line}".rstrip() for line in body)
    lines.append(f"{indent} */")
    return lines


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)
