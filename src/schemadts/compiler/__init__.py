# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator pipeline: graph construction, TypeScript printing and JSON artifacts."""

from schemadts.compiler.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from schemadts.compiler.printer import render, render_declaration, render_type
from schemadts.compiler.transform import GeneratorOptions, build_registry, generate, well_known_builtins

__all__ = [
    "GeneratorOptions",
    "build_registry",
    "generate",
    "well_known_builtins",
    "render",
    "render_declaration",
    "render_type",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
