# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of generated declaration bundles.

Bundles are stored as compact JSON files so other printers can consume the
declaration tree without re-running graph construction. The format is
versioned so future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from schemadts.model.declarations import Declaration

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".schemadts.json"


def serialize(declarations: list[Declaration]) -> str:
    """Serialize a declaration bundle to a compact JSON string."""
    payload = {
        "v": ARTIFACT_FORMAT_VERSION,
        "declarations": _ADAPTER.dump_python(declarations, mode="json"),
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def deserialize(data: str) -> list[Declaration]:
    """Deserialize a declaration bundle from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed declarations, in their original order.

    Raises:
        ValueError: If the artifact format version is not recognised or the
            payload does not describe declarations.
    """
    obj = json.loads(data)
    version = obj.get("v") if isinstance(obj, dict) else None
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _ADAPTER.validate_python(obj.get("declarations", []))


def write_artifact(declarations: list[Declaration], path: Path) -> None:
    """Write a declaration bundle to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(declarations), encoding="utf-8")


def read_artifact(path: Path) -> list[Declaration]:
    """Read and deserialize a declaration bundle from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

_ADAPTER: TypeAdapter[list[Declaration]] = TypeAdapter(list[Declaration])
