# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: a small but representative Schema.org graph."""

from pathlib import Path

import pytest

SAMPLE_SCHEMA_PATH = Path(__file__).parent / "data" / "schema.nt"
SAMPLE_SCHEMA = SAMPLE_SCHEMA_PATH.read_text(encoding="utf-8")


@pytest.fixture
def sample_schema() -> str:
    return SAMPLE_SCHEMA


@pytest.fixture
def sample_schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.nt"
    path.write_text(SAMPLE_SCHEMA, encoding="utf-8")
    return path
