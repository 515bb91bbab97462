# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generate TypeScript type definitions from Schema.org class graphs."""

__version__ = "0.1.0"
