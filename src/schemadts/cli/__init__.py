# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for schemadts."""
