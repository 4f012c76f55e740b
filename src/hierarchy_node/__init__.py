# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hierarchy-Node - A generic in-memory tree container.

A lightweight, zero-dependency library providing a tree node that owns its
children, addresses nodes by generated unique ids and carries arbitrary
caller metadata.
"""

__version__ = "0.1.0"

from .exceptions import (
    CycleError,
    DuplicateNodeError,
    HierarchyNodeError,
)
from .ids import UniqueIdGenerator, generate_unique_id, is_unique_id
from .node import HierarchyNode

__all__ = [
    # Core classes
    "HierarchyNode",
    # Identifiers
    "UniqueIdGenerator",
    "generate_unique_id",
    "is_unique_id",
    # Exceptions
    "HierarchyNodeError",
    "CycleError",
    "DuplicateNodeError",
]
