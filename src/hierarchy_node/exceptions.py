# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HierarchyNode exceptions.

Lookups never raise: a missing id is reported as ``None`` or ``False``.
These exceptions are only raised by nodes built with ``strict=True``.
"""

from __future__ import annotations


class HierarchyNodeError(Exception):
    """Base exception for HierarchyNode errors."""

    pass


class CycleError(HierarchyNodeError):
    """Raised when a node is attached below itself or one of its descendants."""

    pass


class DuplicateNodeError(HierarchyNodeError):
    """Raised when a node is attached twice within the same subtree."""

    pass
