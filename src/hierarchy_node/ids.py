# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Unique identifier generation for HierarchyNode.

Identifiers follow the textual layout of a random UUID v4::

    xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx

Every ``x`` is a uniform random hex digit, ``4`` is the fixed version nibble
and ``y`` is a variant nibble in ``8..b``. Values are collision-negligible
within a process but are not cryptographically secure.

Example:
    >>> import random
    >>> gen = UniqueIdGenerator(random.Random(42))
    >>> is_unique_id(gen())
    True
"""

from __future__ import annotations

import random
import uuid
from typing import Callable

IdFactory = Callable[[], str]


class UniqueIdGenerator:
    """Callable producing identifiers from a random source.

    Args:
        rng: Random source to draw the 128 bits from. Pass a seeded
            ``random.Random`` to get a reproducible sequence.
            Defaults to a fresh, OS-seeded ``random.Random``.
    """

    __slots__ = ('_rng',)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def __call__(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def __repr__(self) -> str:
        return f"UniqueIdGenerator({self._rng!r})"


_default_generator = UniqueIdGenerator()


def generate_unique_id() -> str:
    """Return a new identifier from the shared process-wide generator."""
    return _default_generator()


def is_unique_id(value: object) -> bool:
    """True if value has the identifier layout produced by this module."""
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return parsed.version == 4 and str(parsed) == value
