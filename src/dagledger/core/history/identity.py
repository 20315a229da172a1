# src/dagledger/core/history/identity.py
"""Run-local edge identifiers."""

from __future__ import annotations

import itertools

from dagledger.contracts import EdgeID


class EdgeIdAssigner:
    """Hands out edge identifiers unique within one conversion.

    One instance belongs to exactly one conversion call. Identifiers are
    decimal strings starting at "1"; two assigners never coordinate, so
    independent conversions may run concurrently and will reuse values.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def next_id(self) -> EdgeID:
        """Return a fresh identifier, never repeated by this assigner."""
        return EdgeID(str(next(self._counter)))
