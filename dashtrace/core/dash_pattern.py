# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Dash pattern and phase tracking.

A pattern is an alternating sequence of draw and gap lengths starting with
a draw: even indices draw, odd indices lift the pen. The period is the sum
of all entries. ``locate`` maps a travelled distance onto the pattern so a
line can resume mid-dash where the previous segment stopped.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real

from . import error


class DashPattern:
    """Immutable, validated dash/gap sequence."""

    __slots__ = ("_entries", "_period")

    def __init__(self, entries: Iterable[float]) -> None:
        values = tuple(entries)
        if not values:
            error.e(error.RANGECHECK, "DashPattern", "dash pattern must contain at least one length")
        for i, v in enumerate(values):
            if isinstance(v, bool) or not isinstance(v, Real):
                error.e(error.TYPECHECK, "DashPattern", f"entry {i} is not a number: {v!r}")
            if not math.isfinite(v) or v <= 0:
                error.e(error.RANGECHECK, "DashPattern", f"entry {i} must be a positive length, got {v!r}")
        self._entries = tuple(float(v) for v in values)
        self._period = sum(self._entries)

    @property
    def entries(self) -> tuple[float, ...]:
        return self._entries

    @property
    def period(self) -> float:
        return self._period

    @property
    def last_gap(self) -> float:
        """Length of the final gap entry, 0 for a single-entry (solid) pattern."""
        if len(self._entries) < 2:
            return 0.0
        if len(self._entries) % 2 == 0:
            return self._entries[-1]
        return self._entries[-2]

    @property
    def key(self) -> str:
        """Stable serialisation of the raw (unscaled) lengths."""
        return ",".join(repr(v) for v in self._entries)

    @staticmethod
    def is_draw(index: int) -> bool:
        return index % 2 == 0

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> float:
        return self._entries[index]

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DashPattern):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"DashPattern({list(self._entries)!r})"

    def next_index(self, index: int) -> int:
        index += 1
        return 0 if index == len(self._entries) else index

    def locate(self, distance: float, scale: float = 1.0, offset: float = 0.0) -> tuple[int, float]:
        """Find the pattern entry containing a travelled distance.

        Entries cover half-open intervals ``[start, start + length)``, so a
        distance landing exactly on a boundary belongs to the entry that
        starts there.

        Args:
            distance: Distance travelled since the subpath started.
            scale: Multiplier applied to every entry.
            offset: Phase shift added to *distance*.

        Returns:
            ``(index, offset_within_entry)`` with
            ``0 <= offset_within_entry < self[index] * scale``.
        """
        scaled_period = self._period * scale
        place = (distance + offset) % scaled_period
        # float modulo of a tiny negative value can round up to the divisor
        if place >= scaled_period:
            place = 0.0

        dash_x = 0.0
        for i, length in enumerate(self._entries):
            dash_size = length * scale
            if place < dash_x + dash_size:
                return i, place - dash_x
            dash_x += dash_size
        # accumulated rounding pushed place past the last boundary
        return 0, 0.0
