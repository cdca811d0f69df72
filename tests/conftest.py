# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared fixtures: a recording drawing surface and fake texture builders."""

import math

import pytest

from dashtrace.core.texture_cache import TextureCache


class RecordingSurface:
    """Drawing surface that records every primitive call."""

    def __init__(self):
        self.calls = []

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def close_path(self):
        self.calls.append(("close_path",))

    def set_stroke_style(self, style):
        self.calls.append(("set_stroke_style", style))

    def stroke(self):
        self.calls.append(("stroke",))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]

    def path_calls(self):
        """move_to/line_to calls as (kind, x, y)."""
        return [c for c in self.calls if c[0] in ("move_to", "line_to")]

    def styles(self):
        return [c[1] for c in self.calls if c[0] == "set_stroke_style"]

    def clear(self):
        self.calls.clear()


def dash_runs(calls):
    """Collapse path calls into pen-down intervals measured along the path.

    Distances accumulate between consecutive recorded points, so corner
    points split a run but do not end it.

    Returns:
        List of (start, end) arc-length intervals where the pen was down.
    """
    runs = []
    s = 0.0
    prev = None
    current = None
    for kind, x, y in calls:
        if prev is not None:
            s += math.hypot(x - prev[0], y - prev[1])
        if kind == "line_to":
            if current is None:
                current = [s - math.hypot(x - prev[0], y - prev[1]), s]
            else:
                current[1] = s
        else:
            if current is not None:
                runs.append(tuple(current))
                current = None
        prev = (x, y)
    if current is not None:
        runs.append(tuple(current))
    return runs


class FakeTexture:
    """Stand-in for a rasterised tile."""

    def __init__(self, key):
        self.key = key


class CountingBuilder:
    """Async builder that yields to the loop and counts invocations."""

    def __init__(self, fail=None):
        self.calls = 0
        self.fail = fail

    async def __call__(self, key):
        import asyncio

        self.calls += 1
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        if self.fail is not None:
            raise self.fail
        return FakeTexture(key)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def builder():
    return CountingBuilder()


@pytest.fixture
def texture_cache(builder):
    return TextureCache(builder=builder)
