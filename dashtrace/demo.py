# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Sample sheet.

Draws one of each shape the tracer supports so vector and texture modes
can be compared side by side. ``zoom`` emulates a viewport zoom: the
scaling rectangle uses ``scale = 1 / zoom`` so its on-screen dash size
stays constant.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import cairo

from .core.texture_cache import TextureCache
from .devices.common.cairo_surface import CairoSurface
from .tracer.dash_line import DashLine


@dataclass(frozen=True)
class SheetSettings:
    width: int = 1024
    height: int = 768
    use_texture: bool = False
    zoom: float = 1.0


class SampleSheet:
    """Async draw callback for the output devices."""

    def __init__(self, settings: SheetSettings, texture_cache: TextureCache | None = None) -> None:
        self.settings = settings
        self.texture_cache = texture_cache

    async def _dash(self, surface: CairoSurface, **options) -> DashLine:
        options.setdefault("use_texture", self.settings.use_texture)
        return await DashLine.create(surface, options, texture_cache=self.texture_cache)

    async def __call__(self, surface: CairoSurface) -> None:
        s = self.settings
        x2 = s.width - 100
        y2 = s.height - 100
        cx = s.width / 2
        cy = s.height / 2

        # outline size remains constant when zooming
        dash = await self._dash(surface, dash=[20, 10], width=5, scale=1 / s.zoom, color=0)
        dash.rect(100, 100, x2 - 100, y2 - 100).stroke()

        # cap and join only apply in vector mode
        dash = await self._dash(surface, dash=[20, 5], width=3, color=0xAA00AA, cap="round", join="round")
        dash.rect(150, 150, x2 - 200, y2 - 200).stroke()

        dash = await self._dash(surface, dash=[10, 5], width=3, color=0x0000AA)
        dash.circle(cx, cy, 100).stroke()

        dash = await self._dash(surface, dash=[10, 5], width=0.5, color=0xAA00AA)
        dash.circle(cx, cy, 5).stroke()

        dash = await self._dash(surface, dash=[3, 3], width=3, color=0x00AA00)
        dash.ellipse(cx, cy, 300, 200).stroke()

        size = 20
        dash = await self._dash(surface, width=2, color=0xAA0000)
        dash.poly([(cx, cy - size), (cx - size, cy + size), (cx + size, cy + size), (cx, cy - size)]).stroke()

        dash = await self._dash(surface, dash=[12, 4, 2, 4], width=2, color=0x006666)
        dash.round_rect(cx - 150, cy - 60, 300, 120, 24).stroke()

        # rotated square, transformed point by point
        matrix = cairo.Matrix()
        matrix.translate(cx + 220, cy - 180)
        matrix.rotate(math.pi / 8)
        dash = await self._dash(surface, dash=[8, 4], width=2, color=0x884400)
        dash.rect(-30, -30, 60, 60, matrix=matrix).stroke()

        dash = await self._dash(surface, dash=[6, 4], width=2, color=0x333333)
        dash.move_to(160, y2 - 40).quadratic_curve_to(cx, y2 - 200, s.width - 160, y2 - 40)
        dash.move_to(160, 200).bezier_curve_to(cx - 100, 40, cx + 100, 360, s.width - 160, 200)
        dash.stroke()
