# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Dash Tile Rasterisation

Renders one period of a dash pattern into a small ARGB surface that Cairo
can repeat along a stroke. The tile is ``ceil(period)`` pixels wide and
``ceil(width)`` pixels tall; draw entries are stroked along its horizontal
centre line and gap entries are left transparent.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass

import cairo

from ...core import error
from ...core.texture_cache import TextureCacheKey
from .cairo_utils import _safe_rgb

# Cap tile size to avoid memory issues
MAX_TILE_SIZE = 4096


@dataclass(frozen=True)
class TiledBitmap:
    """A rasterised dash tile.

    ``period`` and ``height`` are in pattern units; the surface may be a few
    pixels larger because its size is rounded up.
    """
    surface: cairo.ImageSurface
    period: float
    height: float

    @property
    def pixel_width(self) -> int:
        return self.surface.get_width()

    @property
    def pixel_height(self) -> int:
        return self.surface.get_height()

    def make_pattern(self, texture_matrix: cairo.Matrix) -> cairo.SurfacePattern:
        """Create a repeating source for a stroke.

        Args:
            texture_matrix: Maps pattern units (x along the dash, y across
                it) to user space.
        """
        pattern = cairo.SurfacePattern(self.surface)
        pattern.set_extend(cairo.EXTEND_REPEAT)
        pattern.set_filter(cairo.FILTER_NEAREST)

        # Cairo pattern matrices map user space to pattern surface space:
        # invert the texture transform, then scale pattern units to pixels
        user_to_texture = texture_matrix.multiply(cairo.Matrix())
        user_to_texture.invert()
        # the dash centre line sits halfway down the tile
        to_pixels = cairo.Matrix(xx=self.pixel_width / self.period, y0=self.height / 2)
        pattern.set_matrix(user_to_texture.multiply(to_pixels))
        return pattern


def rasterize_dash_tile(key: TextureCacheKey) -> TiledBitmap:
    """Rasterise one period of *key*'s pattern.

    Raises:
        TextureUnavailableError: If the tile is too large or Cairo cannot
            allocate a surface.
    """
    period = sum(key.dash)
    height = max(key.width, 1.0)
    tile_w = max(1, math.ceil(period))
    tile_h = max(1, math.ceil(height))
    if tile_w > MAX_TILE_SIZE or tile_h > MAX_TILE_SIZE:
        error.e(error.LIMITCHECK, "rasterize_dash_tile",
                f"tile {tile_w}x{tile_h} exceeds {MAX_TILE_SIZE}px")

    try:
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, tile_w, tile_h)
        ctx = cairo.Context(surface)
    except (cairo.Error, MemoryError) as exc:
        raise error.TextureUnavailableError(error.UNDEFINEDRESOURCE, "rasterize_dash_tile",
                                            f"did not get a Cairo context: {exc}") from exc

    r, g, b = _safe_rgb(key.color)
    ctx.set_source_rgba(r, g, b, key.alpha)
    ctx.set_line_width(height)
    ctx.set_line_cap(cairo.LINE_CAP_BUTT)

    # stretch one period across the whole (rounded up) tile width
    ctx.scale(tile_w / period, 1.0)
    x = 0.0
    y = height / 2
    ctx.move_to(x, y)
    for i in range(0, len(key.dash), 2):
        x += key.dash[i]
        ctx.line_to(x, y)
        if i + 1 < len(key.dash):
            x += key.dash[i + 1]
            ctx.move_to(x, y)
    ctx.stroke()
    surface.flush()

    return TiledBitmap(surface=surface, period=period, height=height)


async def build_tiled_bitmap(key: TextureCacheKey) -> TiledBitmap:
    """Rasterise a dash tile off the event loop thread."""
    return await asyncio.to_thread(rasterize_dash_tile, key)
