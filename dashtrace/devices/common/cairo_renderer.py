# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Runs a drawing callback against a Cairo context for the output devices
(PNG, SVG, PDF, TIFF).

Device implementations should:
1. Create a Cairo surface and context
2. Call render_drawing() with the caller's draw callback
3. Finalize output (write to file, finish the surface, etc.)
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import cairo

from .cairo_surface import CairoSurface
from .cairo_utils import ANTIALIAS_MAP

DrawCallback = Callable[[CairoSurface], Awaitable[None]]

# Anti-aliasing mode for Cairo rendering.
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY


def render_drawing(draw: DrawCallback, cairo_ctx: cairo.Context, width: int, height: int,
                   antialias: str = "gray", background: tuple[float, float, float] | None = (1.0, 1.0, 1.0)) -> None:
    """
    Render *draw* to a Cairo context.

    Args:
        draw: Coroutine function receiving the CairoSurface to trace on.
        cairo_ctx: Cairo context to render to
        width: Page width in device units
        height: Page height in device units
        antialias: Key into ANTIALIAS_MAP
        background: RGB fill painted first, or None for a transparent page
    """
    if background is not None:
        cairo_ctx.set_source_rgb(*background)
        cairo_ctx.rectangle(0, 0, width, height)
        cairo_ctx.fill()

    cairo_ctx.set_antialias(ANTIALIAS_MAP.get(antialias, ANTIALIAS_MODE))

    surface = CairoSurface(cairo_ctx)
    asyncio.run(draw(surface))
    # paint whatever the callback left pending
    surface.stroke()
