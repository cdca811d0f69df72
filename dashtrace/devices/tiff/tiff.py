# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
TIFF Output Device

Renders a drawing to a TIFF image file using Cairo for rendering and
Pillow for TIFF encoding.
"""

import cairo
from PIL import Image

from ..common.cairo_renderer import DrawCallback, render_drawing


def _cairo_surface_to_pil(surface: cairo.ImageSurface) -> Image.Image:
    """Convert a Cairo ImageSurface to a PIL Image.

    Uses direct buffer access (no PNG round-trip).

    Args:
        surface: Cairo RGB24 image surface.

    Returns:
        PIL Image in RGB mode.
    """
    surface.flush()
    width = surface.get_width()
    height = surface.get_height()
    buf = surface.get_data()

    # Cairo FORMAT_RGB24 stores as BGRX (32-bit, X=unused alpha)
    img = Image.frombuffer("RGBA", (width, height), bytes(buf), "raw", "BGRA", surface.get_stride(), 1)
    return img.convert("RGB")


def showpage(draw: DrawCallback, width: int, height: int, output_file: str,
             antialias: str = "gray", dpi: tuple[float, float] = (72.0, 72.0)) -> None:
    """Render *draw* to a TIFF file.

    Args:
        draw: Coroutine function receiving the CairoSurface to trace on.
        width: Image width in pixels.
        height: Image height in pixels.
        output_file: Destination path.
        antialias: Cairo anti-aliasing mode name.
        dpi: Resolution written to the TIFF metadata.
    """
    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, width, height)
    cc = cairo.Context(surface)
    cc.identity_matrix()

    render_drawing(draw, cc, width, height, antialias)

    img = _cairo_surface_to_pil(surface)
    img.save(output_file, format="TIFF", compression="tiff_lzw", dpi=dpi)
