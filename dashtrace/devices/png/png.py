# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

This device renders a drawing to a PNG image file using Cairo.
It uses the shared cairo_renderer module.
"""

import cairo

from ..common.cairo_renderer import DrawCallback, render_drawing


def showpage(draw: DrawCallback, width: int, height: int, output_file: str,
             antialias: str = "gray") -> None:
    """
    Render *draw* to a PNG file.

    Args:
        draw: Coroutine function receiving the CairoSurface to trace on
        width: Image width in pixels
        height: Image height in pixels
        output_file: Destination path
        antialias: Cairo anti-aliasing mode name
    """
    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, width, height)
    cc = cairo.Context(surface)
    cc.identity_matrix()

    render_drawing(draw, cc, width, height, antialias)

    surface.write_to_png(output_file)
