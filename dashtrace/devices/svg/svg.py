# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Output Device

This device renders a drawing to an SVG file using Cairo's SVGSurface.
Vector-mode dashes stay vector paths; texture-mode strokes embed the dash
tile as an image pattern.
"""

import cairo

from ..common.cairo_renderer import DrawCallback, render_drawing


def showpage(draw: DrawCallback, width: int, height: int, output_file: str,
             antialias: str = "gray") -> None:
    """
    Render *draw* to an SVG file.

    Args:
        draw: Coroutine function receiving the CairoSurface to trace on
        width: Page width in points
        height: Page height in points
        output_file: Destination path
        antialias: Cairo anti-aliasing mode name
    """
    surface = cairo.SVGSurface(output_file, width, height)
    try:
        cc = cairo.Context(surface)
        render_drawing(draw, cc, width, height, antialias)
    finally:
        surface.finish()
