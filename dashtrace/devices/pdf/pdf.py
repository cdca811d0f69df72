# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

This module renders a drawing to a single-page PDF file using Cairo's
PDFSurface. Device units map 1:1 to PDF points.
"""

import cairo

from ..common.cairo_renderer import DrawCallback, render_drawing


def showpage(draw: DrawCallback, width: int, height: int, output_file: str,
             antialias: str = "gray") -> None:
    """
    Render *draw* to a PDF file.

    Args:
        draw: Coroutine function receiving the CairoSurface to trace on
        width: Page width in points
        height: Page height in points
        output_file: Destination path
        antialias: Cairo anti-aliasing mode name
    """
    surface = cairo.PDFSurface(output_file, width, height)
    try:
        cc = cairo.Context(surface)
        render_drawing(draw, cc, width, height, antialias)
        cc.show_page()
    finally:
        surface.finish()
