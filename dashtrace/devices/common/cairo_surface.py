# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Drawing Surface

Adapts a ``cairo.Context`` to the drawing-surface interface the tracer
emits to. Path primitives accumulate in the context; the pending path is
painted with the current stroke style when ``stroke()`` is called or when
a new style replaces the current one, so texture-mode segments each keep
their own pattern transform.
"""

from __future__ import annotations

import logging

import cairo

from ...tracer.emitters import StrokeStyle
from .cairo_utils import LINE_CAP_MAP, LINE_JOIN_MAP, _safe_rgb

logger = logging.getLogger(__name__)


class CairoSurface:
    """Drawing surface backed by a Cairo context.

    Cairo only strokes centred on the path, so ``StrokeStyle.alignment``
    (0 = inner, 1 = outer) is not honoured: every stroke is drawn centred
    and the first non-centred request is logged at debug level.
    """

    def __init__(self, ctx: cairo.Context) -> None:
        self.ctx = ctx
        self.style: StrokeStyle | None = None
        self._pending = False
        self._alignment_noted = False

    def move_to(self, x: float, y: float) -> None:
        self.ctx.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self.ctx.line_to(x, y)
        self._pending = True

    def close_path(self) -> None:
        self.ctx.close_path()

    def set_stroke_style(self, style: StrokeStyle) -> None:
        """Paint any pending path with the old style, then adopt *style*."""
        if self._pending:
            self.stroke()
        self.style = style
        if style.alignment != 0.5 and not self._alignment_noted:
            # Cairo only strokes centred on the path
            logger.debug("Stroke alignment %.2f is drawn centred on Cairo surfaces", style.alignment)
            self._alignment_noted = True

    def stroke(self) -> None:
        ctx = self.ctx
        style = self.style
        if style is None or not self._pending:
            ctx.new_path()
            self._pending = False
            return

        if style.texture is not None:
            ctx.set_source(style.texture.make_pattern(style.matrix or cairo.Matrix()))
        else:
            r, g, b = _safe_rgb(style.color)
            ctx.set_source_rgba(r, g, b, style.alpha)
        ctx.set_line_cap(LINE_CAP_MAP.get(style.cap, cairo.LINE_CAP_BUTT))
        ctx.set_line_join(LINE_JOIN_MAP.get(style.join, cairo.LINE_JOIN_MITER))
        ctx.set_line_width(style.width)
        ctx.stroke()
        self._pending = False
