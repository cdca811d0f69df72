# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Segment emitters: turn one straight segment into surface primitives.

Two strategies share one interface and are chosen once per tracer:

1. VectorEmitter slices the segment into alternating line/move calls so
   the dash phase carries over from the previous segment. A segment that
   closes the subpath stops one final gap short of the start point so the
   seam lines up with the pattern.
2. TextureEmitter draws the segment as one continuous stroke whose source
   is a repeating dash tile. The tile origin is re-anchored for every
   segment so the pattern flows across joints without resetting.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Protocol

import cairo

from ..core.dash_pattern import DashPattern
from ..core.geometry import Point, distance
from ..core.options import DashLineOptions

# Segments shorter than this carry no direction
_MIN_SEGMENT = 1e-12

# Rounding slack when a closing stride is tested against the start point
_SEAM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class StrokeStyle:
    """Stroke state handed to the drawing surface.

    ``texture`` is a tiled bitmap and ``matrix`` maps its pattern units
    (x along the dash, y across it) to user space; both are None in vector
    mode, where ``cap``/``join`` apply instead.
    """
    width: float
    color: int
    alpha: float
    alignment: float = 0.5
    cap: str | None = None
    join: str | None = None
    texture: Any = None
    matrix: cairo.Matrix | None = None


class DrawingSurface(Protocol):
    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def set_stroke_style(self, style: StrokeStyle) -> None: ...

    def stroke(self) -> None: ...


@dataclass
class TracerState:
    """Mutable cursor bookkeeping for one tracer.

    ``accumulated_length`` is the distance travelled since the last
    ``move_to``; it indexes the dash pattern together with the offset.
    """
    cursor: Point = field(default_factory=Point)
    subpath_start: Point = field(default_factory=Point)
    accumulated_length: float = 0.0
    active_scale: float = 1.0
    has_subpath: bool = False


class SegmentEmitter:
    """Base strategy: knows the surface and the resolved options."""

    def __init__(self, surface: DrawingSurface, options: DashLineOptions) -> None:
        self.surface = surface
        self.options = options
        self.pattern: DashPattern = options.pattern

    def base_style(self) -> StrokeStyle:
        options = self.options
        return StrokeStyle(
            width=options.scaled_width,
            color=options.color,
            alpha=options.alpha,
            alignment=options.alignment,
        )

    def apply_stroke_style(self, state: TracerState) -> None:
        raise NotImplementedError

    def emit(self, state: TracerState, target: Point, closed: bool) -> None:
        """Draw from ``state.cursor`` to *target*; the caller advances state."""
        raise NotImplementedError


class VectorEmitter(SegmentEmitter):
    """Discrete dash primitives: line_to for draws, move_to for gaps."""

    def apply_stroke_style(self, state: TracerState) -> None:
        style = dataclasses.replace(self.base_style(), cap=self.options.cap, join=self.options.join)
        self.surface.set_stroke_style(style)
        state.active_scale = self.options.scale

    def emit(self, state: TracerState, target: Point, closed: bool) -> None:
        start = state.cursor
        length = distance(start, target)
        if length < _MIN_SEGMENT:
            return

        surface = self.surface
        pattern = self.pattern
        scale = self.options.scale
        cos = (target.x - start.x) / length
        sin = (target.y - start.y) / length
        sx, sy = state.subpath_start.x, state.subpath_start.y

        # find the first part of the dash for this line, taking offset into account
        dash_index, dash_start = pattern.locate(state.accumulated_length, scale, self.options.offset)

        x0, y0 = start.x, start.y
        remaining = length
        while remaining > 0:
            dash_size = pattern[dash_index] * scale - dash_start
            dist = remaining if remaining < dash_size else dash_size

            if closed:
                # this stride reaches the start point
                to_start = math.hypot(x0 - sx, y0 - sy)
                if to_start <= dist + _SEAM_TOLERANCE:
                    if pattern.is_draw(dash_index):
                        # stop one final gap short of the start so the seam
                        # continues the pattern instead of doubling a dash
                        last_dash = min(dist, to_start - pattern.last_gap * scale)
                        if last_dash > 0:
                            surface.line_to(x0 + cos * last_dash, y0 + sin * last_dash)
                    break

            x0 += cos * dist
            y0 += sin * dist
            if pattern.is_draw(dash_index):
                surface.line_to(x0, y0)
            else:
                surface.move_to(x0, y0)
            remaining -= dist

            dash_index = pattern.next_index(dash_index)
            dash_start = 0.0


class TextureEmitter(SegmentEmitter):
    """One textured stroke per segment, tile origin tracked by distance."""

    def __init__(self, surface: DrawingSurface, options: DashLineOptions) -> None:
        super().__init__(surface, options)
        self.texture: Any = None

    def apply_stroke_style(self, state: TracerState) -> None:
        if self.texture is None:
            return
        self.surface.set_stroke_style(dataclasses.replace(self.base_style(), texture=self.texture))
        state.active_scale = self.options.scale

    def pattern_transform(self, state: TracerState, angle: float) -> cairo.Matrix:
        """Texture-to-user transform: rotate, then scale, then translate.

        The translation puts the tile origin ``accumulated_length + offset``
        behind the cursor along the segment, so the cursor samples the
        pattern at the current phase.
        """
        scale = state.active_scale
        cos = math.cos(angle)
        sin = math.sin(angle)
        texture_start = -(state.accumulated_length + self.options.offset)
        return cairo.Matrix(
            xx=scale * cos, yx=scale * sin,
            xy=-scale * sin, yy=scale * cos,
            x0=state.cursor.x + texture_start * cos,
            y0=state.cursor.y + texture_start * sin,
        )

    def emit(self, state: TracerState, target: Point, closed: bool) -> None:
        # no tile yet (still building, or the build failed): nothing to draw
        if self.texture is None:
            return
        start = state.cursor
        length = distance(start, target)
        if length < _MIN_SEGMENT:
            return

        surface = self.surface
        angle = math.atan2(target.y - start.y, target.x - start.x)
        surface.set_stroke_style(dataclasses.replace(
            self.base_style(), texture=self.texture, matrix=self.pattern_transform(state, angle)))
        surface.move_to(start.x, start.y)

        if closed and len(self.pattern) % 2 == 0:
            gap = min(self.pattern.last_gap * state.active_scale, length)
            surface.line_to(target.x - math.cos(angle) * gap, target.y - math.sin(angle) * gap)
            surface.close_path()
        else:
            surface.line_to(target.x, target.y)
