# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Dashed line tracer.

``DashLine`` is bound to one drawing surface and one configuration. Callers
issue move_to/line_to/curve/shape calls; each call advances the cursor and
the distance travelled in the current subpath and emits zero or more
primitives to the surface. The distance is not reset between connected
segments, so a rectangle's four sides dash as one unbroken line.

Usage:
    dash = DashLine(surface, {"dash": [20, 10], "width": 5})
    dash.rect(100, 100, 300, 200).stroke()

    # texture mode needs the dash tile before drawing
    dash = await DashLine.create(surface, {"use_texture": True})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..core.flatten import DEFAULT_SMOOTHNESS, flatten_cubic, flatten_quadratic
from ..core.geometry import Point, Transform, distance
from ..core.options import DashLineOptions, resolve_options
from ..core.texture_cache import TextureCache, TextureCacheKey
from . import shapes
from .emitters import DrawingSurface, SegmentEmitter, TextureEmitter, TracerState, VectorEmitter


class DashLine:
    """Stateful dashed-outline tracer."""

    def __init__(self, surface: DrawingSurface,
                 options: DashLineOptions | Mapping[str, Any] | None = None,
                 texture_cache: TextureCache | None = None, **overrides: Any) -> None:
        """Bind a tracer to *surface*.

        Args:
            surface: Drawing surface receiving the primitives.
            options: Options mapping or resolved DashLineOptions.
            texture_cache: Tile cache for texture mode; defaults to the
                process-wide cache.
            **overrides: Individual options, e.g. ``width=3``.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        self.surface = surface
        self.options = resolve_options(options, **overrides)
        self.state = TracerState()
        self.texture_cache = texture_cache

        self.emitter: SegmentEmitter
        if self.options.use_texture:
            # stroke style is applied once the tile is available
            self.emitter = TextureEmitter(surface, self.options)
        else:
            self.emitter = VectorEmitter(surface, self.options)
            self.emitter.apply_stroke_style(self.state)

    @classmethod
    async def create(cls, surface: DrawingSurface,
                     options: DashLineOptions | Mapping[str, Any] | None = None,
                     texture_cache: TextureCache | None = None, **overrides: Any) -> DashLine:
        """Construct a tracer and wait until its stroke style is applied.

        Raises:
            ConfigurationError: If the options are invalid.
            TextureUnavailableError: If the dash tile could not be built.
        """
        dash = cls(surface, options, texture_cache, **overrides)
        await dash.set_stroke_style()
        return dash

    @property
    def cursor(self) -> Point:
        return self.state.cursor

    @property
    def line_length(self) -> float:
        return self.state.accumulated_length

    @property
    def scale(self) -> float:
        return self.state.active_scale

    @property
    def use_texture(self) -> bool:
        return self.options.use_texture

    async def set_stroke_style(self) -> None:
        """(Re)apply the dashed stroke style to the surface.

        Call again after the surface's own style was reset externally. In
        texture mode the tile is fetched from (or built into) the cache
        first; until that succeeds, texture-mode segments draw nothing.

        Raises:
            TextureUnavailableError: If the dash tile could not be built.
        """
        if isinstance(self.emitter, TextureEmitter):
            cache = self.texture_cache or TextureCache.get_instance()
            self.emitter.texture = await cache.get_or_build(TextureCacheKey.from_options(self.options))
        self.emitter.apply_stroke_style(self.state)

    # ------- path construction -------

    def move_to(self, x: float, y: float) -> DashLine:
        state = self.state
        state.accumulated_length = 0.0
        state.cursor = Point(x, y)
        state.subpath_start = state.cursor
        state.has_subpath = True
        self.surface.move_to(x, y)
        return self

    def line_to(self, x: float, y: float, close_path: bool = False) -> DashLine:
        """Draw a dashed line from the cursor to ``(x, y)``.

        Args:
            close_path: Mark this edge as closing the subpath. Only honoured
                when ``(x, y)`` is exactly the subpath start.
        """
        state = self.state
        if not state.has_subpath:
            self.move_to(0.0, 0.0)
        target = Point(x, y)
        closed = close_path and target == state.subpath_start
        self.emitter.emit(state, target, closed)
        state.accumulated_length += distance(state.cursor, target)
        state.cursor = target
        return self

    def close_path(self) -> DashLine:
        start = self.state.subpath_start
        return self.line_to(start.x, start.y, close_path=True)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float,
                           smoothness: float | None = None) -> DashLine:
        """Draw a flattened quadratic Bézier curve from the cursor.

        Args:
            smoothness: Flattening tolerance; smaller values give more,
                shorter segments.
        """
        if not self.state.has_subpath:
            self.move_to(0.0, 0.0)
        tolerance = DEFAULT_SMOOTHNESS if smoothness is None else smoothness
        for p in flatten_quadratic(self.state.cursor, Point(cpx, cpy), Point(x, y), tolerance):
            self.line_to(p.x, p.y)
        return self

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float,
                        x: float, y: float, smoothness: float | None = None) -> DashLine:
        """Draw a flattened cubic Bézier curve from the cursor."""
        if not self.state.has_subpath:
            self.move_to(0.0, 0.0)
        tolerance = DEFAULT_SMOOTHNESS if smoothness is None else smoothness
        for p in flatten_cubic(self.state.cursor, Point(cp1x, cp1y), Point(cp2x, cp2y),
                               Point(x, y), tolerance):
            self.line_to(p.x, p.y)
        return self

    def arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float,
            segments: int = shapes.CORNER_SEGMENTS, matrix: Transform | None = None) -> DashLine:
        """Draw a circular arc (angles in radians), connected to the cursor."""
        shapes.arc(self, cx, cy, radius, start_angle, end_angle, segments, matrix)
        return self

    # ------- shapes -------

    def circle(self, x: float, y: float, radius: float, points: int = 80,
               matrix: Transform | None = None) -> DashLine:
        shapes.circle(self, x, y, radius, points, matrix)
        return self

    def ellipse(self, x: float, y: float, radius_x: float, radius_y: float, points: int = 80,
                matrix: Transform | None = None) -> DashLine:
        shapes.ellipse(self, x, y, radius_x, radius_y, points, matrix)
        return self

    def poly(self, points: Iterable[Point | tuple[float, float]],
             matrix: Transform | None = None) -> DashLine:
        shapes.poly(self, points, matrix)
        return self

    def rect(self, x: float, y: float, width: float, height: float,
             matrix: Transform | None = None) -> DashLine:
        shapes.rect(self, x, y, width, height, matrix)
        return self

    def round_rect(self, x: float, y: float, width: float, height: float,
                   corner_radius: float = 10, matrix: Transform | None = None) -> DashLine:
        shapes.round_rect(self, x, y, width, height, corner_radius, matrix)
        return self

    def stroke(self) -> DashLine:
        """Paint everything emitted since the last stroke."""
        self.surface.stroke()
        return self
