# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DashTrace Package - Public API

Dashed outlines (lines, arcs, curves, polygons, rounded rectangles) drawn
on a surface that only knows continuous strokes.

**Usage:**
```python
import cairo
from dashtrace import CairoSurface, DashLine

ctx = cairo.Context(cairo.ImageSurface(cairo.FORMAT_ARGB32, 400, 300))
dash = DashLine(CairoSurface(ctx), {"dash": [20, 10], "width": 3, "color": 0x0000AA})
dash.round_rect(20, 20, 360, 260, 16).stroke()
```
"""

from .core.dash_pattern import DashPattern
from .core.error import ConfigurationError, DashTraceError, TextureUnavailableError
from .core.flatten import DEFAULT_SMOOTHNESS, flatten_cubic, flatten_quadratic
from .core.geometry import Point, points_from_flat
from .core.options import DashLineOptions, resolve_options
from .core.texture_cache import TextureCache, TextureCacheKey
from .devices.common.cairo_surface import CairoSurface
from .tracer.dash_line import DashLine
from .tracer.emitters import StrokeStyle, TextureEmitter, TracerState, VectorEmitter

__all__ = [
    "CairoSurface",
    "ConfigurationError",
    "DEFAULT_SMOOTHNESS",
    "DashLine",
    "DashLineOptions",
    "DashPattern",
    "DashTraceError",
    "Point",
    "StrokeStyle",
    "TextureCache",
    "TextureCacheKey",
    "TextureEmitter",
    "TextureUnavailableError",
    "TracerState",
    "VectorEmitter",
    "flatten_cubic",
    "flatten_quadratic",
    "points_from_flat",
    "resolve_options",
]
