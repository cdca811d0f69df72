# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Dashed line configuration.

``DashLineOptions`` is the resolved, immutable configuration of one tracer.
Callers may pass ``None``, a mapping of option names, or an existing
``DashLineOptions``; anything not supplied falls back to the defaults.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from . import error
from .dash_pattern import DashPattern

LINE_CAPS = frozenset({"butt", "round", "square"})
LINE_JOINS = frozenset({"bevel", "miter", "round"})


@dataclass(frozen=True)
class DashLineOptions:
    """Resolved stroke configuration.

    Attributes:
        dash: Alternating draw/gap lengths, starting with a draw.
        width: Stroke width before scaling.
        color: 0xRRGGBB colour.
        alpha: Opacity in [0, 1].
        scale: Multiplier for dash lengths and width; use ``1 / zoom`` to keep
            on-screen dash density constant while zooming.
        use_texture: Draw each segment as one textured stroke instead of
            discrete dash primitives.
        cap: Line cap name, vector mode only.
        join: Line join name, vector mode only.
        alignment: 0 = inner, 0.5 = centred, 1 = outer.
        offset: Phase shift added to the travelled distance.
    """
    dash: tuple[float, ...] = (10.0, 5.0)
    width: float = 1.0
    color: int = 0xFFFFFF
    alpha: float = 1.0
    scale: float = 1.0
    use_texture: bool = False
    cap: str | None = None
    join: str | None = None
    alignment: float = 0.5
    offset: float = 0.0
    pattern: DashPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # DashPattern validates the lengths
        pattern = DashPattern(self.dash)
        object.__setattr__(self, "dash", pattern.entries)
        object.__setattr__(self, "pattern", pattern)

        _check_number("width", self.width, minimum=0.0)
        _check_number("alpha", self.alpha, minimum=0.0, maximum=1.0)
        _check_number("alignment", self.alignment, minimum=0.0, maximum=1.0)
        _check_number("offset", self.offset)
        _check_number("scale", self.scale)
        if self.scale <= 0:
            error.e(error.RANGECHECK, "DashLineOptions", f"scale must be positive, got {self.scale!r}")
        if isinstance(self.color, bool) or not isinstance(self.color, int) or not 0 <= self.color <= 0xFFFFFF:
            error.e(error.RANGECHECK, "DashLineOptions", f"color must be an int in 0..0xFFFFFF, got {self.color!r}")
        if self.cap is not None and self.cap not in LINE_CAPS:
            error.e(error.CONFIGURATIONERROR, "DashLineOptions",
                    f"cap must be one of {sorted(LINE_CAPS)}, got {self.cap!r}")
        if self.join is not None and self.join not in LINE_JOINS:
            error.e(error.CONFIGURATIONERROR, "DashLineOptions",
                    f"join must be one of {sorted(LINE_JOINS)}, got {self.join!r}")
        object.__setattr__(self, "use_texture", bool(self.use_texture))

    @property
    def scaled_width(self) -> float:
        return self.width * self.scale

    def replace(self, **changes: Any) -> DashLineOptions:
        """Return a copy with *changes* applied and re-validated."""
        return dataclasses.replace(self, **changes)


_OPTION_NAMES = frozenset(f.name for f in dataclasses.fields(DashLineOptions) if f.init)


def _check_number(name: str, value: Any, minimum: float | None = None,
                  maximum: float | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        error.e(error.TYPECHECK, "DashLineOptions", f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        error.e(error.RANGECHECK, "DashLineOptions", f"{name} must be finite, got {value!r}")
    if minimum is not None and value < minimum:
        error.e(error.RANGECHECK, "DashLineOptions", f"{name} must be >= {minimum}, got {value!r}")
    if maximum is not None and value > maximum:
        error.e(error.RANGECHECK, "DashLineOptions", f"{name} must be <= {maximum}, got {value!r}")


def resolve_options(options: DashLineOptions | Mapping[str, Any] | None = None,
                    **overrides: Any) -> DashLineOptions:
    """Merge caller options over the defaults.

    Args:
        options: ``None``, a mapping of option names, or resolved options.
        **overrides: Individual options taking precedence over *options*.

    Returns:
        Validated DashLineOptions.

    Raises:
        ConfigurationError: On unknown option names or invalid values.
    """
    if isinstance(options, DashLineOptions):
        return options.replace(**overrides) if overrides else options

    merged: dict[str, Any] = dict(options or {})
    merged.update(overrides)
    unknown = set(merged) - _OPTION_NAMES
    if unknown:
        error.e(error.CONFIGURATIONERROR, "resolve_options", f"unknown option(s): {', '.join(sorted(unknown))}")
    # a None value means "use the default", as with an omitted key
    return DashLineOptions(**{k: v for k, v in merged.items() if v is not None})
