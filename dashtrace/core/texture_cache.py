# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Dash Texture Cache

Texture-mode strokes tile a small bitmap holding one period of the dash
pattern. Building that bitmap is asynchronous, so the cache tracks both
finished bitmaps and builds still in flight: concurrent requests for the
same key share one build.

Cache Key Design:
- dash: raw (unscaled) pattern lengths
- width, color, alpha: the tile is rasterised with these, so lines that
  differ in any of them need their own bitmap

Entries are written once and never evicted.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from . import error
from .options import DashLineOptions

logger = logging.getLogger(__name__)

TextureBuilder = Callable[["TextureCacheKey"], Awaitable[Any]]


@dataclass(frozen=True)
class TextureCacheKey:
    """Unique identifier for a dash tile.

    Frozen so it hashes by value and can key a dict.
    """
    dash: tuple[float, ...]
    width: float
    color: int
    alpha: float

    @classmethod
    def from_options(cls, options: DashLineOptions) -> TextureCacheKey:
        return cls(options.pattern.entries, float(options.width), options.color, float(options.alpha))


class TextureCache:
    """Write-once cache of dash tiles with in-flight build deduplication.

    Thread Safety: not thread-safe. All access happens from the event loop
    driving the tracer.
    """

    _instance = None

    def __init__(self, builder: TextureBuilder | None = None) -> None:
        """Create an empty cache.

        Args:
            builder: Coroutine function turning a TextureCacheKey into a
                bitmap. Defaults to the Cairo tile rasteriser.
        """
        self._builder = builder
        self._bitmaps: dict[TextureCacheKey, Any] = {}
        self._pending: dict[TextureCacheKey, asyncio.Future] = {}
        self._hits = 0
        self._misses = 0
        self._builds = 0

    @classmethod
    def get_instance(cls) -> TextureCache:
        """Return the process-wide cache."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, key: TextureCacheKey) -> Any | None:
        bitmap = self._bitmaps.get(key)
        if bitmap is None:
            self._misses += 1
        else:
            self._hits += 1
        return bitmap

    def put(self, key: TextureCacheKey, bitmap: Any) -> None:
        self._bitmaps[key] = bitmap

    async def get_or_build(self, key: TextureCacheKey) -> Any:
        """Return the bitmap for *key*, building it on first use.

        Raises:
            TextureUnavailableError: If the build failed. Nothing is cached
                for the key, so a later call retries.
        """
        bitmap = self.get(key)
        if bitmap is not None:
            return bitmap

        future = self._pending.get(key)
        if future is None:
            future = asyncio.ensure_future(self._build(key))
            self._pending[key] = future
        return await asyncio.shield(future)

    async def _build(self, key: TextureCacheKey) -> Any:
        builder = self._builder
        if builder is None:
            from ..devices.common.cairo_texture import build_tiled_bitmap
            builder = build_tiled_bitmap
        try:
            self._builds += 1
            bitmap = await builder(key)
        except error.DashTraceError:
            logger.warning("Could not build dash texture for %s", key)
            raise
        except Exception as exc:
            logger.warning("Could not build dash texture for %s: %s", key, exc)
            raise error.TextureUnavailableError(error.UNDEFINEDRESOURCE, "TextureCache", str(exc)) from exc
        finally:
            self._pending.pop(key, None)

        if bitmap is None:
            error.e(error.UNDEFINEDRESOURCE, "TextureCache", f"builder returned no bitmap for {key}")
        self.put(key, bitmap)
        logger.debug("Built dash texture %s", key)
        return bitmap

    def clear(self) -> None:
        """Drop every finished bitmap and reset the counters.

        Builds already in flight are not cancelled: they stay in
        ``stats()["pending"]`` and store their bitmap when they finish.
        """
        self._bitmaps.clear()
        self._hits = 0
        self._misses = 0
        self._builds = 0

    def __len__(self) -> int:
        return len(self._bitmaps)

    def __contains__(self, key: TextureCacheKey) -> bool:
        return key in self._bitmaps

    def stats(self) -> dict[str, int]:
        """Return hit/miss/build counters."""
        return {
            "entries": len(self._bitmaps),
            "pending": len(self._pending),
            "hits": self._hits,
            "misses": self._misses,
            "builds": self._builds,
        }
