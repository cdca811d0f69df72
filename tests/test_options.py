# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for option resolution and validation."""

import pytest

from dashtrace.core import error
from dashtrace.core.error import ConfigurationError, DashTraceError
from dashtrace.core.options import DashLineOptions, resolve_options


def test_defaults():
    options = resolve_options()
    assert options.dash == (10.0, 5.0)
    assert options.width == 1
    assert options.color == 0xFFFFFF
    assert options.alpha == 1
    assert options.scale == 1
    assert options.use_texture is False
    assert options.cap is None
    assert options.join is None
    assert options.alignment == 0.5
    assert options.offset == 0
    assert options.pattern.period == 15.0


def test_mapping_and_overrides_merge():
    options = resolve_options({"dash": [4, 2], "width": 3}, width=7, color=0x00FF00)
    assert options.dash == (4.0, 2.0)
    assert options.width == 7
    assert options.color == 0x00FF00


def test_none_means_default():
    options = resolve_options({"cap": None, "width": None, "alpha": 0.5})
    assert options.width == 1.0
    assert options.cap is None
    assert options.alpha == 0.5


def test_resolved_options_pass_through():
    options = DashLineOptions(width=4)
    assert resolve_options(options) is options
    assert resolve_options(options, width=2).width == 2


def test_unknown_option_rejected():
    with pytest.raises(ConfigurationError, match="dashh"):
        resolve_options({"dashh": [1, 2]})


@pytest.mark.parametrize("changes", [
    {"dash": []},
    {"dash": [5, 0]},
    {"width": -1},
    {"alpha": 1.5},
    {"alpha": -0.1},
    {"alignment": 2},
    {"scale": 0},
    {"scale": -1},
    {"scale": float("inf")},
    {"offset": float("nan")},
    {"color": 0x1000000},
    {"color": -1},
    {"color": "red"},
    {"cap": "pointy"},
    {"join": "mitre"},
    {"width": "3"},
])
def test_invalid_values_rejected(changes):
    with pytest.raises(ConfigurationError):
        resolve_options(changes)


def test_scaled_width():
    assert DashLineOptions(width=4, scale=0.5).scaled_width == 2.0


def test_replace_revalidates():
    options = DashLineOptions()
    with pytest.raises(ConfigurationError):
        options.replace(alpha=3)


def test_cap_and_join_names():
    options = resolve_options(cap="round", join="bevel")
    assert (options.cap, options.join) == ("round", "bevel")


def test_error_message_and_code():
    with pytest.raises(DashTraceError) as info:
        resolve_options(width=-2)
    assert info.value.code == error.RANGECHECK
    assert str(info.value).startswith("/rangecheck in --DashLineOptions--")
