# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Vector-mode tracing through DashLine with a recording surface.

Test cases:
- Straight line split into draw/gap primitives
- Scale and offset shift the dash boundaries
- Dash phase carries across connected segments (rectangle vs straight line)
- Closing edge stops one final gap short of the start
- Seam never lengthens a dash: triangles, ellipses, rounded rectangles
  across pattern phases, scales and offsets
- Degenerate input: zero-length segments, move then close, implicit move
- Curves end on their endpoint and refine with smaller smoothness
"""

import math

import pytest

from dashtrace.core.error import ConfigurationError
from dashtrace.tracer.dash_line import DashLine

from conftest import dash_runs


def flat(runs):
    return [v for run in runs for v in run]


def path_after_style(surface):
    """Recorded move/line calls as (kind, x, y) with coordinates rounded."""
    return [(kind, round(x, 9), round(y, 9)) for kind, x, y in surface.path_calls()]


def test_style_applied_on_construction(surface):
    DashLine(surface, dash=[10, 5], width=4, scale=0.5, color=0x0000AA, alpha=0.5,
             cap="round", join="bevel")
    (style,) = surface.styles()
    assert style.width == 2.0
    assert style.color == 0x0000AA
    assert style.alpha == 0.5
    assert style.cap == "round"
    assert style.join == "bevel"
    assert style.texture is None


def test_invalid_options_raise_before_drawing(surface):
    with pytest.raises(ConfigurationError):
        DashLine(surface, dash=[10, -5])
    assert surface.calls == []


def test_straight_line_primitives(surface):
    DashLine(surface, dash=[10, 5]).move_to(0, 0).line_to(32, 0)
    assert path_after_style(surface) == [
        ("move_to", 0, 0),
        ("line_to", 10, 0),
        ("move_to", 15, 0),
        ("line_to", 25, 0),
        ("move_to", 30, 0),
        ("line_to", 32, 0),
    ]


def test_scale_multiplies_entries(surface):
    DashLine(surface, dash=[10, 5], scale=2).move_to(0, 0).line_to(40, 0)
    assert path_after_style(surface) == [
        ("move_to", 0, 0),
        ("line_to", 20, 0),
        ("move_to", 30, 0),
        ("line_to", 40, 0),
    ]


def test_offset_shifts_phase(surface):
    DashLine(surface, dash=[10, 5], offset=3).move_to(0, 0).line_to(20, 0)
    assert path_after_style(surface) == [
        ("move_to", 0, 0),
        ("line_to", 7, 0),
        ("move_to", 12, 0),
        ("line_to", 20, 0),
    ]


def test_pattern_longer_than_segment(surface):
    DashLine(surface, dash=[100, 5]).move_to(0, 0).line_to(0, 30)
    assert path_after_style(surface) == [("move_to", 0, 0), ("line_to", 0, 30)]


def test_phase_continues_across_segments(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.move_to(0, 0).line_to(30, 0).line_to(30, 20).line_to(0, 20).line_to(0, 0)
    rect_runs = dash_runs(surface.path_calls())

    straight = type(surface)()
    DashLine(straight, dash=[10, 5]).move_to(0, 0).line_to(100, 0)
    line_runs = dash_runs(straight.path_calls())

    assert flat(rect_runs) == pytest.approx(flat(line_runs))
    assert dash.line_length == pytest.approx(100.0)


def test_move_to_resets_distance(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.move_to(0, 0).line_to(12, 0)
    assert dash.line_length == 12.0
    surface.clear()
    dash.move_to(0, 10).line_to(12, 10)
    assert path_after_style(surface) == [
        ("move_to", 0, 10),
        ("line_to", 10, 10),
        ("move_to", 12, 10),
    ]


def test_closing_edge_ends_one_gap_short(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.rect(0, 0, 30, 20)
    calls = path_after_style(surface)
    # last edge runs (0, 20) -> (0, 0) from distance 80
    assert calls[-3:] == [
        ("line_to", 0, 15),
        ("move_to", 0, 10),
        ("line_to", 0, 5),
    ]
    for start, end in dash_runs(surface.path_calls()):
        assert end - start <= 10 + 1e-9


SEAM_STYLES = [
    ([10, 5], 1.0, 0.0),
    ([10, 5], 0.5, 3.0),
    ([12, 4, 2, 4], 1.0, 0.0),
    ([12, 4, 2, 4], 2.0, 7.0),
]


def assert_seam_lines_up(surface, dash, entries, scale):
    """No dash outgrows its entry and the pen is up when the outline returns to its start."""
    longest = max(entries[0::2]) * scale
    runs = dash_runs(surface.path_calls())
    assert runs
    for start, end in runs:
        assert end - start <= longest + 1e-9, (start, end)
    assert runs[-1][1] < dash.line_length
    # no dash is drawn back onto the first one
    _, sx, sy = surface.named("move_to")[0]
    for _, x, y in surface.named("line_to"):
        assert math.hypot(x - sx, y - sy) > 1e-9


@pytest.mark.parametrize("entries, scale, offset", SEAM_STYLES)
@pytest.mark.parametrize("width", [5, 7.5, 10, 12.5, 16, 20.5, 21, 21.5, 30])
def test_closing_triangle_seam(surface, entries, scale, offset, width):
    dash = DashLine(surface, dash=entries, scale=scale, offset=offset)
    dash.move_to(0, 0).line_to(width, 0).line_to(width, 40).close_path()
    assert_seam_lines_up(surface, dash, entries, scale)


@pytest.mark.parametrize("entries, scale, offset", SEAM_STYLES)
@pytest.mark.parametrize("radii", [(20, 10), (37, 23), (9, 31)])
def test_closing_ellipse_seam(surface, entries, scale, offset, radii):
    dash = DashLine(surface, dash=entries, scale=scale, offset=offset)
    dash.ellipse(0, 0, *radii)
    assert_seam_lines_up(surface, dash, entries, scale)


@pytest.mark.parametrize("entries, scale, offset", SEAM_STYLES)
@pytest.mark.parametrize("corner_radius", [4, 8, 12.5])
def test_closing_round_rect_seam(surface, entries, scale, offset, corner_radius):
    dash = DashLine(surface, dash=entries, scale=scale, offset=offset)
    dash.round_rect(0, 0, 50, 30, corner_radius)
    assert_seam_lines_up(surface, dash, entries, scale)


def test_closing_dash_is_cut_to_its_entry(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.move_to(0, 0).line_to(10, 0).line_to(10, 40).close_path()
    # the closing edge (length ~41.23) starts mid-dash at distance 50; the
    # dash from 75 must stop at 85 and the 1.23 left after the gap stays blank
    calls = path_after_style(surface)
    assert calls[-1][0] == "move_to"
    runs = dash_runs(surface.path_calls())
    assert runs[-1][0] == pytest.approx(75.0)
    assert runs[-1][1] == pytest.approx(85.0)


def test_close_flag_ignored_when_not_at_start(surface):
    DashLine(surface, dash=[100, 5]).move_to(0, 0).line_to(30, 0, close_path=True)
    assert path_after_style(surface)[-1] == ("line_to", 30, 0)


def test_close_path_method(surface):
    dash = DashLine(surface, dash=[100, 5])
    dash.move_to(0, 0).line_to(10, 0).line_to(10, 10).close_path()
    last = path_after_style(surface)[-1]
    assert last[0] == "line_to"
    # the final 5-unit gap is left open at the seam
    assert last[1:] == pytest.approx((5 / 2 ** 0.5, 5 / 2 ** 0.5))
    assert dash.cursor.x == 0 and dash.cursor.y == 0


def test_move_then_close_emits_no_line(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.move_to(5, 5).close_path()
    assert surface.named("line_to") == []
    assert dash.line_length == 0.0


def test_zero_length_segment(surface):
    dash = DashLine(surface, dash=[10, 5])
    dash.move_to(5, 5).line_to(5, 5)
    assert surface.named("line_to") == []
    assert dash.line_length == 0.0


def test_implicit_move_to_origin(surface):
    dash = DashLine(surface, dash=[100, 5])
    dash.line_to(10, 0)
    assert path_after_style(surface) == [("move_to", 0, 0), ("line_to", 10, 0)]


def test_single_entry_pattern_is_solid(surface):
    DashLine(surface, dash=[7]).move_to(0, 0).line_to(20, 0)
    runs = dash_runs(surface.path_calls())
    assert flat(runs) == pytest.approx([0.0, 20.0])


def test_calls_chain(surface):
    dash = DashLine(surface)
    assert dash.move_to(0, 0).line_to(1, 0).rect(0, 0, 5, 5).stroke() is dash
    assert surface.calls[-1] == ("stroke",)


def test_bezier_ends_on_endpoint(surface):
    dash = DashLine(surface, dash=[3, 2])
    dash.move_to(0, 0).bezier_curve_to(0, 100, 100, 100, 100, 0)
    assert (dash.cursor.x, dash.cursor.y) == (100, 0)
    assert dash.line_length > 100


def test_quadratic_ends_on_endpoint(surface):
    dash = DashLine(surface, dash=[3, 2])
    dash.move_to(0, 0).quadratic_curve_to(50, 100, 100, 0)
    assert (dash.cursor.x, dash.cursor.y) == (100, 0)


def test_smaller_smoothness_gives_more_segments(surface):
    counts = []
    for smoothness in (10.0, 1.0, 0.1):
        surface.clear()
        # one line_to per flattened segment: the dash never ends on this curve
        dash = DashLine(surface, dash=[1000, 1])
        dash.move_to(0, 0).bezier_curve_to(0, 100, 100, 100, 100, 0, smoothness=smoothness)
        counts.append(len(surface.named("line_to")))
    assert counts[0] <= counts[1] <= counts[2]
    assert counts[2] > counts[0]


def test_arc_connects_to_cursor(surface):
    dash = DashLine(surface, dash=[1000, 1])
    dash.move_to(0, 0).arc(20, 0, 10, math.pi, 2 * math.pi)
    calls = path_after_style(surface)
    assert calls[0] == ("move_to", 0, 0)
    assert calls[1] == ("line_to", 10, 0)
    assert len(surface.named("line_to")) == 11
    assert dash.cursor.x == pytest.approx(30.0)
    assert dash.cursor.y == pytest.approx(0.0, abs=1e-9)
