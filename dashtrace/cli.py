#!/usr/bin/env python3
# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
DashTrace - sample sheet renderer

Renders every shape the dashed-outline tracer supports to an image or
vector file, in vector or texture mode.

Usage:
    dashtrace -o sample.png
    dashtrace --texture --zoom 2 -o zoomed.png
    dashtrace -d svg -o sample.svg
"""

import importlib
import logging
import sys

from .cli_args import build_argument_parser, get_output_file, infer_device
from .core import error
from .demo import SampleSheet, SheetSettings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the dashtrace command.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    device = infer_device(args.outputfile, args.device)
    output_file = get_output_file(args.outputfile, device)
    device_module = importlib.import_module(f"dashtrace.devices.{device}.{device}")

    settings = SheetSettings(
        width=args.width,
        height=args.height,
        use_texture=args.texture,
        zoom=args.zoom,
    )

    try:
        device_module.showpage(SampleSheet(settings), args.width, args.height,
                               output_file, antialias=args.antialias)
    except error.DashTraceError as exc:
        print(f"DashTrace Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"DashTrace Error: could not write {output_file}: {exc}", file=sys.stderr)
        return 1

    logger.info("Wrote %s (%s device)", output_file, device)
    return 0


if __name__ == "__main__":
    sys.exit(main())
