# DashTrace - Dashed Outline Renderer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for DashTrace.

Handles command-line argument definition, parsing, and output file naming.
"""

from __future__ import annotations

import argparse
import os
from importlib import metadata

AVAILABLE_DEVICES = ["png", "svg", "pdf", "tiff"]

DEVICE_EXTENSIONS = {
    "png": "png",
    "svg": "svg",
    "pdf": "pdf",
    "tif": "tiff",
    "tiff": "tiff",
}


def infer_device(outputfile: str | None, device: str | None) -> str:
    """
    Pick the output device.

    An explicit device wins; otherwise the output file's extension decides,
    falling back to PNG.
    """
    if device:
        return device
    if outputfile:
        ext = os.path.splitext(outputfile)[1].lower().lstrip(".")
        if ext in DEVICE_EXTENSIONS:
            return DEVICE_EXTENSIONS[ext]
    return "png"


def get_output_file(outputfile: str | None, device: str) -> str:
    """
    Derive the output path from the -o argument.

    Args:
        outputfile: The -o argument value (or None)
        device: Selected output device

    Returns:
        Output path; ``sample.<ext>`` when no -o was given
    """
    if outputfile:
        return outputfile
    ext = "tif" if device == "tiff" else device
    return f"sample.{ext}"


def _get_version() -> str:
    try:
        return metadata.version("dashtrace")
    except metadata.PackageNotFoundError:
        return "unknown"


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: '{value}'")
    return number


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: '{value}'")
    return number


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the DashTrace argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="dashtrace",
        description="DashTrace - render the dashed outline sample sheet",
        epilog="The device is inferred from the output file extension unless -d is given.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"DashTrace {_get_version()}"
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Specify output filename"
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=AVAILABLE_DEVICES,
        help=f'Specify output device ({", ".join(AVAILABLE_DEVICES)})',
    )
    parser.add_argument(
        "--width", type=_positive_int, default=1024, help="Page width (default: 1024)"
    )
    parser.add_argument(
        "--height", type=_positive_int, default=768, help="Page height (default: 768)"
    )
    parser.add_argument(
        "--texture", action="store_true",
        help="Draw dashes with a repeating texture instead of vector segments"
    )
    parser.add_argument(
        "--zoom", type=_positive_float, default=1.0,
        help="Emulated viewport zoom; the scaling rectangle uses scale = 1/zoom (default: 1)"
    )
    parser.add_argument(
        "--antialias",
        choices=["none", "fast", "good", "best", "gray", "subpixel"],
        default="gray",
        help="Cairo anti-aliasing mode (default: gray)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser
