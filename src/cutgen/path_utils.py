"""
SVG path helpers for irregular cut and fold outlines.

Irregular pieces arrive with a path authored in a normalized 0-100 box.
These helpers check that a path only contains path commands and numbers
before it is embedded in a document, tidy its whitespace, and check that
it stays inside its box.
"""

from __future__ import annotations

import re

import numpy as np

# Irregular paths are authored in a 0-100 box on both axes
NORMALIZED_PATH_SIZE = 100

# Commands whose arguments are all x,y pairs
_PAIR_COMMANDS = set("MLCSQTZ")

_VALID_PATH_RE = re.compile(r'^[MmLlHhVvCcSsQqTtAaZz0-9eE\s,.+-]+$')
_COMMAND_RE = re.compile(r'[MmLlHhVvCcSsQqTtAaZz]')
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


def validate_svg_path(path_d: str | None) -> bool:
    """
    Check that a path 'd' attribute is safe to embed.

    Only path command letters, numbers, signs, separators and whitespace
    are accepted, and the path must start with a moveto.
    """
    if not path_d or not isinstance(path_d, str):
        return False
    if not _VALID_PATH_RE.match(path_d):
        return False
    first_command = _COMMAND_RE.search(path_d)
    return first_command is not None and first_command.group(0) in "Mm"


def optimize_svg_path(path_d: str) -> str:
    """Normalize whitespace in a path; invalid paths are returned unchanged."""
    if not validate_svg_path(path_d):
        return path_d

    result = re.sub(r'\s+', ' ', path_d)
    result = re.sub(r',\s*', ',', result)
    result = re.sub(r'\s*([MmLlHhVvCcSsQqTtAaZz])\s*', r'\1', result)
    return result.strip()



def parse_svg_path_bounds(path_d: str) -> tuple[float, float, float, float] | None:
    """
    Return the bounding box (min_x, min_y, max_x, max_y) of a path's points.

    Only absolute M/L/C/S/Q/T/Z paths (the form irregular outlines are
    authored in) are read; their numbers are consecutive x,y pairs. For
    any other path None is returned. Curve control points count towards
    the box.
    """
    if not validate_svg_path(path_d):
        return None
    if set(_COMMAND_RE.findall(path_d)) - _PAIR_COMMANDS:
        return None

    numbers = _NUMBER_RE.findall(path_d)
    if not numbers or len(numbers) % 2:
        return None

    points = np.asarray(numbers, dtype=float).reshape(-1, 2)
    min_x, min_y = points.min(axis=0)
    max_x, max_y = points.max(axis=0)
    return (float(min_x), float(min_y), float(max_x), float(max_y))


def path_fits_normalized_box(path_d: str, size: float = NORMALIZED_PATH_SIZE) -> bool:
    """
    True unless the path's points are known to leave the 0..size box.

    Paths whose bounds cannot be read are given the benefit of the doubt.
    """
    bounds = parse_svg_path_bounds(path_d)
    if bounds is None:
        return True
    min_x, min_y, max_x, max_y = bounds
    return min_x >= 0 and min_y >= 0 and max_x <= size and max_y <= size
