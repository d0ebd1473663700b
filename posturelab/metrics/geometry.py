from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..models import Point

_EPS = 1e-9


def _xy(p: Point) -> np.ndarray:
    return np.array([p.x, p.y], dtype=float)


def fold_angle(angle_deg: float) -> float:
    # Fold (-180, 180] into [-90, 90] keeping the sign of the vertical component.
    if angle_deg > 90.0:
        return 180.0 - angle_deg
    if angle_deg < -90.0:
        return -180.0 - angle_deg
    return angle_deg


def bilateral_tilt_deg(left: Point, right: Point) -> Optional[float]:
    """Tilt of the left->right line from horizontal, in degrees.

    Positive when the right landmark sits lower in the photo (greater y).
    The result does not depend on which side of the image each landmark
    appears, so front and back photos share one sign convention.
    Coincident landmarks have no line and give ``None``.
    """
    d = _xy(right) - _xy(left)
    if float(np.linalg.norm(d)) < _EPS:
        return None
    return fold_angle(math.degrees(math.atan2(d[1], d[0])))


def vertical_lean_deg(superior: Point, inferior: Point) -> Optional[float]:
    """Lean of the inferior->superior segment from vertical, in degrees.

    Positive when the superior point is to the image right of the inferior one.
    """
    dx = superior.x - inferior.x
    dy = inferior.y - superior.y
    if abs(dx) < _EPS and abs(dy) < _EPS:
        return None
    return fold_angle(math.degrees(math.atan2(dx, dy)))


def plumb_offset_ratio(superior: Point, middle: Point, inferior: Point) -> Optional[float]:
    """Horizontal offset of ``middle`` from the superior-inferior line.

    Expressed as a fraction of the vertical extent of that line; positive
    towards the image right.
    """
    top = _xy(superior)
    bottom = _xy(inferior)
    extent = bottom[1] - top[1]
    if abs(extent) < _EPS:
        return None
    t = (middle.y - top[1]) / extent
    line_x = top[0] + t * (bottom[0] - top[0])
    return float((middle.x - line_x) / abs(extent))


def symmetry_offset_ratio(left: Point, right: Point, reference_x: float) -> Optional[float]:
    """Difference of the pair's distances to a vertical reference line.

    Divided by the pair's horizontal width; positive when the right landmark
    is further from the reference than the left one.
    """
    width = abs(right.x - left.x)
    if width < _EPS:
        return None
    return float((abs(right.x - reference_x) - abs(left.x - reference_x)) / width)


def joint_deviation_deg(proximal: Point, joint: Point, distal: Point) -> Optional[float]:
    # Deviation from a straight segment: 0 when proximal-joint-distal is colinear.
    a = _xy(proximal) - _xy(joint)
    b = _xy(distal) - _xy(joint)
    denom = float(np.linalg.norm(a) * np.linalg.norm(b))
    if denom < _EPS:
        return None
    cosang = float(np.clip(np.dot(a, b) / denom, -1.0, 1.0))
    return 180.0 - math.degrees(math.acos(cosang))
