"""
Affine transforms of destination kinds.

Matrices are anything with ``a b c d e f`` attributes (``fitz.Matrix``
works). A point (x, y) maps to (a*x + c*y + e, b*x + d*y + f).
"""

import math
from typing import Optional, Protocol, Tuple

from .models import (
    XYZ,
    DestinationKind,
    Fit,
    FitB,
    FitBH,
    FitBV,
    FitH,
    FitR,
    FitV,
    normalize_optional,
)

Rect = Tuple[float, float, float, float]


class Matrix(Protocol):
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float


def transform_point(x: float, y: float, m: Matrix) -> Tuple[float, float]:
    """Apply ``m`` to the point (x, y)."""
    return (x * m.a + y * m.c + m.e, x * m.b + y * m.d + m.f)


def transform_rect(rect: Rect, m: Matrix) -> Rect:
    """
    Transform a rectangle and return the bounding box of the result.

    Args:
        rect: (x0, y0, x1, y1)
        m: Affine matrix

    Returns:
        Normalized (x0, y0, x1, y1) with x0 <= x1 and y0 <= y1
    """
    x0, y0, x1, y1 = rect
    corners = [
        transform_point(x0, y0, m),
        transform_point(x1, y0, m),
        transform_point(x0, y1, m),
        transform_point(x1, y1, m),
    ]
    xs = [p[0] for p in corners]
    ys = [p[1] for p in corners]
    return (min(xs), min(ys), max(xs), max(ys))


def _transform_top(top: Optional[float], m: Matrix) -> Optional[float]:
    if top is None:
        return None
    return normalize_optional(transform_point(0.0, top, m)[1])


def _transform_left(left: Optional[float], m: Matrix) -> Optional[float]:
    if left is None:
        return None
    return normalize_optional(transform_point(left, 0.0, m)[0])


def _transform_xyz(kind: XYZ, m: Matrix) -> XYZ:
    left, top = kind.left, kind.top

    if m.a == 0 and m.d == 0:
        # 90/270 degrees: x comes from y and y from x. A missing input
        # leaves both outputs missing.
        if left is None or top is None:
            return XYZ(left=None, top=None, zoom=kind.zoom)
        x, y = transform_point(left, top, m)
        return XYZ(left=x, top=y, zoom=kind.zoom)

    if m.b == 0 and m.c == 0:
        new_left = None if left is None else left * m.a + m.e
        new_top = None if top is None else top * m.d + m.f
        return XYZ(left=new_left, top=new_top, zoom=kind.zoom)

    x, y = transform_point(
        math.nan if left is None else left,
        math.nan if top is None else top,
        m,
    )
    return XYZ(left=x, top=y, zoom=kind.zoom)


def transform_kind(kind: DestinationKind, m: Matrix) -> DestinationKind:
    """
    Transform the coordinates of a destination kind by ``m``.

    Absent coordinates are never turned into numbers, and the result never
    contains NaN.
    """
    if isinstance(kind, (Fit, FitB)):
        return kind
    elif isinstance(kind, FitH):
        return FitH(top=_transform_top(kind.top, m))
    elif isinstance(kind, FitBH):
        return FitBH(top=_transform_top(kind.top, m))
    elif isinstance(kind, FitV):
        return FitV(left=_transform_left(kind.left, m))
    elif isinstance(kind, FitBV):
        return FitBV(left=_transform_left(kind.left, m))
    elif isinstance(kind, XYZ):
        return _transform_xyz(kind, m)
    elif isinstance(kind, FitR):
        x0, y0, x1, y1 = transform_rect((kind.left, kind.bottom, kind.right, kind.top), m)
        return FitR(left=x0, bottom=y0, right=x1, top=y1)

    raise TypeError(f"Unknown destination kind: {kind!r}")
