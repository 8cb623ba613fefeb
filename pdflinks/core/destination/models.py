"""
Destination view kinds (how a viewer presents a target location).

Optional coordinates mean "not specified by the destination", which is not
the same as zero. NaN never survives construction: every optional field is
passed through ``normalize_optional``.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

# ==============================================================================
# Helpers
# ==============================================================================


def normalize_optional(value: Optional[float]) -> Optional[float]:
    """
    Convert an optional number to ``float``, mapping NaN to ``None``.

    Args:
        value: Number, NaN, or None

    Returns:
        A float, or None if the value is absent or NaN
    """
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


def _normalize_fields(instance, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, normalize_optional(getattr(instance, name)))


# ==============================================================================
# Destination Kinds
# ==============================================================================


@dataclass(frozen=True)
class Fit:
    """Fit the whole page in the window."""

    name = "Fit"


@dataclass(frozen=True)
class FitB:
    """Like ``Fit``, but using the bounding box of the page contents."""

    name = "FitB"


@dataclass(frozen=True)
class FitH:
    """Fit the page width, with ``top`` at the top edge of the window."""

    top: Optional[float] = None

    name = "FitH"

    def __post_init__(self):
        _normalize_fields(self, "top")


@dataclass(frozen=True)
class FitBH:
    """Like ``FitH``, but using the bounding box of the page contents."""

    top: Optional[float] = None

    name = "FitBH"

    def __post_init__(self):
        _normalize_fields(self, "top")


@dataclass(frozen=True)
class FitV:
    """Fit the page height, with ``left`` at the left edge of the window."""

    left: Optional[float] = None

    name = "FitV"

    def __post_init__(self):
        _normalize_fields(self, "left")


@dataclass(frozen=True)
class FitBV:
    """Like ``FitV``, but using the bounding box of the page contents."""

    left: Optional[float] = None

    name = "FitBV"

    def __post_init__(self):
        _normalize_fields(self, "left")


@dataclass(frozen=True)
class XYZ:
    """
    Place (``left``, ``top``) at the upper-left corner of the window.

    ``zoom`` is a percentage (100 = 100%). Each of the three values is
    independently optional.
    """

    left: Optional[float] = None
    top: Optional[float] = None
    zoom: Optional[float] = None

    name = "XYZ"

    def __post_init__(self):
        _normalize_fields(self, "left", "top", "zoom")

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.top is None and self.zoom is None


@dataclass(frozen=True)
class FitR:
    """Zoom to show the rectangle ``left, bottom, right, top``."""

    left: float
    bottom: float
    right: float
    top: float

    name = "FitR"

    def __post_init__(self):
        for field_name in ("left", "bottom", "right", "top"):
            value = float(getattr(self, field_name))
            if not math.isfinite(value):
                raise ValueError(f"FitR {field_name} must be finite, got {value}")
            object.__setattr__(self, field_name, value)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom


DestinationKind = Union[Fit, FitB, FitH, FitBH, FitV, FitBV, XYZ, FitR]


def default_kind() -> XYZ:
    """The default view: XYZ with nothing specified."""
    return XYZ()
