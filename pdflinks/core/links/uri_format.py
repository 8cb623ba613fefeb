"""
Canonical URI form of link actions.

Output of ``format_action`` parses back (``parse_link_uri``) to an
equivalent action.
"""

import math
from typing import Optional

from ..destination.models import XYZ, DestinationKind, Fit, FitB, FitBH, FitBV, FitH, FitR, FitV
from .models import (
    FilePath,
    FileSpec,
    FileUrl,
    GoTo,
    GoToR,
    Launch,
    NamedDestination,
    PageDestination,
    PdfAction,
    PdfDestination,
    Uri,
)
from .paths import encode_uri_component, encode_uri_pathname

_EXTENT_STEPS = 8


def format_number(value: float) -> str:
    """Shortest round-trip form; integral values print without a fraction."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _optional(value: Optional[float]) -> str:
    return "nan" if value is None else format_number(value)


def _exact_extent(start: float, end: float) -> float:
    """
    Extent ``w`` such that ``start + w == end`` in floating point.

    Plain ``end - start`` can be one ulp off (``0.1 + (0.7 - 0.1) != 0.7``).
    Falls back to the plain difference when no neighbour within a few ulps
    adds up exactly.
    """
    extent = end - start
    candidate = extent
    for _ in range(_EXTENT_STEPS):
        total = start + candidate
        if total == end:
            return candidate
        candidate = math.nextafter(candidate, math.inf if total < end else -math.inf)
    return extent


def format_kind_suffix(kind: DestinationKind) -> str:
    """
    Format the ``&view=``/``&zoom=``/``&viewrect=`` part for a kind.

    Returns an empty string for an XYZ kind with nothing specified.
    """
    if isinstance(kind, (Fit, FitB)):
        return f"&view={kind.name}"
    elif isinstance(kind, (FitH, FitBH)):
        if kind.top is None:
            return f"&view={kind.name}"
        return f"&view={kind.name},{format_number(kind.top)}"
    elif isinstance(kind, (FitV, FitBV)):
        if kind.left is None:
            return f"&view={kind.name}"
        return f"&view={kind.name},{format_number(kind.left)}"
    elif isinstance(kind, XYZ):
        # zoom 0 means "keep the current zoom"
        zoom = None if kind.zoom == 0 else kind.zoom
        if zoom is None and kind.left is None and kind.top is None:
            return ""
        return f"&zoom={_optional(zoom)},{_optional(kind.left)},{_optional(kind.top)}"
    elif isinstance(kind, FitR):
        return (
            f"&viewrect={format_number(kind.left)},{format_number(kind.bottom)},"
            f"{format_number(_exact_extent(kind.left, kind.right))},"
            f"{format_number(_exact_extent(kind.bottom, kind.top))}"
        )

    raise TypeError(f"Unknown destination kind: {kind!r}")


def _format_destination(dest: PdfDestination) -> str:
    if isinstance(dest, PageDestination):
        return f"page={dest.page + 1}{format_kind_suffix(dest.kind)}"
    elif isinstance(dest, NamedDestination):
        return "nameddest=" + encode_uri_component(dest.name)

    raise TypeError(f"Unknown destination: {dest!r}")


def _format_file(file: FileSpec) -> str:
    """File part of a remote link, followed by the fragment separator."""
    if isinstance(file, FileUrl):
        # A URL that already has a fragment gets the parameters appended
        return file.url + ("&" if "#" in file.url else "#")
    elif isinstance(file, FilePath):
        prefix = "file://" if file.path.startswith("/") else "file:"
        return prefix + encode_uri_pathname(file.path) + "#"

    raise TypeError(f"Unknown file specification: {file!r}")


def format_action(action: PdfAction) -> str:
    """
    Format a link action as a URI.

    Args:
        action: ``GoTo``, ``GoToR``, ``Launch`` or ``Uri``

    Returns:
        The canonical URI string
    """
    if isinstance(action, GoTo):
        return "#" + _format_destination(action.dest)
    elif isinstance(action, GoToR):
        return _format_file(action.file) + _format_destination(action.dest)
    elif isinstance(action, Launch):
        return _format_file(action.file) + "page=1"
    elif isinstance(action, Uri):
        return action.uri

    raise TypeError(f"Unknown link action: {action!r}")
