"""
Parsing of link URIs (as reported by MuPDF) back into link actions.

The URI forms follow Adobe's "Parameters for Opening PDF Files":

    #page=3&zoom=200,10,20          GoTo(PageDestination(2, XYZ(10, 20, 200)))
    #nameddest=chapter1             GoTo(NamedDestination("chapter1"))
    #chapter1                       GoTo(NamedDestination("chapter1"))
    file:///docs/other.pdf#page=2   GoToR(FilePath("/docs/other.pdf"), ...)
    https://host/doc.pdf#page=2     GoToR(FileUrl("https://host/doc.pdf"), ...)
    file:notes.txt                  Launch(FilePath("notes.txt"))
    https://example.com             Uri("https://example.com")

MuPDF flattens Launch and URI actions into one string, so external
non-PDF links always come back as ``Uri``.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from loguru import logger

from ..destination.models import XYZ, DestinationKind, Fit, FitB, FitBH, FitBV, FitH, FitR, FitV
from .models import (
    FilePath,
    FileUrl,
    GoTo,
    GoToR,
    Launch,
    NamedDestination,
    PageDestination,
    PdfAction,
    PdfDestination,
    Uri,
    default_destination,
)
from .paths import decode_and_clean_path, decode_uri_component, is_external_link, is_pdf_path

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_FILE_SCHEME = "file:"

# ==============================================================================
# Types
# ==============================================================================


class FragmentKind(Enum):
    """Outcome of parsing a URI fragment."""

    EMPTY = "empty"  # No fragment at all
    EXPLICIT = "explicit"  # Page and/or view parameters
    NAMED = "named"  # Named destination
    UNKNOWN_KEYS = "unknown_keys"  # An unsupported open parameter was seen


@dataclass(frozen=True)
class ParsedFragment:
    """Result of ``parse_params``."""

    kind: FragmentKind
    page: int = 0
    view: Optional[DestinationKind] = None
    name: Optional[str] = None

    def to_destination(self) -> Optional[PdfDestination]:
        """Destination for EXPLICIT/NAMED results, None otherwise."""
        if self.kind == FragmentKind.EXPLICIT:
            return PageDestination(page=self.page, kind=self.view or XYZ())
        elif self.kind == FragmentKind.NAMED:
            return NamedDestination(name=self.name)
        return None


# ==============================================================================
# Number Parsing
# ==============================================================================


def _parse_int(s: str) -> Optional[int]:
    if not _INT_RE.fullmatch(s):
        return None
    n = int(s)
    if n < _INT32_MIN or n > _INT32_MAX:
        return None
    return n


def _parse_float(s: str) -> Optional[float]:
    """Parse a finite decimal number, None if malformed or non-finite."""
    s = s.strip()
    if not _FLOAT_RE.fullmatch(s):
        return None
    value = float(s)
    if not math.isfinite(value):
        return None
    return value


def _floats(s: str) -> Iterator[Optional[float]]:
    for part in s.split(","):
        yield _parse_float(part)


# ==============================================================================
# Fragment Parameters
# ==============================================================================


def _page_to_index(n: int) -> int:
    """1-based page number to 0-based index, clamped at 0."""
    return 0 if n < 2 else n - 1


def parse_zoom(s: str) -> XYZ:
    """``zoom=scale[,left,top]``. A scale <= 0 means 100%."""
    values = _floats(s)
    zoom = next(values, None)
    if zoom is not None and zoom <= 0:
        zoom = 100.0
    left = next(values, None)
    top = next(values, None)
    return XYZ(left=left, top=top, zoom=zoom)


def parse_viewrect(s: str) -> Optional[FitR]:
    """``viewrect=left,top,width,height``. None unless all four are valid."""
    values = list(_floats(s))[:4]
    if len(values) < 4 or any(v is None for v in values):
        return None
    x, y, w, h = values
    if w == 0 or h == 0:
        return None
    right, top = x + w, y + h
    if not (math.isfinite(right) and math.isfinite(top)):
        return None
    return FitR(left=x, bottom=y, right=right, top=top)


_FIT_VIEWS = {"fit": Fit, "fitb": FitB}
_TOP_VIEWS = {"fith": FitH, "fitbh": FitBH}
_LEFT_VIEWS = {"fitv": FitV, "fitbv": FitBV}


def parse_view(s: str) -> Optional[DestinationKind]:
    """``view=Fit|FitB|FitH[,top]|FitBH[,top]|FitV[,left]|FitBV[,left]``."""
    if not s:
        return None

    parts = [part.strip() for part in s.split(",")]
    key = parts[0].lower()
    if key in _FIT_VIEWS:
        return _FIT_VIEWS[key]()

    value = _parse_float(parts[1]) if len(parts) > 1 else None
    if key in _TOP_VIEWS:
        return _TOP_VIEWS[key](top=value)
    if key in _LEFT_VIEWS:
        return _LEFT_VIEWS[key](left=value)
    return None


def _kv_pairs(fragment: str) -> Iterator[Tuple[str, str]]:
    for part in re.split(r"[&#]", fragment):
        part = part.strip()
        if not part or "=" not in part:
            continue
        key, _, value = part.partition("=")
        yield key.strip(), value.strip()


def parse_params(params: str) -> ParsedFragment:
    """
    Parse the fragment of a link URI.

    Pairs are read left to right. ``page`` and ``nameddest`` override each
    other (last one wins); ``view``, ``zoom`` and ``viewrect`` set the view.

    Args:
        params: Fragment text without the leading ``#``

    Returns:
        ParsedFragment. UNKNOWN_KEYS as soon as an unsupported key is seen;
        NAMED with the whole decoded fragment when nothing was recognized.
    """
    if not params:
        return ParsedFragment(FragmentKind.EMPTY)

    page: Optional[int] = None
    view: Optional[DestinationKind] = None
    named_dest: Optional[str] = None

    for key, value in _kv_pairs(params):
        lowered = key.lower()

        if lowered == "page":
            n = _parse_int(value)
            if n is not None:
                page = _page_to_index(n)
                view = XYZ()
                named_dest = None
                continue

        if lowered == "nameddest" and value:
            named_dest = value
            page = None
            view = None
            continue

        if lowered == "viewrect":
            new_view = parse_viewrect(value)
        elif lowered == "zoom":
            new_view = parse_zoom(value)
        elif lowered == "view":
            new_view = parse_view(value)
        else:
            return ParsedFragment(FragmentKind.UNKNOWN_KEYS)

        if new_view is not None:
            view = new_view

    if named_dest is not None:
        return ParsedFragment(FragmentKind.NAMED, name=decode_uri_component(named_dest))

    if page is None and view is None:
        return ParsedFragment(FragmentKind.NAMED, name=decode_uri_component(params))

    return ParsedFragment(FragmentKind.EXPLICIT, page=page or 0, view=view or XYZ())


# ==============================================================================
# Link URIs
# ==============================================================================


def _strip_file_scheme(head: str) -> Tuple[str, bool]:
    if head[: len(_FILE_SCHEME)].lower() == _FILE_SCHEME:
        return head[len(_FILE_SCHEME) :], True
    return head, False


def parse_link_uri(uri: str) -> Optional[PdfAction]:
    """
    Reconstruct a link action from a link URI.

    Args:
        uri: Link URI as reported by MuPDF (``fitz.Link.uri``)

    Returns:
        The action, or None for an empty URI or a bare ``#``
    """
    uri = uri.strip()
    if not uri:
        return None

    head, _, params = uri.partition("#")
    head = head.strip()
    params = params.strip()

    # Fragment only: destination in this document
    if not head:
        fragment = parse_params(params)
        if fragment.kind == FragmentKind.EMPTY:
            return None
        if fragment.kind == FragmentKind.UNKNOWN_KEYS:
            logger.debug("Unsupported open parameters, keeping as named destination: {}", uri)
            return GoTo(NamedDestination(uri))
        return GoTo(fragment.to_destination())

    link, is_explicit_file = _strip_file_scheme(head)

    if is_pdf_path(link):
        fragment = parse_params(params)
        if fragment.kind == FragmentKind.UNKNOWN_KEYS:
            logger.debug("Unsupported open parameters, keeping URI: {}", uri)
            return Uri(uri)
        dest = fragment.to_destination() or default_destination()

        if not is_explicit_file and is_external_link(link):
            return GoToR(FileUrl(link), dest)
        return GoToR(FilePath(decode_and_clean_path(link)), dest)

    if is_explicit_file and link:
        return Launch(FilePath(decode_and_clean_path(link)))
    if not is_external_link(uri):
        return Launch(FilePath(decode_and_clean_path(uri)))
    return Uri(uri)
