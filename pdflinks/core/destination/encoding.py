"""
Encoding of destination kinds into PDF destination arrays.
"""

import math
from typing import Any, List, Optional

from ..document.objects import PdfName
from .models import XYZ, DestinationKind, Fit, FitB, FitBH, FitBV, FitH, FitR, FitV


def _real_or_null(value: Optional[float]) -> Optional[float]:
    # Absent and NaN are both written as null
    if value is None or math.isnan(value):
        return None
    return float(value)


def encode_kind(kind: DestinationKind, sink: List[Any]) -> None:
    """
    Append the kind name and its parameters to a destination array.

    Args:
        kind: Destination kind to encode
        sink: Array being built (only ``append`` is used)
    """
    sink.append(PdfName(kind.name))

    if isinstance(kind, (Fit, FitB)):
        return
    elif isinstance(kind, (FitH, FitBH)):
        sink.append(_real_or_null(kind.top))
    elif isinstance(kind, (FitV, FitBV)):
        sink.append(_real_or_null(kind.left))
    elif isinstance(kind, XYZ):
        zoom = _real_or_null(kind.zoom)
        sink.append(_real_or_null(kind.left))
        sink.append(_real_or_null(kind.top))
        # percentage -> scale factor
        sink.append(None if zoom is None else zoom / 100.0)
    elif isinstance(kind, FitR):
        sink.append(float(kind.left))
        sink.append(float(kind.bottom))
        sink.append(float(kind.right))
        sink.append(float(kind.top))
    else:
        raise TypeError(f"Unknown destination kind: {kind!r}")
