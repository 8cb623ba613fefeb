"""
Destination view kinds, their transforms and their PDF encoding.
"""

from .encoding import encode_kind
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
    default_kind,
    normalize_optional,
)
from .transform import transform_kind, transform_point, transform_rect

__all__ = [
    "DestinationKind",
    "Fit",
    "FitB",
    "FitH",
    "FitBH",
    "FitV",
    "FitBV",
    "XYZ",
    "FitR",
    "default_kind",
    "normalize_optional",
    "transform_kind",
    "transform_point",
    "transform_rect",
    "encode_kind",
]
