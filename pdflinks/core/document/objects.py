"""
Minimal PDF object model used while building link annotations.

Records are plain Python values: ``dict`` for dictionaries, ``list`` for
arrays, ``str`` for text strings, ``int``/``float`` for numbers, ``None`` for
null, plus ``PdfName`` and ``PdfRef``. ``to_pdf_source`` turns a record into
PDF syntax that PyMuPDF can store with ``Document.update_object``.
"""

import math
from dataclasses import dataclass
from typing import Any, Protocol

import fitz

# ==============================================================================
# Types
# ==============================================================================


@dataclass(frozen=True)
class PdfName:
    """A PDF name object, stored without the leading slash."""

    value: str

    def __str__(self) -> str:
        return "/" + self.value


@dataclass(frozen=True)
class PdfRef:
    """Indirect reference to an object in a document (generation 0)."""

    xref: int

    def __str__(self) -> str:
        return f"{self.xref} 0 R"


class ObjectModel(Protocol):
    """
    What the annotation builder needs from a document.

    ``find_page`` raises ValueError when the page does not exist.
    ``page_inv_ctm`` returns the inverse of the page transform as a matrix
    with ``a b c d e f`` attributes.
    """

    def find_page(self, page_num: int) -> PdfRef: ...

    def page_inv_ctm(self, page_ref: PdfRef) -> Any: ...


# ==============================================================================
# Serialization
# ==============================================================================

_NAME_DELIMITERS = set("()<>[]{}/%#")


def _format_name(value: str) -> str:
    out = []
    for byte in value.encode("utf-8"):
        ch = chr(byte)
        if byte < 0x21 or byte > 0x7E or ch in _NAME_DELIMITERS:
            out.append(f"#{byte:02X}")
        else:
            out.append(ch)
    return "/" + "".join(out)


def format_real(value: float) -> str:
    """Format a number the way PDF writers usually do ("%.6f", trimmed)."""
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"Cannot write non-finite number {value!r}")
    text = "%.6f" % value
    text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def to_pdf_source(obj: Any) -> str:
    """
    Serialize a record to PDF object syntax.

    Args:
        obj: Record built from dict/list/str/int/float/None/PdfName/PdfRef

    Returns:
        PDF source text of the object
    """
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, PdfName):
        return _format_name(obj.value)
    if isinstance(obj, PdfRef):
        return str(obj)
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, float):
        if math.isnan(obj):
            return "null"
        return format_real(obj)
    if isinstance(obj, str):
        return fitz.get_pdf_str(obj)
    if isinstance(obj, (list, tuple)):
        return "[" + " ".join(to_pdf_source(item) for item in obj) + "]"
    if isinstance(obj, dict):
        items = "".join(f"{_format_name(key)} {to_pdf_source(value)}" for key, value in obj.items())
        return "<<" + items + ">>"

    raise TypeError(f"Cannot serialize {type(obj).__name__} to PDF")
