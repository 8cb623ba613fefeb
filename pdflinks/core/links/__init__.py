"""
Link actions and their URI representation.
"""

from .models import (
    ActionType,
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
    PdfLink,
    Uri,
    default_destination,
)
from .paths import (
    clean_path,
    decode_and_clean_path,
    decode_uri_component,
    encode_uri_component,
    encode_uri_pathname,
    is_external_link,
    is_pdf_path,
)
from .uri_format import format_action, format_kind_suffix
from .uri_parser import FragmentKind, ParsedFragment, parse_link_uri, parse_params

__all__ = [
    "ActionType",
    "PdfAction",
    "GoTo",
    "GoToR",
    "Launch",
    "Uri",
    "PdfDestination",
    "PageDestination",
    "NamedDestination",
    "default_destination",
    "FileSpec",
    "FilePath",
    "FileUrl",
    "PdfLink",
    "encode_uri_component",
    "encode_uri_pathname",
    "decode_uri_component",
    "clean_path",
    "decode_and_clean_path",
    "is_external_link",
    "is_pdf_path",
    "format_action",
    "format_kind_suffix",
    "parse_link_uri",
    "parse_params",
    "ParsedFragment",
    "FragmentKind",
]
