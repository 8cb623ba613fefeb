"""
pdflinks: PDF link actions, their URI form, and link annotations via PyMuPDF.
"""

from loguru import logger

from .config import LinkSettings, settings
from .core.destination import (
    XYZ,
    DestinationKind,
    Fit,
    FitB,
    FitBH,
    FitBV,
    FitH,
    FitR,
    FitV,
    encode_kind,
    transform_kind,
)
from .core.document.annotation_builder import build_filespec, build_link_annotation, build_url_filespec
from .core.document.link_writer import FitzObjectModel, add_links
from .core.document.objects import PdfName, PdfRef, to_pdf_source
from .core.links import (
    ActionType,
    FilePath,
    FileUrl,
    GoTo,
    GoToR,
    Launch,
    NamedDestination,
    PageDestination,
    PdfLink,
    Uri,
    format_action,
    parse_link_uri,
)
from .core.page import PageLinkLayer
from .errors import LinkError, PageOwnershipError

# Enable with logger.enable("pdflinks")
logger.disable("pdflinks")

__all__ = [
    "LinkSettings",
    "settings",
    "LinkError",
    "PageOwnershipError",
    "DestinationKind",
    "Fit",
    "FitB",
    "FitH",
    "FitBH",
    "FitV",
    "FitBV",
    "XYZ",
    "FitR",
    "transform_kind",
    "encode_kind",
    "ActionType",
    "GoTo",
    "GoToR",
    "Launch",
    "Uri",
    "PageDestination",
    "NamedDestination",
    "FilePath",
    "FileUrl",
    "PdfLink",
    "format_action",
    "parse_link_uri",
    "PdfName",
    "PdfRef",
    "to_pdf_source",
    "build_link_annotation",
    "build_filespec",
    "build_url_filespec",
    "FitzObjectModel",
    "add_links",
    "PageLinkLayer",
]
