"""
Exceptions raised by pdflinks itself.

Errors coming from the document engine (PyMuPDF) are not wrapped.
"""


class LinkError(Exception):
    """Base class for link handling errors."""


class PageOwnershipError(LinkError):
    """The page is not attached to an open PDF document."""
