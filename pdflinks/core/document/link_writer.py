"""
Writing link annotations into PDF pages with PyMuPDF.
"""

from typing import Dict, Iterable, List, Optional

import fitz
from loguru import logger

from ...config import LinkSettings, settings as default_settings
from ...errors import PageOwnershipError
from ..links.models import PdfLink
from .annotation_builder import PageCache, build_link_annotation
from .objects import PdfRef, to_pdf_source


def _page_space_inverse(page: fitz.Page) -> fitz.Matrix:
    """Matrix from MuPDF page space (rotation applied) back to PDF user space."""
    return ~(page.transformation_matrix * page.rotation_matrix)


class FitzObjectModel:
    """
    Page lookups on a ``fitz.Document`` for the annotation builder.

    Page references are xrefs of the page objects. Coordinates given in
    MuPDF's page space (origin top-left, page rotation applied) are mapped
    back to PDF user space with the inverse of the full page transform.
    """

    def __init__(self, doc: fitz.Document):
        self.doc = doc
        self._page_numbers: Dict[int, int] = {}

    def find_page(self, page_num: int) -> PdfRef:
        """Reference to page ``page_num`` (0-based). ValueError if out of range."""
        if page_num < 0 or page_num >= self.doc.page_count:
            raise ValueError(f"Page {page_num} out of range (document has {self.doc.page_count} pages)")
        xref = self.doc.page_xref(page_num)
        self._page_numbers[xref] = page_num
        return PdfRef(xref)

    def page_inv_ctm(self, page_ref: PdfRef) -> fitz.Matrix:
        page = self.doc[self._page_numbers[page_ref.xref]]
        return _page_space_inverse(page)


def _append_annots(doc: fitz.Document, page: fitz.Page, refs: List[PdfRef]) -> None:
    """Append references to the page's /Annots array, creating it if needed."""
    new_items = " ".join(str(ref) for ref in refs)
    kind, value = doc.xref_get_key(page.xref, "Annots")

    if kind == "array":
        doc.xref_set_key(page.xref, "Annots", value.rstrip()[:-1] + " " + new_items + "]")
    elif kind == "xref":
        # Indirect array: update the array object itself
        annots_xref = int(value.split()[0])
        current = doc.xref_object(annots_xref, compressed=True).strip()
        doc.update_object(annots_xref, current[:-1] + " " + new_items + "]")
    else:
        doc.xref_set_key(page.xref, "Annots", "[" + new_items + "]")


def add_links(
    page: fitz.Page,
    links: Iterable[PdfLink],
    settings: Optional[LinkSettings] = None,
) -> fitz.Page:
    """
    Add link annotations to a page.

    Link bounds and ``GoTo`` destination coordinates are in MuPDF page
    space, as returned by ``PageLinkLayer``.

    Args:
        page: Page of a PDF document
        links: Links to add
        settings: Settings to use (defaults to the global ones)

    Returns:
        The reloaded page (the passed page object must not be used anymore)

    Raises:
        PageOwnershipError: The page does not belong to a PDF document
        ValueError: A ``GoTo`` link targets a page that does not exist
    """
    settings = settings or default_settings
    try:
        doc = page.parent
    except ValueError as e:
        # orphaned page
        raise PageOwnershipError("Page is not attached to a document") from e
    if doc is None or not doc.is_pdf:
        raise PageOwnershipError("Page is not part of a PDF document")

    links = list(links)
    if not links:
        return page

    model = FitzObjectModel(doc)
    page_ref = PdfRef(page.xref)
    annot_inv_ctm = _page_space_inverse(page)
    page_cache: PageCache = {}

    # All records are built before any object is written
    records = [
        build_link_annotation(
            model,
            page_ref,
            link,
            annot_inv_ctm,
            model.page_inv_ctm,
            page_cache,
            border_width=settings.border_width,
        )
        for link in links
    ]

    refs = []
    for record in records:
        xref = doc.get_new_xref()
        doc.update_object(xref, to_pdf_source(record))
        refs.append(PdfRef(xref))

    _append_annots(doc, page, refs)
    logger.info("Added {} links to page {}", len(refs), page.number)

    return doc.reload_page(page)
