from typing import Dict, List

import fitz
import pytest

from pdflinks.core.document.objects import PdfRef


class FakeObjectModel:
    """Object model with ``page_count`` pages whose xrefs are 100 + n."""

    def __init__(self, page_count: int = 3):
        self.page_count = page_count
        self.lookups: List[int] = []
        self.inv_ctms: Dict[int, object] = {}

    def find_page(self, page_num: int) -> PdfRef:
        self.lookups.append(page_num)
        if page_num < 0 or page_num >= self.page_count:
            raise ValueError(f"bad page number {page_num}")
        return PdfRef(100 + page_num)

    def page_inv_ctm(self, page_ref: PdfRef):
        return self.inv_ctms.get(page_ref.xref - 100)


@pytest.fixture
def object_model() -> FakeObjectModel:
    return FakeObjectModel()


@pytest.fixture
def pdf_doc():
    """In-memory PDF with three US Letter pages."""
    doc = fitz.open()
    for _ in range(3):
        doc.new_page(width=612, height=792)
    yield doc
    doc.close()
