from types import SimpleNamespace

import fitz
import pytest

from pdflinks import LinkSettings, PageOwnershipError
from pdflinks.core.destination import XYZ, Fit
from pdflinks.core.document.link_writer import FitzObjectModel, add_links
from pdflinks.core.document.objects import PdfRef
from pdflinks.core.links import FilePath, GoTo, GoToR, PageDestination, PdfLink, Uri


def _annot_xrefs(doc, page):
    kind, value = doc.xref_get_key(page.xref, "Annots")
    assert kind == "array"
    return [int(token) for token in value.strip("[]").split()[0::3]]


def test_object_model(pdf_doc) -> None:
    model = FitzObjectModel(pdf_doc)
    ref = model.find_page(1)
    assert ref == PdfRef(pdf_doc.page_xref(1))
    assert tuple(model.page_inv_ctm(ref)) == pytest.approx((1, 0, 0, -1, 0, 792))


@pytest.mark.parametrize("rotation", [90, 180, 270])
def test_object_model_includes_rotation(pdf_doc, rotation) -> None:
    page = pdf_doc[1]
    page.set_rotation(rotation)
    model = FitzObjectModel(pdf_doc)

    inv_ctm = model.page_inv_ctm(model.find_page(1))
    product = inv_ctm * page.transformation_matrix * page.rotation_matrix
    assert tuple(product) == pytest.approx((1, 0, 0, 1, 0, 0))


def test_object_model_missing_page(pdf_doc) -> None:
    with pytest.raises(ValueError):
        FitzObjectModel(pdf_doc).find_page(3)


def test_add_uri_link(pdf_doc) -> None:
    page = add_links(pdf_doc[0], [PdfLink((10, 20, 110, 40), Uri("https://example.com"))])

    (xref,) = _annot_xrefs(pdf_doc, page)
    assert pdf_doc.xref_get_key(xref, "Subtype") == ("name", "/Link")
    assert pdf_doc.xref_get_key(xref, "A/S") == ("name", "/URI")

    links = page.get_links()
    assert len(links) == 1
    assert links[0]["kind"] == fitz.LINK_URI
    assert links[0]["uri"] == "https://example.com"
    assert tuple(links[0]["from"]) == pytest.approx((10, 20, 110, 40))


def test_add_goto_link(pdf_doc) -> None:
    page = add_links(pdf_doc[0], [PdfLink((10, 60, 110, 80), GoTo(PageDestination(2, XYZ(72, 100))))])

    (xref,) = _annot_xrefs(pdf_doc, page)
    assert pdf_doc.xref_get_key(xref, "A/S") == ("name", "/GoTo")
    assert pdf_doc.xref_get_key(xref, "A/D")[0] == "array"

    links = page.get_links()
    assert links[0]["kind"] == fitz.LINK_GOTO
    assert links[0]["page"] == 2


def test_add_remote_link(pdf_doc) -> None:
    page = add_links(pdf_doc[0], [PdfLink((0, 0, 50, 50), GoToR(FilePath("/docs/other.pdf"), PageDestination(3, Fit())))])

    (xref,) = _annot_xrefs(pdf_doc, page)
    assert pdf_doc.xref_get_key(xref, "A/S") == ("name", "/GoToR")
    assert pdf_doc.xref_get_key(xref, "A/F/Type") == ("name", "/Filespec")


def test_links_are_appended(pdf_doc) -> None:
    page = add_links(pdf_doc[0], [PdfLink((0, 0, 10, 10), Uri("https://a.example"))])
    page = add_links(
        page,
        [
            PdfLink((0, 20, 10, 30), Uri("https://b.example")),
            PdfLink((0, 40, 10, 50), Uri("https://c.example")),
        ],
    )

    assert len(_annot_xrefs(pdf_doc, page)) == 3
    assert [link["uri"] for link in page.get_links()] == [
        "https://a.example",
        "https://b.example",
        "https://c.example",
    ]


def test_border_width_setting(pdf_doc) -> None:
    page = add_links(
        pdf_doc[0],
        [PdfLink((0, 0, 10, 10), Uri("https://a.example"))],
        settings=LinkSettings(border_width=3),
    )
    (xref,) = _annot_xrefs(pdf_doc, page)
    assert pdf_doc.xref_get_key(xref, "BS/W") == ("int", "3")


def test_bad_target_leaves_page_untouched(pdf_doc) -> None:
    page = pdf_doc[0]
    xref_count = pdf_doc.xref_length()

    with pytest.raises(ValueError):
        add_links(
            page,
            [
                PdfLink((0, 0, 10, 10), Uri("https://a.example")),
                PdfLink((0, 20, 10, 30), GoTo(PageDestination(10))),
            ],
        )

    assert pdf_doc.xref_get_key(page.xref, "Annots")[0] == "null"
    assert pdf_doc.xref_length() == xref_count


def test_page_without_pdf_document() -> None:
    page = SimpleNamespace(parent=SimpleNamespace(is_pdf=False))
    with pytest.raises(PageOwnershipError):
        add_links(page, [PdfLink((0, 0, 1, 1), Uri("https://a.example"))])
