"""
Building of link annotation dictionaries.

The result is a record (see ``objects``) ready to be serialized with
``to_pdf_source`` and stored as a new object in the document.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from ..destination.encoding import encode_kind
from ..destination.transform import transform_kind, transform_rect
from ..links.models import (
    FilePath,
    FileSpec,
    FileUrl,
    GoTo,
    GoToR,
    Launch,
    NamedDestination,
    PageDestination,
    PdfLink,
    Uri,
)
from .objects import ObjectModel, PdfName, PdfRef

PageCache = Dict[int, Tuple[PdfRef, Any]]


def build_filespec(path: str) -> dict:
    """
    File specification for a local path.

    ``F`` holds an ASCII-only copy (other characters replaced by ``_``) for
    old readers, ``UF`` the full path.
    """
    ascii_name = "".join(ch if " " <= ch <= "~" else "_" for ch in path)
    return {"Type": PdfName("Filespec"), "F": ascii_name, "UF": path}


def build_url_filespec(url: str) -> dict:
    """File specification for a URL (``/FS /URL``)."""
    return {"Type": PdfName("Filespec"), "FS": PdfName("URL"), "F": url}


def _build_file(file: FileSpec) -> dict:
    if isinstance(file, FileUrl):
        return build_url_filespec(file.url)
    elif isinstance(file, FilePath):
        return build_filespec(file.path)
    raise TypeError(f"Unknown file specification: {file!r}")


def _lookup_page(
    doc: ObjectModel,
    page_num: int,
    dest_inv_ctm_fn: Callable[[PdfRef], Any],
    page_cache: PageCache,
) -> Tuple[PdfRef, Any]:
    if page_num not in page_cache:
        page_ref = doc.find_page(page_num)
        page_cache[page_num] = (page_ref, dest_inv_ctm_fn(page_ref))
        logger.debug("Cached target page {} ({})", page_num, page_ref)
    return page_cache[page_num]


def build_link_annotation(
    doc: ObjectModel,
    page_ref: PdfRef,
    link: PdfLink,
    annot_inv_ctm: Optional[Any],
    dest_inv_ctm_fn: Callable[[PdfRef], Any],
    page_cache: PageCache,
    border_width: int = 0,
) -> dict:
    """
    Build the annotation dictionary for one link.

    Args:
        doc: Document used to look up target pages
        page_ref: Page the annotation is placed on
        link: Link to write
        annot_inv_ctm: Matrix applied to the link bounds, or None
        dest_inv_ctm_fn: Returns the matrix for a target page (or None)
        page_cache: Target page lookups, shared for one build pass
        border_width: Value of ``/BS /W``

    Returns:
        The annotation record

    Raises:
        ValueError: A ``GoTo`` target page does not exist
    """
    bounds = tuple(link.bounds)
    if annot_inv_ctm is not None:
        bounds = transform_rect(bounds, annot_inv_ctm)

    annot = {
        "Subtype": PdfName("Link"),
        "Rect": [float(v) for v in bounds],
        "BS": {"W": border_width},
    }

    action = link.action
    if isinstance(action, GoTo):
        dest = action.dest
        if isinstance(dest, PageDestination):
            target_ref, dest_inv_ctm = _lookup_page(doc, dest.page, dest_inv_ctm_fn, page_cache)
            kind = dest.kind
            if dest_inv_ctm is not None:
                kind = transform_kind(kind, dest_inv_ctm)
            dest_array: List[Any] = [target_ref]
            encode_kind(kind, dest_array)
            annot["A"] = {"S": PdfName("GoTo"), "D": dest_array}
        elif isinstance(dest, NamedDestination):
            annot["A"] = {"S": PdfName("GoTo"), "D": dest.name}
        else:
            raise TypeError(f"Unknown destination: {dest!r}")

    elif isinstance(action, Uri):
        annot["A"] = {"S": PdfName("URI"), "URI": action.uri}

    elif isinstance(action, GoToR):
        remote: Dict[str, Any] = {"S": PdfName("GoToR")}
        dest = action.dest
        if isinstance(dest, PageDestination):
            # Remote pages are plain numbers; coordinates are written untransformed
            dest_array = [dest.page]
            encode_kind(dest.kind, dest_array)
            remote["D"] = dest_array
        elif isinstance(dest, NamedDestination):
            remote["D"] = dest.name
        else:
            raise TypeError(f"Unknown destination: {dest!r}")
        remote["F"] = _build_file(action.file)
        annot["A"] = remote

    elif isinstance(action, Launch):
        annot["A"] = {"S": PdfName("Launch"), "F": _build_file(action.file)}

    else:
        raise TypeError(f"Unknown link action: {action!r}")

    annot["P"] = page_ref
    return annot
