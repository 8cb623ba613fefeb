"""
Link extraction and handling for PDF pages.
"""

from typing import Iterator, List, Optional, Tuple

import fitz
from loguru import logger

from ...config import LinkSettings, settings as default_settings
from ..destination.models import XYZ
from ..links.models import ActionType, GoTo, NamedDestination, PageDestination, PdfAction, PdfLink, Uri
from ..links.uri_parser import parse_link_uri


class PageLinkLayer:
    """
    Manages clickable links for a PDF page.

    Links are read from MuPDF as URIs and parsed back into actions.
    Coordinates are in MuPDF page space (origin top-left).
    """

    def __init__(self, page: fitz.Page, settings: Optional[LinkSettings] = None):
        self.page = page
        self.doc = page.parent
        self.settings = settings or default_settings
        self.links: List[PdfLink] = []

        self._extract_links()

    def _extract_links(self):
        """Extract all links from the page."""
        link = self.page.first_link
        while link is not None:
            pdf_link = self._parse_link(link)
            if pdf_link is not None:
                self.links.append(pdf_link)
            link = link.next

        logger.debug("Extracted {} links from page {}", len(self.links), self.page.number)

    def _parse_link(self, link: fitz.Link) -> Optional[PdfLink]:
        """Parse a MuPDF link into a PdfLink."""
        uri = link.uri or ""
        action = parse_link_uri(uri)
        if action is None:
            logger.warning("Skipping link without a usable URI on page {}", self.page.number)
            return None

        if self.settings.resolve_named_destinations and self._is_named_goto(action):
            resolved = self._resolve_named_destination(uri)
            if resolved is not None:
                action = resolved
            elif self.settings.skip_unresolved_named:
                logger.warning("Skipping link with unresolved destination: {}", uri)
                return None
            else:
                logger.warning("Could not resolve named destination: {}", uri)

        return PdfLink(bounds=tuple(link.rect), action=action)

    @staticmethod
    def _is_named_goto(action: PdfAction) -> bool:
        return isinstance(action, GoTo) and isinstance(action.dest, NamedDestination)

    def _resolve_named_destination(self, uri: str) -> Optional[GoTo]:
        """Resolve a named destination to a page/position."""
        result = self.doc.resolve_link(uri)
        if not result:
            return None

        page_num, x, y = result[0], result[1], result[2]
        if page_num is None or page_num < 0:
            return None

        return GoTo(PageDestination(page=page_num, kind=XYZ(left=x, top=y)))

    def get_link_at_point(self, x: float, y: float) -> Optional[PdfLink]:
        """
        Find the link at the given page coordinates.

        Returns the topmost link if multiple overlap.
        """
        # Check in reverse order (later links are on top)
        for link in reversed(self.links):
            if link.contains_point(x, y):
                return link
        return None

    def get_links_in_rect(self, rect: Tuple[float, float, float, float]) -> List[PdfLink]:
        """Get all links that intersect with a rectangle."""
        return [link for link in self.links if link.intersects(rect)]

    def get_links_by_type(self, action_type: ActionType) -> List[PdfLink]:
        """Get all links of a specific action type."""
        return [link for link in self.links if link.action_type == action_type]

    @property
    def internal_links(self) -> List[PdfLink]:
        """Get all links to destinations in this document."""
        return self.get_links_by_type(ActionType.GOTO)

    @property
    def external_links(self) -> List[PdfLink]:
        """Get all external URI links."""
        return [link for link in self.links if isinstance(link.action, Uri)]

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[PdfLink]:
        return iter(self.links)
