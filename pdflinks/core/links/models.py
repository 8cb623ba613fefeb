"""
Link actions, destinations and file specifications.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from ..destination.models import DestinationKind, default_kind

Rect = Tuple[float, float, float, float]

# ==============================================================================
# Types
# ==============================================================================


class ActionType(Enum):
    """Types of link actions."""

    GOTO = "goto"  # Destination in the same document
    GOTO_R = "goto_r"  # Destination in another PDF
    LAUNCH = "launch"  # Open a file
    URI = "uri"  # External URI


# ==============================================================================
# Destinations
# ==============================================================================


@dataclass(frozen=True)
class PageDestination:
    """A page (0-based) and how to show it."""

    page: int = 0
    kind: DestinationKind = field(default_factory=default_kind)

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"Page number must not be negative: {self.page}")


@dataclass(frozen=True)
class NamedDestination:
    """A destination looked up by name in the target document."""

    name: str


PdfDestination = Union[PageDestination, NamedDestination]


def default_destination() -> PageDestination:
    """First page, XYZ with nothing specified."""
    return PageDestination()


# ==============================================================================
# File Specifications
# ==============================================================================


@dataclass(frozen=True)
class FilePath:
    """A file system path (decoded, cleaned)."""

    path: str


@dataclass(frozen=True)
class FileUrl:
    """A URL pointing to a file, kept verbatim."""

    url: str


FileSpec = Union[FilePath, FileUrl]


# ==============================================================================
# Actions
# ==============================================================================


class _Action:
    action_type: ActionType

    def to_uri(self) -> str:
        """Format this action as a link URI."""
        from .uri_format import format_action

        return format_action(self)


@dataclass(frozen=True)
class GoTo(_Action):
    """Go to a destination in the current document."""

    dest: PdfDestination

    action_type = ActionType.GOTO


@dataclass(frozen=True)
class GoToR(_Action):
    """Go to a destination in another PDF file."""

    file: FileSpec
    dest: PdfDestination = field(default_factory=default_destination)

    action_type = ActionType.GOTO_R


@dataclass(frozen=True)
class Launch(_Action):
    """Open a (non-PDF) file."""

    file: FileSpec

    action_type = ActionType.LAUNCH


@dataclass(frozen=True)
class Uri(_Action):
    """Open an external URI."""

    uri: str

    action_type = ActionType.URI


PdfAction = Union[GoTo, GoToR, Launch, Uri]


# ==============================================================================
# Links
# ==============================================================================


@dataclass
class PdfLink:
    """A clickable area on a page and the action it triggers."""

    bounds: Rect  # x0, y0, x1, y1
    action: PdfAction

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is within this link's bounds."""
        return self.bounds[0] <= x <= self.bounds[2] and self.bounds[1] <= y <= self.bounds[3]

    def intersects(self, rect: Rect) -> bool:
        """Check if this link's bounds touch or overlap ``rect``."""
        x0, y0, x1, y1 = rect
        return (
            self.bounds[0] <= x1
            and self.bounds[2] >= x0
            and self.bounds[1] <= y1
            and self.bounds[3] >= y0
        )

    @property
    def action_type(self) -> ActionType:
        return self.action.action_type

    @property
    def display_text(self) -> str:
        """Get a displayable description of the link."""
        action = self.action
        if isinstance(action, Uri):
            return action.uri or "External Link"
        elif isinstance(action, GoTo):
            if isinstance(action.dest, PageDestination):
                return f"Go to page {action.dest.page + 1}"
            return f"#{action.dest.name}"
        elif isinstance(action, Launch):
            return _file_text(action.file) or "Open File"
        elif isinstance(action, GoToR):
            return _file_text(action.file) or "Remote Link"
        return "Link"


def _file_text(file: FileSpec) -> str:
    if isinstance(file, FilePath):
        return file.path
    return file.url
