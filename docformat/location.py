"""Data models for link destinations and the service that resolves them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docformat.documentation_node import DocumentationNode


@dataclass(frozen=True)
class Location:
    """Represents the destination of a link."""

    path: str  # e.g. ../pkg/Foo.html


@dataclass(frozen=True)
class FormatLink:
    """Represents one renderable cross-reference."""

    text: str
    location: Location


class LocationService(Protocol):
    """Resolves where a node's documentation lives, relative to an owner."""

    def relative_location(
        self,
        owner: Location | DocumentationNode,
        target: DocumentationNode,
        extension: str,
    ) -> Location:
        """Return the location of target as seen from owner."""
        ...
