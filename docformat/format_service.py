"""Base interface of documentation formatters and helpers to run them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docformat.documentation_node import DocumentationNode
    from docformat.location import Location


class FormatService(ABC):
    """Turns documentation nodes into text of one output format."""

    extension: str

    @abstractmethod
    def append_nodes(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render the documentation page for nodes into the buffer."""

    @abstractmethod
    def append_outline(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render the outline (table of contents) for nodes into the buffer."""


def format_nodes(
    service: FormatService,
    location: Location,
    nodes: Iterable[DocumentationNode],
) -> str:
    """Render a documentation page for nodes into a fresh buffer."""
    to: list[str] = []
    service.append_nodes(location, to, list(nodes))
    return "".join(to)


def format_outline(
    service: FormatService,
    location: Location,
    nodes: Iterable[DocumentationNode],
) -> str:
    """Render an outline for nodes into a fresh buffer."""
    to: list[str] = []
    service.append_outline(location, to, list(nodes))
    return "".join(to)
