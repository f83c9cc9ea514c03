"""Interface of the collaborator that renders declaration signatures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docformat.content_node import ContentNode
    from docformat.documentation_node import DocumentationNode


class LanguageService(Protocol):
    """Renders the signature of a node as content."""

    def render(self, node: DocumentationNode) -> ContentNode:
        """Return the signature content for node."""
        ...
