"""Shared fakes for formatter tests."""

from collections.abc import Callable

import pytest

from docformat.content_node import (
    DESCRIPTION_SECTION,
    SUMMARY_SECTION,
    ContentBlock,
    ContentIdentifier,
    ContentKeyword,
    ContentNode,
    ContentSymbol,
    ContentText,
)
from docformat.documentation_node import DocumentationNode, NodeKind
from docformat.html_format_service import HtmlFormatService
from docformat.location import Location


class PathLocationService:
    """Resolves a node to its ancestor names joined by '/', plus the extension."""

    def __init__(self) -> None:
        """Initialize the call log."""
        self.calls: list[tuple[object, DocumentationNode, str]] = []

    def relative_location(
        self,
        owner: Location | DocumentationNode,
        target: DocumentationNode,
        extension: str,
    ) -> Location:
        """Return a location that ignores the owner."""
        self.calls.append((owner, target, extension))
        return Location("/".join(n.name for n in target.path) + f".{extension}")


class SignatureLanguageService:
    """Renders `fun name(params)` from a node's Parameter members."""

    def render(self, node: DocumentationNode) -> ContentNode:
        """Return the signature content."""
        params = ", ".join(p.name for p in node.members_of_kind(NodeKind.PARAMETER))
        return ContentBlock(
            children=[
                ContentKeyword("fun"),
                ContentText(" "),
                ContentIdentifier(node.name),
                ContentSymbol(f"({params})"),
            ]
        )


def signature_html(name: str, params: str = "") -> str:
    """Return the HTML SignatureLanguageService renders for a node."""
    return (
        '<span class="keyword">fun</span> '
        f'<span class="identifier">{name}</span>'
        f'<span class="symbol">({params})</span>'
    )


def make_node(
    name: str,
    kind: NodeKind = NodeKind.FUNCTION,
    *,
    summary: str = "",
    description: str = "",
    owner: DocumentationNode | None = None,
) -> DocumentationNode:
    """Build a node with optional summary/description text and owner."""
    node = DocumentationNode(name, kind)
    if summary:
        node.content.add_section(SUMMARY_SECTION).append(ContentText(summary))
    if description:
        node.content.add_section(DESCRIPTION_SECTION).append(ContentText(description))
    if owner is not None:
        owner.append_member(node)
    return node


@pytest.fixture
def location_service() -> PathLocationService:
    """Return a deterministic location service."""
    return PathLocationService()


@pytest.fixture
def language_service() -> SignatureLanguageService:
    """Return a signature renderer."""
    return SignatureLanguageService()


@pytest.fixture
def html_service(
    location_service: PathLocationService,
    language_service: SignatureLanguageService,
) -> HtmlFormatService:
    """Return an HTML formatter over the fakes."""
    return HtmlFormatService(location_service, language_service)


@pytest.fixture
def node_factory() -> Callable[..., DocumentationNode]:
    """Return the node builder."""
    return make_node


@pytest.fixture
def signature() -> Callable[..., str]:
    """Return the expected-signature builder."""
    return signature_html
