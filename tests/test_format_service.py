"""Tests for the buffer-owning render helpers."""

from collections.abc import Iterable

from docformat.documentation_node import DocumentationNode, NodeKind
from docformat.format_service import FormatService, format_nodes, format_outline
from docformat.location import Location


class RecordingFormatService(FormatService):
    """Writes the names it was asked to render."""

    extension = "txt"

    def append_nodes(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        to.extend(f"{location.path}:{n.name}\n" for n in nodes)

    def append_outline(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        to.extend(f"- {n.name}\n" for n in nodes)


def test_format_nodes_uses_fresh_buffer() -> None:
    """Verify that each call starts from an empty buffer."""
    service = RecordingFormatService()
    nodes = [
        DocumentationNode("a", NodeKind.CLASS),
        DocumentationNode("b", NodeKind.CLASS),
    ]
    first = format_nodes(service, Location("x"), nodes)
    second = format_nodes(service, Location("x"), nodes)
    assert first == second == "x:a\nx:b\n"


def test_format_outline() -> None:
    """Verify that outlines are returned as text."""
    service = RecordingFormatService()
    nodes = iter([DocumentationNode("a", NodeKind.CLASS)])
    outline = format_outline(service, Location("x"), nodes)
    assert outline == "- a\n"
