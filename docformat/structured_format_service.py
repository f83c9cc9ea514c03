"""Format-agnostic traversal of documentation nodes into sections and tables.

Subclasses supply the primitives (headers, paragraphs, tables, links, code)
for one output syntax; this module decides which sections are emitted and in
what order.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING

from docformat.content_node import (
    ContentBlockCode,
    ContentCode,
    ContentEmphasis,
    ContentExternalLink,
    ContentIdentifier,
    ContentKeyword,
    ContentList,
    ContentListItem,
    ContentNode,
    ContentNodeLink,
    ContentParagraph,
    ContentStrong,
    ContentSymbol,
    ContentText,
)
from docformat.documentation_node import NodeKind
from docformat.format_service import FormatService
from docformat.group_by import group_by
from docformat.location import FormatLink

if TYPE_CHECKING:
    from collections.abc import Iterable
    from contextlib import AbstractContextManager

    from docformat.documentation_node import DocumentationNode
    from docformat.language_service import LanguageService
    from docformat.location import Location, LocationService

logger = logging.getLogger(__name__)

RESERVED_SECTION_PREFIX = "$"
OTHER_MEMBERS = "Other members"

TYPE_KINDS = frozenset(
    {NodeKind.CLASS, NodeKind.INTERFACE, NodeKind.ENUM, NodeKind.OBJECT}
)

# Order is part of the page layout.
MEMBER_CATEGORIES: tuple[tuple[str, frozenset[NodeKind]], ...] = (
    ("Packages", frozenset({NodeKind.PACKAGE})),
    ("Types", TYPE_KINDS),
    ("Constructors", frozenset({NodeKind.CONSTRUCTOR})),
    ("Properties", frozenset({NodeKind.PROPERTY})),
    ("Functions", frozenset({NodeKind.FUNCTION})),
    ("Accessors", frozenset({NodeKind.PROPERTY_ACCESSOR})),
)
CATEGORIZED_KINDS: frozenset[NodeKind] = frozenset().union(
    *(kinds for _, kinds in MEMBER_CATEGORIES)
)


def categorize_members(
    node: DocumentationNode,
) -> list[tuple[str, list[DocumentationNode]]]:
    """Split node members into captioned categories, in page order.

    Every member lands in exactly one category; kinds not named by
    MEMBER_CATEGORIES go to "Other members".
    """
    categories = [
        (caption, [m for m in node.members if m.kind in kinds])
        for caption, kinds in MEMBER_CATEGORIES
    ]
    others = [m for m in node.members if m.kind not in CATEGORIZED_KINDS]
    categories.append((OTHER_MEMBERS, others))
    return categories


class StructuredFormatService(FormatService):
    """Renders sections, tables and breadcrumbs through format primitives."""

    def __init__(
        self,
        location_service: LocationService,
        language_service: LanguageService,
    ) -> None:
        """Initialize the formatter with its link and signature collaborators."""
        self.location_service = location_service
        self.language_service = language_service

    # -----------------------------
    # Format primitives
    # -----------------------------

    @abstractmethod
    def append_block_code(self, to: list[str], line: str) -> None: ...

    @abstractmethod
    def append_block_code_lines(self, to: list[str], lines: Iterable[str]) -> None:
        """Append one code block made of several lines."""

    @abstractmethod
    def append_header(self, to: list[str], text: str, level: int = 1) -> None: ...

    @abstractmethod
    def append_text(self, to: list[str], text: str) -> None:
        """Append an already formatted paragraph."""

    @abstractmethod
    def append_line(self, to: list[str], text: str = "") -> None:
        """Append a line of formatted text; no text appends an empty line."""

    @abstractmethod
    def append_table(self, to: list[str]) -> AbstractContextManager[None]:
        """Wrap whatever the with-block appends in a table."""

    @abstractmethod
    def append_table_header(self, to: list[str]) -> AbstractContextManager[None]: ...

    @abstractmethod
    def append_table_body(self, to: list[str]) -> AbstractContextManager[None]: ...

    @abstractmethod
    def append_table_row(self, to: list[str]) -> AbstractContextManager[None]: ...

    @abstractmethod
    def append_table_cell(self, to: list[str]) -> AbstractContextManager[None]: ...

    @abstractmethod
    def format_text(self, text: str) -> str:
        """Escape raw text for the output format."""

    @abstractmethod
    def format_symbol(self, text: str) -> str: ...

    @abstractmethod
    def format_keyword(self, text: str) -> str: ...

    @abstractmethod
    def format_identifier(self, text: str) -> str: ...

    @abstractmethod
    def format_link(self, text: str, location: Location) -> str:
        """Link formatted text to a resolved location."""

    @abstractmethod
    def format_external_link(self, text: str, href: str) -> str:
        """Link formatted text to a raw href."""

    @abstractmethod
    def format_strong(self, text: str) -> str: ...

    @abstractmethod
    def format_emphasis(self, text: str) -> str: ...

    @abstractmethod
    def format_code(self, code: str) -> str: ...

    @abstractmethod
    def format_list(self, text: str) -> str: ...

    @abstractmethod
    def format_list_item(self, text: str) -> str: ...

    @abstractmethod
    def format_breadcrumbs(self, items: Iterable[FormatLink]) -> str:
        """Join the ancestor links shown above a node."""

    @abstractmethod
    def append_outline_header(self, to: list[str], node: DocumentationNode) -> None:
        """Append the outline entry of a node."""

    @abstractmethod
    def append_outline_children(
        self,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Append the outline entries of a node's members."""

    def format_cross_link(self, link: FormatLink) -> str:
        """Format a cross-reference, escaping its display text."""
        return self.format_link(self.format_text(link.text), link.location)

    # -----------------------------
    # Content
    # -----------------------------

    def render_text(
        self,
        location: Location,
        content: ContentNode | Iterable[ContentNode],
    ) -> str:
        """Render a content node, or a sequence of them, to formatted text."""
        if isinstance(content, ContentNode):
            return self._render_content_node(location, content)
        if isinstance(content, str):
            msg = "render_text expects content nodes, not a str"
            raise TypeError(msg)
        return "".join(self._render_content_node(location, c) for c in content)

    def _render_content_node(self, location: Location, content: ContentNode) -> str:  # noqa: PLR0911, PLR0912
        """Dispatch on the content variant."""
        match content:
            case ContentText(text=text):
                return self.format_text(text)
            case ContentSymbol(text=text):
                return self.format_symbol(text)
            case ContentKeyword(text=text):
                return self.format_keyword(text)
            case ContentIdentifier(text=text):
                return self.format_identifier(text)
            case ContentStrong():
                return self.format_strong(self.render_text(location, content.children))
            case ContentCode():
                return self.format_code(self.render_text(location, content.children))
            case ContentEmphasis():
                return self.format_emphasis(
                    self.render_text(location, content.children)
                )
            case ContentList():
                return self.format_list(self.render_text(location, content.children))
            case ContentListItem():
                return self.format_list_item(
                    self.render_text(location, content.children)
                )
            case ContentNodeLink(node=target):
                link_to = self.location_service.relative_location(
                    location, target, self.extension
                )
                link_text = self.render_text(location, content.children)
                return self.format_link(link_text, link_to)
            case ContentExternalLink(href=href):
                link_text = self.render_text(location, content.children)
                return self.format_external_link(link_text, href)
            case ContentParagraph():
                parts: list[str] = []
                self.append_text(parts, self.render_text(location, content.children))
                return "".join(parts)
            case ContentBlockCode():
                parts = []
                self.append_block_code(
                    parts, self.render_text(location, content.children)
                )
                return "".join(parts)
            case _:
                return self.render_text(location, content.children)

    def cross_link(
        self,
        from_node: DocumentationNode,
        to_node: DocumentationNode,
        extension: str | None = None,
    ) -> FormatLink:
        """Build the link from one node's page to another node."""
        location = self.location_service.relative_location(
            from_node, to_node, extension or self.extension
        )
        return FormatLink(to_node.name, location)

    def _render_signature(self, location: Location, node: DocumentationNode) -> str:
        return self.render_text(location, self.language_service.render(node))

    # -----------------------------
    # Sections
    # -----------------------------

    def render_description(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render the Description section of nodes that have content."""
        described = [n for n in nodes if not n.content.is_empty]
        if not described:
            return

        single = len(described) == 1
        self.append_header(to, "Description", 3)
        for node in described:
            if not single:
                self.append_block_code(to, self._render_signature(location, node))
            self.append_line(to, self.render_text(location, node.content.description))
            self.append_line(to)

            member_names = {m.name for m in node.members}
            for label, section in node.content.sections.items():
                # $-sections are rendered above; member-named ones get tables
                if label.startswith(RESERVED_SECTION_PREFIX) or label in member_names:
                    continue
                self.append_line(to, self.format_strong(self.format_text(label)))
                self.append_line(to, self.render_text(location, section))

    def render_summary(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render signatures of nodes, grouped under their shared summary."""
        by_summary = group_by(nodes, lambda n: self.render_text(location, n.summary))
        for summary, items in by_summary.items():
            for item in items:
                self.append_block_code(to, self._render_signature(location, item))
            self.append_line(to, summary)
            self.append_line(to)

    def render_location_block(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render a header, summary and description per distinct node name."""
        for name, items in group_by(nodes, lambda n: n.name).items():
            self.append_header(to, self.format_text(name))
            self.render_summary(location, to, items)
            self.render_description(location, to, items)

    def render_section(
        self,
        location: Location,
        caption: str,
        members: Iterable[DocumentationNode],
        owner: DocumentationNode,
        to: list[str],
    ) -> None:
        """Render a captioned table of members, one row per link target."""
        children = sorted(members, key=lambda m: m.name)
        if not children:
            return

        self.append_header(to, caption, 3)
        by_link = group_by(children, lambda m: self.cross_link(owner, m))
        with self.append_table(to), self.append_table_body(to):
            for link, group in by_link.items():
                with self.append_table_row(to):
                    with self.append_table_cell(to):
                        self.append_text(to, self.format_cross_link(link))
                    with self.append_table_cell(to):
                        self._render_member_cell(location, to, group)

    def _render_member_cell(
        self,
        location: Location,
        to: list[str],
        members: list[DocumentationNode],
    ) -> None:
        """Render signatures, each summary group followed by its summary."""
        by_summary = group_by(members, lambda m: self.render_text(location, m.summary))
        for summary, items in by_summary.items():
            for item in items:
                self.append_block_code(to, self._render_signature(location, item))
            if summary:
                self.append_text(to, summary)

    def _breadcrumbs(self, node: DocumentationNode) -> str:
        return self.format_breadcrumbs(
            [self.cross_link(node, ancestor) for ancestor in node.path]
        )

    def append_nodes(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render breadcrumbs, summaries, descriptions and member tables."""
        nodes = list(nodes)
        logger.debug("Rendering %d node(s) at %s", len(nodes), location.path)

        for breadcrumbs, items in group_by(nodes, self._breadcrumbs).items():
            self.append_line(to, breadcrumbs)
            self.append_line(to)
            self.render_location_block(location, to, items)

        for node in nodes:
            for caption, members in categorize_members(node):
                self.render_section(location, caption, members, node, to)
            self.render_section(location, "Extensions", node.extensions, node, to)
            self.render_section(location, "Inheritors", node.inheritors, node, to)
            self.render_section(location, "Links", node.links, node, to)

    def append_outline(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render outline entries; recursing into members is up to the hooks."""
        nodes = list(nodes)
        logger.debug("Rendering outline of %d node(s) at %s", len(nodes), location.path)
        for node in nodes:
            self.append_outline_header(to, node)
            if node.members:
                self.append_outline_children(to, node.members)
