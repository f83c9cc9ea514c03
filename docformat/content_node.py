"""Data models for the structured text of documentation comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docformat.documentation_node import DocumentationNode

SUMMARY_SECTION = "$summary"
DESCRIPTION_SECTION = "$description"


@dataclass(eq=False)
class ContentNode:
    """Base of the content tree; containers keep their children in order."""

    children: list[ContentNode] = field(default_factory=list, kw_only=True)

    def append(self, child: ContentNode) -> None:
        """Append a child node."""
        self.children.append(child)

    @property
    def is_empty(self) -> bool:
        """Check if the node has no children."""
        return not self.children


@dataclass(eq=False)
class ContentLeaf(ContentNode):
    """A node holding literal text."""

    text: str = ""

    def __post_init__(self) -> None:
        if self.children:
            msg = f"{type(self).__name__} cannot hold children"
            raise TypeError(msg)

    def append(self, child: ContentNode) -> None:
        """Reject children: leaves only carry text."""
        msg = f"{type(self).__name__} cannot hold children"
        raise TypeError(msg)

    @property
    def is_empty(self) -> bool:
        """Check if the leaf has no text."""
        return not self.text


class ContentText(ContentLeaf):
    """Plain text."""


class ContentSymbol(ContentLeaf):
    """Punctuation in a signature, e.g. ``(`` or ``:``."""


class ContentKeyword(ContentLeaf):
    """A language keyword in a signature."""


class ContentIdentifier(ContentLeaf):
    """An identifier in a signature."""


class ContentBlock(ContentNode):
    """Generic container."""


class ContentStrong(ContentBlock):
    pass


class ContentCode(ContentBlock):
    pass


class ContentEmphasis(ContentBlock):
    pass


class ContentList(ContentBlock):
    pass


class ContentListItem(ContentBlock):
    pass


class ContentParagraph(ContentBlock):
    pass


class ContentBlockCode(ContentBlock):
    pass


@dataclass(eq=False)
class ContentNodeLink(ContentBlock):
    """A reference to another documentation node."""

    node: DocumentationNode | None = None


@dataclass(eq=False)
class ContentExternalLink(ContentBlock):
    """A link to a raw href."""

    href: str = ""


@dataclass(eq=False)
class ContentSection(ContentBlock):
    """A labelled part of a documentation comment."""

    label: str = ""


@dataclass(eq=False)
class Content:
    """The documentation body of a node, as ordered labelled sections.

    Labels starting with ``$`` are generated (``$summary``, ``$description``);
    everything else comes from tags in the source comment.
    """

    sections: dict[str, ContentSection] = field(default_factory=dict)

    def add_section(self, label: str) -> ContentSection:
        """Return the section for a label, creating it on first use."""
        section = self.sections.get(label)
        if section is None:
            section = ContentSection(label=label)
            self.sections[label] = section
        return section

    @property
    def summary(self) -> ContentNode:
        """Return the summary section, or an empty block."""
        return self.sections.get(SUMMARY_SECTION) or ContentBlock()

    @property
    def description(self) -> ContentNode:
        """Return the description section, or an empty block."""
        return self.sections.get(DESCRIPTION_SECTION) or ContentBlock()

    @property
    def is_empty(self) -> bool:
        """Check if no section was recorded."""
        return not self.sections
