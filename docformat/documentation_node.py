"""Data models for representing documented declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from docformat.content_node import Content, ContentNode


class NodeKind(Enum):
    """Kind of a documented declaration."""

    MODULE = "Module"
    PACKAGE = "Package"
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    ENUM_ITEM = "EnumItem"
    OBJECT = "Object"
    CONSTRUCTOR = "Constructor"
    PROPERTY = "Property"
    FUNCTION = "Function"
    PROPERTY_ACCESSOR = "PropertyAccessor"
    PARAMETER = "Parameter"
    TYPE_PARAMETER = "TypeParameter"
    ANNOTATION = "Annotation"
    UNKNOWN = "Unknown"


@dataclass(eq=False)
class DocumentationNode:
    """Represents a documented item (package, class, function, etc.)."""

    name: str
    kind: NodeKind
    content: Content = field(default_factory=Content)
    owner: DocumentationNode | None = None
    members: list[DocumentationNode] = field(default_factory=list)
    extensions: list[DocumentationNode] = field(default_factory=list)
    inheritors: list[DocumentationNode] = field(default_factory=list)
    links: list[DocumentationNode] = field(default_factory=list)

    @property
    def summary(self) -> ContentNode:
        """Return the summary part of the node content."""
        return self.content.summary

    @property
    def path(self) -> list[DocumentationNode]:
        """Return the ancestor chain, root first, ending with this node."""
        chain: list[DocumentationNode] = []
        node: DocumentationNode | None = self
        while node is not None:
            chain.append(node)
            node = node.owner
        chain.reverse()
        return chain

    def members_of_kind(self, *kinds: NodeKind) -> list[DocumentationNode]:
        """Return the members of the given kinds, in declaration order."""
        return [m for m in self.members if m.kind in kinds]

    def append_member(self, member: DocumentationNode) -> DocumentationNode:
        """Add a member and make this node its owner."""
        member.owner = self
        self.members.append(member)
        return member

    def __repr__(self) -> str:
        return f"DocumentationNode({self.name!r}, {self.kind.value})"
