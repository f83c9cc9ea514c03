"""HTML rendering of the structured documentation layout."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from docformat.html_escape import html_escape
from docformat.html_template_service import DefaultHtmlTemplateService
from docformat.structured_format_service import StructuredFormatService

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from contextlib import AbstractContextManager

    from docformat.documentation_node import DocumentationNode
    from docformat.html_template_service import HtmlTemplateService
    from docformat.language_service import LanguageService
    from docformat.location import FormatLink, Location, LocationService

BREADCRUMB_SEPARATOR = "&nbsp;/&nbsp;"
MAX_HEADER_LEVEL = 6


class HtmlFormatService(StructuredFormatService):
    """Writes HTML fragments wrapped in a page template."""

    extension = "html"

    def __init__(
        self,
        location_service: LocationService,
        language_service: LanguageService,
        template_service: HtmlTemplateService | None = None,
        *,
        breadcrumb_separator: str = BREADCRUMB_SEPARATOR,
    ) -> None:
        """Initialize the formatter; the default template has no stylesheet."""
        super().__init__(location_service, language_service)
        self.template_service = template_service or DefaultHtmlTemplateService()
        self.breadcrumb_separator = breadcrumb_separator

    def format_text(self, text: str) -> str:
        return html_escape(text)

    def format_symbol(self, text: str) -> str:
        return f'<span class="symbol">{self.format_text(text)}</span>'

    def format_keyword(self, text: str) -> str:
        return f'<span class="keyword">{self.format_text(text)}</span>'

    def format_identifier(self, text: str) -> str:
        return f'<span class="identifier">{self.format_text(text)}</span>'

    def append_block_code(self, to: list[str], line: str) -> None:
        to.append(f"<pre><code>{line}</code></pre>")

    def append_block_code_lines(self, to: list[str], lines: Iterable[str]) -> None:
        self.append_block_code(to, "\n".join(lines))

    def append_header(self, to: list[str], text: str, level: int = 1) -> None:
        """Append an h1..h6 header."""
        if not 1 <= level <= MAX_HEADER_LEVEL:
            msg = f"Header level out of range 1..{MAX_HEADER_LEVEL}: {level}"
            raise ValueError(msg)
        to.append(f"<h{level}>{text}</h{level}>\n")

    def append_text(self, to: list[str], text: str) -> None:
        to.append(f"<p>{text}</p>\n")

    def append_line(self, to: list[str], text: str = "") -> None:
        to.append(f"{text}<br/>\n")

    @contextmanager
    def _element(self, to: list[str], tag: str) -> Iterator[None]:
        """Append an opening tag, the body of the with-block, the closing tag."""
        to.append(f"<{tag}>\n")
        yield
        to.append(f"</{tag}>\n")

    def append_table(self, to: list[str]) -> AbstractContextManager[None]:
        return self._element(to, "table")

    def append_table_header(self, to: list[str]) -> AbstractContextManager[None]:
        return self._element(to, "thead")

    def append_table_body(self, to: list[str]) -> AbstractContextManager[None]:
        return self._element(to, "tbody")

    def append_table_row(self, to: list[str]) -> AbstractContextManager[None]:
        return self._element(to, "tr")

    def append_table_cell(self, to: list[str]) -> AbstractContextManager[None]:
        return self._element(to, "td")

    def format_link(self, text: str, location: Location) -> str:
        return f'<a href="{location.path}">{text}</a>'

    def format_external_link(self, text: str, href: str) -> str:
        return f'<a href="{href}">{text}</a>'

    def format_strong(self, text: str) -> str:
        return f"<strong>{text}</strong>"

    def format_emphasis(self, text: str) -> str:
        return f"<emph>{text}</emph>"

    def format_code(self, code: str) -> str:
        # code arrives rendered, its text leaves already escaped
        return f"<code>{code}</code>"

    def format_list(self, text: str) -> str:
        return f"<ul>{text}</ul>"

    def format_list_item(self, text: str) -> str:
        return f"<li>{text}</li>"

    def format_breadcrumbs(self, items: Iterable[FormatLink]) -> str:
        return self.breadcrumb_separator.join(
            self.format_cross_link(item) for item in items
        )

    def append_nodes(
        self,
        location: Location,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Render the page body between the template header and footer."""
        self.template_service.append_header(to)
        super().append_nodes(location, to, nodes)
        self.template_service.append_footer(to)

    def append_outline_header(self, to: list[str], node: DocumentationNode) -> None:
        """Outlines are not rendered in HTML."""

    def append_outline_children(
        self,
        to: list[str],
        nodes: Iterable[DocumentationNode],
    ) -> None:
        """Outlines are not rendered in HTML."""
