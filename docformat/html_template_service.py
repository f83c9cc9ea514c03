"""Page header and footer wrapped around rendered HTML."""

from typing import Protocol


class HtmlTemplateService(Protocol):
    """Writes the page header and footer."""

    def append_header(self, to: list[str]) -> None: ...

    def append_footer(self, to: list[str]) -> None: ...


class DefaultHtmlTemplateService:
    """Bare page skeleton with an optional stylesheet link."""

    def __init__(self, css: str | None = None) -> None:
        """Initialize the template with an optional stylesheet href."""
        self.css = css

    def append_header(self, to: list[str]) -> None:
        """Open the page."""
        to.append("<HTML>\n")
        to.append("<HEAD>\n")
        if self.css is not None:
            to.append(f'<link rel="stylesheet" href="{self.css}">\n')
        to.append("</HEAD>\n")
        to.append("<BODY>\n")

    def append_footer(self, to: list[str]) -> None:
        """Close the page."""
        to.append("</BODY>\n")
        to.append("</HTML>\n")
