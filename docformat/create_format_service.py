"""Factory for building a formatter from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from docformat.html_format_service import BREADCRUMB_SEPARATOR, HtmlFormatService
from docformat.html_template_service import DefaultHtmlTemplateService

if TYPE_CHECKING:
    from docformat.language_service import LanguageService
    from docformat.location import LocationService

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("html",)


def create_format_service(
    config: dict[str, Any],
    location_service: LocationService,
    language_service: LanguageService,
) -> HtmlFormatService:
    """Build the formatter named by config["format"]."""
    fmt = str(config.get("format") or "html").lower()
    if fmt not in SUPPORTED_FORMATS:
        supported = ", ".join(SUPPORTED_FORMATS)
        msg = f"Unsupported format: {fmt!r} (supported: {supported})"
        raise ValueError(msg)

    html_config = config.get("html")
    if html_config is None:
        html_config = {}
    if not isinstance(html_config, dict):
        msg = f"'html' config must be a mapping, got {type(html_config).__name__}"
        raise ValueError(msg)

    css = html_config.get("css")
    separator = html_config.get("breadcrumb_separator")
    if separator is None:
        separator = BREADCRUMB_SEPARATOR
    logger.debug("Creating %s formatter (css=%s)", fmt, css)
    return HtmlFormatService(
        location_service,
        language_service,
        DefaultHtmlTemplateService(css),
        breadcrumb_separator=separator,
    )
