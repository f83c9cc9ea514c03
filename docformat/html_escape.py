"""Utility for escaping text embedded in HTML."""

import html


def html_escape(text: str) -> str:
    """Escape &, < and >; quotes are left alone."""
    return html.escape(text, quote=False)
