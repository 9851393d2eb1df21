"""
Folio Kernel — Link Guard

URLs in a portfolio come from the LLM. Both renderers put them into href
and src attributes, and the export is served from the app's own origin, so
only web and mail schemes are let through. Anything else renders as if the
field were absent.
"""

from __future__ import annotations

from urllib.parse import urlsplit

SAFE_SCHEMES = frozenset({"http", "https", "mailto"})

# Browsers drop tabs and newlines anywhere in a URL, and C0 controls or spaces at either end
_IGNORED_CHARS = str.maketrans("", "", "\t\n\r")
_C0_OR_SPACE = "".join(chr(c) for c in range(0x21))


def safe_url(url: str | None) -> str | None:
    """
    The URL if its scheme is allowed, else None.

    Scheme-less (relative) URLs pass; they cannot carry script.
    """
    if not url:
        return None
    cleaned = url.translate(_IGNORED_CHARS).strip(_C0_OR_SPACE)
    if not cleaned:
        return None
    try:
        scheme = urlsplit(cleaned).scheme.lower()
    except ValueError:
        return None
    if scheme and scheme not in SAFE_SCHEMES:
        return None
    return cleaned
