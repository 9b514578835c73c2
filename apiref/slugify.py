"""Utility for generating anchor slugs for Markdown headers."""

import re
from urllib.parse import quote

# Characters encodeURIComponent leaves untouched, besides alphanumerics.
_UNRESERVED = "-_.!~*'()"


def slugify(s: str) -> str:
    """Generate a markdown-it-anchor style slug: trim, lower, hyphenate, encode."""
    s = re.sub(r"\s+", "-", s.strip().lower())
    return quote(s, safe=_UNRESERVED)
