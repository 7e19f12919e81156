"""
Helpers for turning third-party markup into plain text.
"""

import html
import re

_BLOCK_TAG = re.compile(r"<\s*(div|br|p|li)\b[^>]*>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<\s*/?[a-zA-Z][^>]*>")
_WHITESPACE = re.compile(r"\s+")


def strip_html(markup: str | None) -> str:
    """
    Strip all tags from a provider snippet and unescape entities.

    Block-level tags become a space so that e.g.
    ``"Turn <b>left</b><div>Destination on the right</div>"`` reads
    "Turn left Destination on the right".
    """
    if not markup:
        return ""

    text = _BLOCK_TAG.sub(" ", markup)
    text = _ANY_TAG.sub("", text)
    text = html.unescape(text)
    # Entities like &lt;script&gt; unescape into tags; remove those as well
    text = _ANY_TAG.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
