"""Post-processing of the raw (JSON-encoded) response text before display."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_LEADING_NEWLINES = re.compile(r"^\n*")


def escape_quotes(text: str) -> str:
    return text.replace('"', '\\"')


def unescape_quotes(text: str) -> str:
    return text.replace('\\"', '"')


def remove_leading_newlines(text: str) -> str:
    """'\\n\\nfoo' -> 'foo'. Only line feeds are stripped; other whitespace is kept."""
    return _LEADING_NEWLINES.sub("", text, count=1)


def remove_outer_quotation_marks(text: str) -> str:
    """
    Drop the quotation marks wrapping a JSON string value.
    Text that is not wrapped in quotes (or is shorter than two characters) is returned as is.
    """
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    logger.warning("Response text is not a quoted string, leaving it intact: %r", text[:40])
    return text


def sanitize_response(response: str) -> str:
    """Unescape newlines, strip outer quotes, unescape quotes, strip leading newlines."""
    text = response.replace("\\n", "\n")
    text = remove_outer_quotation_marks(text)
    text = unescape_quotes(text)
    return remove_leading_newlines(text)
