"""Text helpers for API free-text fields."""

import re

# Shortest run from "<" to the next ">"; does not cross newlines.
HTML_TAG_RE = re.compile(r"<.*?>")


def clean_html(text: str) -> str:
    """Turn a synopsis with inline markup into plain terminal text.

    ``<br>`` and ``<br />`` become newlines, every other tag is dropped and
    surrounding whitespace is trimmed.

    Example: "<p>Hello<br>World</p>" → "Hello\\nWorld"
    """
    text = text.replace("<br>", "\n")
    text = text.replace("<br />", "\n")
    return HTML_TAG_RE.sub("", text).strip()
