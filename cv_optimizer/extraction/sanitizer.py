"""Turns extracted text into Markdown that is safe to show and to analyse.

Processing flow:
1. Strip the opaque-content sentinels.
2. Strip placeholder sentences up to the end of their line.
3. Make sure the text has a title heading.
4. Trim surrounding whitespace.

Every step is a pure string transform, and the whole function is idempotent:
sanitizing already sanitized text returns it unchanged.
"""

import re

from cv_optimizer.extraction.markers import PLACEHOLDER_PHRASE, SENTINELS
from cv_optimizer.logging.logger import Log

DEFAULT_CV_TITLE = "CV Content"
DEFAULT_TOR_TITLE = "Terms of Reference"

_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER_PHRASE) + r"[^\n]*")


def sanitize(text: str) -> str:
    """Sanitize CV text, promoting its first non-blank line to the title."""
    try:
        cleaned = _strip_placeholders(_strip_sentinels(text))
        if not _has_heading(cleaned):
            cleaned = _promote_first_line(cleaned)
        return cleaned.strip()
    except Exception as exc:
        Log.warning(f"Sanitization failed, returning input unchanged: {exc}")
        return text.strip()


def sanitize_tor(text: str) -> str:
    """Sanitize Terms of Reference text under a fixed title."""
    try:
        cleaned = _strip_placeholders(_strip_sentinels(text))
        if not _has_heading(cleaned):
            cleaned = f"# {DEFAULT_TOR_TITLE}\n\n" + cleaned.lstrip()
        return cleaned.strip()
    except Exception as exc:
        Log.warning(f"TOR sanitization failed, returning input unchanged: {exc}")
        return text.strip()


def _strip_sentinels(text: str) -> str:
    # Removing one sentinel can splice a new one together, so repeat until stable.
    previous = None
    while previous != text:
        previous = text
        for sentinel in SENTINELS:
            text = text.replace(sentinel, "")
    return text


def _strip_placeholders(text: str) -> str:
    return _PLACEHOLDER_RE.sub("", text)


def _has_heading(text: str) -> bool:
    return any(line.startswith("#") for line in text.split("\n"))


def _promote_first_line(text: str) -> str:
    lines = text.split("\n")
    for index, line in enumerate(lines):
        if line.strip():
            body = "\n".join(lines[index + 1:])
            return f"# {line.strip()}\n\n{body}"
    return f"# {DEFAULT_CV_TITLE}\n\n{text}"
