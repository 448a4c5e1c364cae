"""Line normalization shared by every classifier check and field extractor."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def to_lines(text: str) -> list[str]:
    """Split OCR text into trimmed, non-empty lines in original order.

    ``\\r\\n`` and bare ``\\r`` endings are treated as newlines. Whitespace
    inside a line is left alone; extractors that need it collapsed call
    :func:`collapse_whitespace` themselves.

    Args:
        text: Raw OCR output, possibly several pages joined by newlines.

    Returns:
        List of lines. Empty input yields an empty list.
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line.strip() for line in normalized.split("\n") if line.strip()]


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run (newlines included) with one space."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def neighbours(lines: list[str], index: int, window: int = 1) -> list[str]:
    """Return the lines within ``window`` positions of ``index``, excluding it."""
    start = max(0, index - window)
    end = min(len(lines), index + window + 1)
    return [lines[i] for i in range(start, end) if i != index]
