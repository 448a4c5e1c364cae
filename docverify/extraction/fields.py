"""Shared field types and helpers for the per-field extractors.

Every extractor is a pure ``(text) -> ExtractedField | None`` function.
``None`` is the normal "not found" outcome; no extractor raises for
malformed or empty text.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from docverify.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExtractedField:
    """A field value confidently found in the document text."""

    value: str
    confidence: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"value": self.value}
        if self.confidence is not None:
            data["confidence"] = self.confidence
        return data


FieldExtractor = Callable[[str], ExtractedField | None]

# A named step of a priority cascade: the first step returning a value wins.
CascadeRule = tuple[str, Callable[[str], str | None]]


def found(value: str | None, confidence: str | None = None) -> ExtractedField | None:
    """Wrap a non-empty value in an :class:`ExtractedField`."""
    if not value:
        return None
    return ExtractedField(value=value, confidence=confidence)


def run_cascade(rules: Sequence[CascadeRule], text: str) -> str | None:
    """Evaluate ``rules`` in order and return the first value produced."""
    for name, rule in rules:
        value = rule(text)
        if value:
            logger.debug("Cascade rule '%s' matched: %s", name, value)
            return value
    return None


def first_group(patterns: Sequence[re.Pattern[str]], text: str) -> str | None:
    """Return group 1 of the first pattern in ``patterns`` that matches ``text``."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    """Check for any keyword as a plain substring of ``text``."""
    return any(keyword in text for keyword in keywords)


def sanitize_name(name: str) -> str:
    """Strip everything but ASCII letters and spaces, then collapse spaces."""
    letters_only = re.sub(r"[^A-Za-z\s]", "", name)
    return re.sub(r"\s+", " ", letters_only).strip()


def value_after_label(
    lines: Sequence[str],
    label: re.Pattern[str],
    clean: Callable[[str], str | None],
    reject: re.Pattern[str] | None = None,
) -> str | None:
    """Find a labelled value on the label's line or the line after it.

    The text following the label on the same line is tried first; if
    ``clean`` rejects it, the next line is tried. Scanning continues with
    later label occurrences until one yields a value.

    Args:
        lines: Normalized document lines.
        label: Pattern locating the label on a line.
        clean: Turns a raw candidate into a value, or ``None`` if unusable.
        reject: Lines matching this pattern are never treated as labels.
    """
    for index, line in enumerate(lines):
        match = label.search(line)
        if not match or (reject is not None and reject.search(line)):
            continue
        value = clean(line[match.end():].strip(" :-/|"))
        if value:
            return value
        if index + 1 < len(lines):
            value = clean(lines[index + 1])
            if value:
                return value
    return None


def name_value(min_length: int = 3) -> Callable[[str], str | None]:
    """Build a ``clean`` callable that accepts sanitized names of ``min_length``+."""

    def clean(raw: str) -> str | None:
        name = sanitize_name(raw)
        return name if len(name.replace(" ", "")) >= min_length else None

    return clean


def pattern_value(pattern: re.Pattern[str]) -> Callable[[str], str | None]:
    """Build a ``clean`` callable returning group 1 of ``pattern`` when it matches."""

    def clean(raw: str) -> str | None:
        match = pattern.search(raw.upper())
        return match.group(1) if match else None

    return clean
