"""Document type detection from raw OCR text.

Signal checks run in a fixed priority order and the first match wins,
except for school marksheets, where weighted keyword scores decide
between class X and class XII.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from docverify.extraction.lines import to_lines
from docverify.extraction.patterns import (
    AADHAAR_KEYWORDS,
    GENDER_TOKEN,
    GENERIC_MARKSHEET_KEYWORDS,
    HIGHER_EDUCATION_KEYWORDS,
    PAN_GATE_KEYWORDS,
    PASSPORT_COUNTRY,
    PASSPORT_FIELD_LABELS,
    PASSPORT_MRZ_HEADER,
    TENTH_KEYWORD_WEIGHTS,
    TWELFTH_KEYWORD_WEIGHTS,
)
from docverify.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentType(StrEnum):
    """Document families the engine can recognise."""

    PAN = "PAN"
    AADHAAR = "AADHAAR"
    PASSPORT = "PASSPORT"
    MARKSHEET = "MARKSHEET"
    TENTH_MARKSHEET = "TENTH_MARKSHEET"
    TWELFTH_MARKSHEET = "TWELFTH_MARKSHEET"
    UNKNOWN = "UNKNOWN"


@dataclass
class ClassificationResult:
    """Outcome of classifying one document text."""

    detected_type: DocumentType
    matched_check: str
    tenth_score: int = 0
    twelfth_score: int = 0


def _weighted_score(upper: str, weights: list[tuple[str, int]]) -> int:
    # Whole words, with an optional ordinal suffix ("CLASS XTH").
    return sum(
        weight
        for keyword, weight in weights
        if re.search(rf"(?<![A-Z0-9]){re.escape(keyword)}(?:TH)?(?![A-Z0-9])", upper)
    )


def school_level_scores(text: str) -> tuple[int, int]:
    """Return ``(tenth_score, twelfth_score)`` for a school marksheet text."""
    upper = text.upper()
    return (
        _weighted_score(upper, TENTH_KEYWORD_WEIGHTS),
        _weighted_score(upper, TWELFTH_KEYWORD_WEIGHTS),
    )


def _is_pan(upper: str) -> bool:
    return any(keyword in upper for keyword in PAN_GATE_KEYWORDS)


def _is_aadhaar(upper: str) -> bool:
    return any(keyword in upper for keyword in AADHAAR_KEYWORDS) or bool(
        GENDER_TOKEN.search(upper)
    )


def _is_passport(upper: str) -> bool:
    if any(PASSPORT_MRZ_HEADER.match(line.replace(" ", "")) for line in to_lines(upper)):
        return True
    return PASSPORT_COUNTRY in upper and any(
        label in upper for label in PASSPORT_FIELD_LABELS
    )


def _is_higher_education(upper: str) -> bool:
    return any(keyword in upper for keyword in HIGHER_EDUCATION_KEYWORDS)


def _is_generic_marksheet(upper: str) -> bool:
    return any(keyword in upper for keyword in GENERIC_MARKSHEET_KEYWORDS)


class DocumentClassifier:
    """Maps OCR text to exactly one :class:`DocumentType`.

    Stateless: one instance can classify any number of texts, from any
    number of threads.
    """

    def __init__(self) -> None:
        self._identity_checks: list[tuple[str, DocumentType, Callable[[str], bool]]] = [
            ("pan", DocumentType.PAN, _is_pan),
            ("aadhaar", DocumentType.AADHAAR, _is_aadhaar),
            ("passport", DocumentType.PASSPORT, _is_passport),
            ("higher education", DocumentType.MARKSHEET, _is_higher_education),
        ]

    def analyze(self, text: str) -> ClassificationResult:
        """Classify ``text`` and report which check decided it.

        Args:
            text: Raw OCR text; may be empty.

        Returns:
            Classification with the deciding check and school-level scores.
        """
        upper = (text or "").upper()

        for name, doc_type, check in self._identity_checks:
            if check(upper):
                return self._decided(ClassificationResult(doc_type, name))

        tenth, twelfth = school_level_scores(upper)
        if tenth > twelfth:
            return self._decided(
                ClassificationResult(
                    DocumentType.TENTH_MARKSHEET, "school level", tenth, twelfth
                )
            )
        if twelfth > tenth:
            return self._decided(
                ClassificationResult(
                    DocumentType.TWELFTH_MARKSHEET, "school level", tenth, twelfth
                )
            )

        if _is_generic_marksheet(upper):
            return self._decided(
                ClassificationResult(
                    DocumentType.MARKSHEET, "generic marksheet", tenth, twelfth
                )
            )
        return self._decided(
            ClassificationResult(DocumentType.UNKNOWN, "fallback", tenth, twelfth)
        )

    def classify(self, text: str) -> DocumentType:
        """Return the document type of ``text``, ``UNKNOWN`` if nothing matches."""
        return self.analyze(text).detected_type

    @staticmethod
    def _decided(result: ClassificationResult) -> ClassificationResult:
        logger.debug(
            "Classified as %s by '%s' check (tenth=%d, twelfth=%d)",
            result.detected_type,
            result.matched_check,
            result.tenth_score,
            result.twelfth_score,
        )
        return result
