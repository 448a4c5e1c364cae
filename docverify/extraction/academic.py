"""Field extractors for university grade sheets (``MARKSHEET``)."""

import re

from . import line_scorer as scoring
from .fields import ExtractedField, found
from .lines import to_lines
from .patterns import (
    ADMISSION_KEYWORDS,
    ADMISSION_LINE,
    COURSE_KEYWORDS,
    COURSE_REJECT,
    PASSING_KEYWORDS,
    UNIVERSITY_KEYWORDS,
    YEAR_PATTERN,
)

UNIVERSITY_MIN_SCORE = 5.0
UNIVERSITY_SCAN_LINES = 12
COURSE_MIN_SCORE = 5.0

_UNIVERSITY_RULES = [
    scoring.reject_digits(),
    scoring.min_length(10),
    scoring.keyword_hits(UNIVERSITY_KEYWORDS, weight=5.0),
    scoring.uppercase_bonus(2.0),
    scoring.scaled_length(divisor=10.0, cap=5.0),
]

_COURSE_RULES = [
    scoring.min_length(16),
    scoring.reject_matching(COURSE_REJECT),
    scoring.keyword_hits(COURSE_KEYWORDS, weight=5.0, required=True, whole_word=True),
    scoring.scaled_length(divisor=20.0, cap=2.0),
]


def extract_gpa(text: str, label: str) -> ExtractedField | None:
    """Extract the grade point average following ``label`` (``SGPA``/``CGPA``).

    Accepts ``8.5``, ``8,5`` and decimal-less OCR renderings such as ``85``,
    which are read as ``8.5``.
    """
    pattern = re.compile(
        rf"\b{re.escape(label)}\s*[:=]?\s*(\d[.,]\d{{1,3}}|\d{{2,4}})", re.IGNORECASE
    )
    match = pattern.search(text)
    if not match:
        return None

    value = match.group(1).replace(",", ".")
    if "." not in value and value != "10":
        value = f"{value[0]}.{value[1:]}"
    return found(value)


def extract_sgpa(text: str) -> ExtractedField | None:
    return extract_gpa(text, "SGPA")


def extract_cgpa(text: str) -> ExtractedField | None:
    return extract_gpa(text, "CGPA")


def extract_university(
    text: str,
    min_score: float = UNIVERSITY_MIN_SCORE,
    scan_lines: int = UNIVERSITY_SCAN_LINES,
) -> ExtractedField | None:
    """Pick the institution header from the first ``scan_lines`` lines."""
    lines = to_lines(text)[:scan_lines]
    return found(scoring.best_line(lines, _UNIVERSITY_RULES, min_score))


def extract_course(
    text: str, min_score: float = COURSE_MIN_SCORE
) -> ExtractedField | None:
    """Pick the line naming the degree programme."""
    return found(scoring.best_line(to_lines(text), _COURSE_RULES, min_score))


def extract_admission_year(text: str) -> ExtractedField | None:
    """First year on a line that talks about admission or enrolment."""
    for line in to_lines(text):
        upper = line.upper()
        if not any(keyword in upper for keyword in ADMISSION_KEYWORDS):
            continue
        match = YEAR_PATTERN.search(line)
        if match:
            return found(match.group(0))
    return None


def extract_passing_year(text: str) -> ExtractedField | None:
    """Highest-scoring year, weighted by result keywords on the same line.

    Every year token starts at 1 and gains 3 for each passing keyword on
    its line. Admission lines are skipped. The first year reaching the top
    score wins.
    """
    best: str | None = None
    best_score = 0

    for line in to_lines(text):
        if ADMISSION_LINE.search(line):
            continue
        upper = line.upper()
        line_score = 1 + 3 * sum(1 for keyword in PASSING_KEYWORDS if keyword in upper)
        for match in YEAR_PATTERN.finditer(line):
            if line_score > best_score:
                best, best_score = match.group(0), line_score

    return found(best)
