"""Field extractors for school-level marksheets (class X and class XII).

Both marksheet families share the same algorithms; they differ only in
the examination titles that anchor the passing year.
"""

import re
from collections.abc import Sequence

from . import line_scorer as scoring
from .fields import (
    CascadeRule,
    ExtractedField,
    first_group,
    found,
    run_cascade,
    sanitize_name,
)
from .lines import collapse_whitespace, to_lines
from .patterns import (
    CERTIFY_NAME_PATTERNS,
    ISSUE_DATE_PATTERN,
    LABELLED_NAME_PATTERNS,
    NAME_STOPWORDS,
    NOT_A_NAME_LINE,
    PARENT_LINE,
    RESULT_STATUSES,
    RESULT_YEAR_PATTERNS,
    SCHOOL_CODE,
    SCHOOL_CODE_PREFIX,
    SCHOOL_HEADER_REJECT,
    SCHOOL_KEYWORDS,
    SCHOOL_LOCATION_TOKENS,
    SHORT_CAPS_LINE,
    TENTH_EXAM_YEAR_PATTERNS,
    TWELFTH_EXAM_YEAR_PATTERNS,
)

SCHOOL_NAME_MIN_SCORE = 6.0

SCHOOL_NAME_RULES = [
    scoring.keyword_hits(SCHOOL_KEYWORDS, weight=5.0, required=True),
    scoring.reject_matching(SCHOOL_HEADER_REJECT),
    scoring.length_bands([(15, 2.0), (30, 2.0)]),
    scoring.nearby_match(SCHOOL_CODE, weight=4.0),
    scoring.line_matching(SCHOOL_CODE_PREFIX, weight=3.0),
    scoring.uppercase_bonus(1.0),
]


# ---------------------------------------------------------------- Student name


def _clean_captured_name(raw: str) -> str | None:
    name = sanitize_name(NAME_STOPWORDS.sub("", raw))
    return name if len(name.replace(" ", "")) >= 3 else None


def _name_from(patterns: Sequence[re.Pattern[str]]):
    def rule(text: str) -> str | None:
        captured = first_group(patterns, collapse_whitespace(text))
        return _clean_captured_name(captured) if captured else None

    return rule


def _name_above_parent(text: str) -> str | None:
    """A short capitalised line sitting right above a parent's-name line."""
    lines = [collapse_whitespace(line) for line in to_lines(text)]
    for index, line in enumerate(lines[:-1]):
        if not PARENT_LINE.search(lines[index + 1]):
            continue
        if SHORT_CAPS_LINE.match(line.upper()) and not NOT_A_NAME_LINE.search(line):
            name = _clean_captured_name(line)
            if name:
                return name
    return None


STUDENT_NAME_RULES: list[CascadeRule] = [
    ("certify that", _name_from(CERTIFY_NAME_PATTERNS)),
    ("name label", _name_from(LABELLED_NAME_PATTERNS)),
    ("line above parent", _name_above_parent),
]


def extract_student_name(text: str) -> ExtractedField | None:
    """Extract the candidate's name from a school marksheet."""
    return found(run_cascade(STUDENT_NAME_RULES, text))


# ---------------------------------------------------------------- School name


def clean_school_name(line: str) -> str:
    """Strip school codes, place names and leading OCR junk from a school line."""
    name = re.sub(r"^\s*SCHOOL\s+", "", line, flags=re.IGNORECASE)
    name = re.sub(r"\b\d{4,6}\b\s*[-–:.]?", "", name)
    name = SCHOOL_LOCATION_TOKENS.sub("", name)
    name = re.sub(r"^[^A-Za-z]+", "", name)
    name = re.sub(r"\s{2,}", " ", name)
    return name.strip(" ,-–:.")


def extract_school_name(
    text: str, min_score: float = SCHOOL_NAME_MIN_SCORE
) -> ExtractedField | None:
    """Pick the school line, favouring ``<code> - <name>`` lines.

    Examination and certificate headers are never candidates even though
    they usually contain the word SCHOOL.
    """
    line = scoring.best_line(to_lines(text), SCHOOL_NAME_RULES, min_score)
    if line is None:
        return None
    return found(clean_school_name(line))


# ---------------------------------------------------------------- Passing year


def _passing_year_rules(exam_patterns: Sequence[re.Pattern[str]]) -> list[CascadeRule]:
    def normalized(text: str) -> str:
        return collapse_whitespace(text).upper()

    return [
        ("examination title", lambda text: first_group(exam_patterns, normalized(text))),
        ("result phrasing", lambda text: first_group(RESULT_YEAR_PATTERNS, normalized(text))),
        ("issue date", lambda text: first_group([ISSUE_DATE_PATTERN], normalized(text))),
    ]


TENTH_PASSING_YEAR_RULES = _passing_year_rules(TENTH_EXAM_YEAR_PATTERNS)
TWELFTH_PASSING_YEAR_RULES = _passing_year_rules(TWELFTH_EXAM_YEAR_PATTERNS)


def extract_tenth_passing_year(text: str) -> ExtractedField | None:
    """Year of the class X examination."""
    return found(run_cascade(TENTH_PASSING_YEAR_RULES, text))


def extract_twelfth_passing_year(text: str) -> ExtractedField | None:
    """Year of the class XII examination."""
    return found(run_cascade(TWELFTH_PASSING_YEAR_RULES, text))


# ---------------------------------------------------------------- Result status


def extract_result_status(text: str) -> ExtractedField | None:
    """``PASS`` or ``FAIL`` by plain substring; ``PASS`` is checked first.

    Text containing both reports ``PASS``.
    """
    upper = text.upper()
    for status in RESULT_STATUSES:
        if status in upper:
            return found(status)
    return None
