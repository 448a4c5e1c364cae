"""Field extractors for identity documents: PAN card, Aadhaar, passport."""

import re
from collections.abc import Sequence
from datetime import date

from .fields import (
    ExtractedField,
    contains_any,
    found,
    name_value,
    pattern_value,
    run_cascade,
    sanitize_name,
    value_after_label,
)
from .lines import to_lines
from .patterns import (
    AADHAAR_BIRTH,
    AADHAAR_GENDER,
    AADHAAR_NUMBER_PATTERN,
    DATE_PATTERN,
    DIGIT_LOOKALIKES,
    DOB_LABEL,
    LETTER_LOOKALIKES,
    PAN_CANDIDATE_TOKEN,
    PAN_FATHER_LABEL,
    PAN_GATE_KEYWORDS,
    PAN_HEADER_NOISE,
    PAN_NAME_LABEL,
    PAN_NUMBER_PATTERN,
    PASSPORT_GIVEN_NAME_LABEL,
    PASSPORT_MRZ_DATA,
    PASSPORT_MRZ_NAMES,
    PASSPORT_NATIONALITY_LABEL,
    PASSPORT_NUMBER_PATTERN,
    PASSPORT_SURNAME_LABEL,
    VID_BLOCK,
)

_PAN_LETTER_SLOTS = (0, 1, 2, 3, 4, 9)
_PLAIN_NAME_LINE = re.compile(r"^[A-Za-z .]+$")
_PASSPORT_NUMBER_LABEL = re.compile(r"PASSPORT\s*NO", re.IGNORECASE)
_NATIONALITY_LABEL_WORDS = {"SEX", "DATE", "BIRTH", "PLACE", "ISSUE", "TYPE", "CODE"}
_NATIONALITY_CODES = {"IND": "INDIAN"}


# ---------------------------------------------------------------- PAN


def _repair_pan_token(token: str) -> str | None:
    """Undo letter/digit look-alike swaps in a 10-character PAN candidate."""
    if not any(ch.isdigit() for ch in token):
        return None
    repaired = []
    for slot, ch in enumerate(token):
        if slot in _PAN_LETTER_SLOTS:
            ch = LETTER_LOOKALIKES.get(ch, ch) if ch.isdigit() else ch
        else:
            ch = DIGIT_LOOKALIKES.get(ch, ch) if ch.isalpha() else ch
        repaired.append(ch)
    candidate = "".join(repaired)
    return candidate if PAN_NUMBER_PATTERN.fullmatch(candidate) else None


def extract_pan_number(text: str) -> ExtractedField | None:
    """Extract the 10-character PAN from a text carrying PAN card headers.

    Returns ``None`` unless one of the PAN gating phrases is present. A
    number recovered only after look-alike repair is tagged ``LOW``.
    """
    upper = text.upper()
    if not contains_any(upper, PAN_GATE_KEYWORDS):
        return None

    blanked = re.sub(r"[^A-Z0-9]", " ", upper)
    match = PAN_NUMBER_PATTERN.search(blanked)
    if match:
        return found(match.group(0))

    for token in PAN_CANDIDATE_TOKEN.findall(blanked):
        repaired = _repair_pan_token(token)
        if repaired:
            return found(repaired, confidence="LOW")
    return None


def _legacy_pan_names(text: str) -> list[str]:
    """Plain name lines following the header on the older PAN card layout."""
    lines = to_lines(text)
    header = next(
        (i for i, line in enumerate(lines) if "INCOME TAX DEPARTMENT" in line.upper()),
        None,
    )
    if header is None:
        return []

    names: list[str] = []
    for line in lines[header + 1:]:
        if PAN_HEADER_NOISE.search(line) or not _PLAIN_NAME_LINE.match(line):
            continue
        name = sanitize_name(line)
        if len(name) >= 3:
            names.append(name)
    return names


def _nth_legacy_name(position: int):
    def rule(text: str) -> str | None:
        names = _legacy_pan_names(text)
        return names[position] if len(names) > position else None

    return rule


_PAN_NAME_RULES = [
    (
        "name label",
        lambda text: value_after_label(
            to_lines(text), PAN_NAME_LABEL, name_value(), reject=PAN_FATHER_LABEL
        ),
    ),
    ("legacy layout", _nth_legacy_name(0)),
]

_PAN_FATHER_RULES = [
    (
        "father label",
        lambda text: value_after_label(to_lines(text), PAN_FATHER_LABEL, name_value()),
    ),
    ("legacy layout", _nth_legacy_name(1)),
]


def _first_date(text: str) -> str | None:
    match = DATE_PATTERN.search(text)
    return match.group(1) if match else None


_DOB_RULES = [
    (
        "birth date label",
        lambda text: value_after_label(
            to_lines(text), DOB_LABEL, pattern_value(DATE_PATTERN)
        ),
    ),
    ("first date", _first_date),
]


def extract_pan_name(text: str) -> ExtractedField | None:
    """Extract the card holder's name from a PAN card."""
    return found(run_cascade(_PAN_NAME_RULES, text))


def extract_pan_father_name(text: str) -> ExtractedField | None:
    """Extract the father's name printed on a PAN card."""
    return found(run_cascade(_PAN_FATHER_RULES, text))


def extract_pan_dob(text: str) -> ExtractedField | None:
    """Extract the date of birth printed on a PAN card."""
    return found(run_cascade(_DOB_RULES, text))


# ---------------------------------------------------------------- Aadhaar


def extract_aadhaar_number(text: str) -> ExtractedField | None:
    """Extract the 12-digit Aadhaar number written as three groups of four.

    Virtual ID blocks (16 digits) are removed first, and a 12-digit run
    that is part of a longer digit-group sequence is never reported.
    """
    upper = VID_BLOCK.sub(" ", text.upper())
    for line in to_lines(upper):
        match = AADHAAR_NUMBER_PATTERN.search(re.sub(r"[ \t]+", " ", line))
        if match:
            return found(match.group(1))
    return None


def extract_aadhaar_dob(text: str) -> ExtractedField | None:
    """Extract the date (or year) of birth from an Aadhaar card."""
    match = AADHAAR_BIRTH.search(text.upper())
    return found(match.group(1)) if match else None


def extract_aadhaar_gender(text: str) -> ExtractedField | None:
    """Extract the gender printed on an Aadhaar card."""
    match = AADHAAR_GENDER.search(text.upper())
    return found(match.group(1)) if match else None


# ---------------------------------------------------------------- Passport


def _mrz(text: str) -> tuple[re.Match[str] | None, re.Match[str] | None]:
    """Locate the two MRZ lines of a passport's data page."""
    lines = [line.replace(" ", "").upper() for line in to_lines(text)]
    for index, line in enumerate(lines):
        names = PASSPORT_MRZ_NAMES.match(line)
        if names:
            data = None
            if index + 1 < len(lines):
                data = PASSPORT_MRZ_DATA.match(lines[index + 1])
            return names, data
    return None, None


def _mrz_name_parts(text: str) -> Sequence[str]:
    names, _ = _mrz(text)
    if names is None:
        return []
    parts = [part.replace("<", " ").strip() for part in names.group(1).split("<<")]
    return [part for part in parts if part]


def _mrz_surname(text: str) -> str | None:
    parts = _mrz_name_parts(text)
    return parts[0] if parts else None


def _mrz_given_name(text: str) -> str | None:
    parts = _mrz_name_parts(text)
    return parts[1] if len(parts) > 1 else None


def _mrz_number(text: str) -> str | None:
    _, data = _mrz(text)
    return data.group(1) if data else None


def mrz_birth_year(two_digit_year: int, reference_year: int) -> int:
    """Expand a two-digit MRZ birth year relative to ``reference_year``.

    Years after the reference year's last two digits belong to the
    previous century, since a holder cannot be born in the future.
    """
    century = 1900 if two_digit_year > reference_year % 100 else 2000
    return century + two_digit_year


def _mrz_dob(text: str) -> str | None:
    """Date of birth from the MRZ data line.

    The century is resolved against the current year, so the result for
    a given MRZ depends on the clock.
    """
    _, data = _mrz(text)
    if data is None:
        return None
    raw = data.group(3)
    year = mrz_birth_year(int(raw[:2]), date.today().year)
    return f"{raw[4:6]}/{raw[2:4]}/{year}"


def _mrz_nationality(text: str) -> str | None:
    _, data = _mrz(text)
    if data is None:
        return None
    code = data.group(2)
    return _NATIONALITY_CODES.get(code, code)


def _nationality_word(raw: str) -> str | None:
    for word in re.findall(r"[A-Za-z]{3,}", raw):
        if word.upper() not in _NATIONALITY_LABEL_WORDS:
            return word.upper()
    return None


def _free_passport_number(text: str) -> str | None:
    match = PASSPORT_NUMBER_PATTERN.search(text.upper())
    return match.group(1) if match else None


_PASSPORT_NUMBER_RULES = [
    (
        "passport number label",
        lambda text: value_after_label(
            to_lines(text), _PASSPORT_NUMBER_LABEL, pattern_value(PASSPORT_NUMBER_PATTERN)
        ),
    ),
    ("mrz", _mrz_number),
    ("free text", _free_passport_number),
]

_PASSPORT_SURNAME_RULES = [
    (
        "surname label",
        lambda text: value_after_label(
            to_lines(text), PASSPORT_SURNAME_LABEL, name_value(2)
        ),
    ),
    ("mrz", _mrz_surname),
]

_PASSPORT_GIVEN_NAME_RULES = [
    (
        "given name label",
        lambda text: value_after_label(
            to_lines(text), PASSPORT_GIVEN_NAME_LABEL, name_value()
        ),
    ),
    ("mrz", _mrz_given_name),
]

_PASSPORT_DOB_RULES = [
    (
        "birth date label",
        lambda text: value_after_label(
            to_lines(text), DOB_LABEL, pattern_value(DATE_PATTERN)
        ),
    ),
    ("mrz", _mrz_dob),
]

_PASSPORT_NATIONALITY_RULES = [
    (
        "nationality label",
        lambda text: value_after_label(
            to_lines(text), PASSPORT_NATIONALITY_LABEL, _nationality_word
        ),
    ),
    ("mrz", _mrz_nationality),
]


def extract_passport_number(text: str) -> ExtractedField | None:
    """Extract the passport number (one letter, seven digits)."""
    return found(run_cascade(_PASSPORT_NUMBER_RULES, text))


def extract_passport_surname(text: str) -> ExtractedField | None:
    return found(run_cascade(_PASSPORT_SURNAME_RULES, text))


def extract_passport_given_name(text: str) -> ExtractedField | None:
    """Extract the given name(s), from the label or else the MRZ."""
    return found(run_cascade(_PASSPORT_GIVEN_NAME_RULES, text))


def extract_passport_dob(text: str) -> ExtractedField | None:
    return found(run_cascade(_PASSPORT_DOB_RULES, text))


def extract_passport_nationality(text: str) -> ExtractedField | None:
    return found(run_cascade(_PASSPORT_NATIONALITY_RULES, text))
