"""Regular expressions and keyword sets for each document family.

Pure data: nothing here holds state or performs matching. Keyword
tuples are matched against upper-cased text unless noted otherwise.
"""

import re

YEAR = r"(?:19|20)\d{2}"
YEAR_PATTERN = re.compile(rf"\b{YEAR}\b")
DATE_PATTERN = re.compile(rf"\b(\d{{1,2}}[/\-.]\d{{1,2}}[/\-.]{YEAR})\b")

# ---------------------------------------------------------------- PAN

PAN_GATE_KEYWORDS: tuple[str, ...] = (
    "PERMANENT ACCOUNT NUMBER",
    "INCOME TAX DEPARTMENT",
)
PAN_NUMBER_PATTERN = re.compile(r"\b[A-Z]{5}[0-9]{4}[A-Z]\b")
PAN_CANDIDATE_TOKEN = re.compile(r"\b[A-Z0-9]{10}\b")

# OCR confusions between look-alike glyphs, keyed by the slot type they repair.
DIGIT_LOOKALIKES: dict[str, str] = {
    "O": "0",
    "D": "0",
    "Q": "0",
    "I": "1",
    "L": "1",
    "Z": "2",
    "S": "5",
    "G": "6",
    "B": "8",
}
LETTER_LOOKALIKES: dict[str, str] = {
    "0": "O",
    "1": "I",
    "2": "Z",
    "5": "S",
    "6": "G",
    "8": "B",
}

PAN_NAME_LABEL = re.compile(r"^(?:NAME|HOLDER'?S NAME)\b", re.IGNORECASE)
PAN_FATHER_LABEL = re.compile(r"FATHER'?S?\s*NAME", re.IGNORECASE)
DOB_LABEL = re.compile(r"\b(?:DATE OF BIRTH|DOB|D\.O\.B)\b", re.IGNORECASE)
PAN_HEADER_NOISE = re.compile(
    r"INCOME|TAX|DEPARTMENT|GOVT|GOVERNMENT|INDIA|PERMANENT|ACCOUNT|NUMBER|CARD|SIGNATURE",
    re.IGNORECASE,
)

# ---------------------------------------------------------------- Aadhaar

AADHAAR_KEYWORDS: tuple[str, ...] = ("AADHAAR", "UIDAI")
GENDER_TOKEN = re.compile(r"\b(MALE|FEMALE)\b")
AADHAAR_GENDER = re.compile(r"\b(MALE|FEMALE|TRANSGENDER)\b")
VID_BLOCK = re.compile(r"\bVID\s*:?\s*\d{4}\s+\d{4}\s+\d{4}\s+\d{4}\b")
AADHAAR_NUMBER_PATTERN = re.compile(r"(?<!\d)(?<!\d )(\d{4} \d{4} \d{4})(?! ?\d)")
AADHAAR_BIRTH = re.compile(
    rf"\b(?:DOB|DATE OF BIRTH|YEAR OF BIRTH)\s*[:/\-]?\s*"
    rf"(\d{{1,2}}[/\-.]\d{{1,2}}[/\-.]{YEAR}|{YEAR})\b"
)

# ---------------------------------------------------------------- Passport

PASSPORT_MRZ_HEADER = re.compile(r"^P<IND")
PASSPORT_COUNTRY = "REPUBLIC OF INDIA"
PASSPORT_FIELD_LABELS: tuple[str, ...] = (
    "PASSPORT NO",
    "DATE OF EXPIRY",
    "PLACE OF ISSUE",
)
PASSPORT_NUMBER_PATTERN = re.compile(r"\b([A-Z][0-9]{7})\b")
PASSPORT_MRZ_NAMES = re.compile(r"^P<IND([A-Z<]+)$")
PASSPORT_MRZ_DATA = re.compile(
    r"^([A-Z][0-9]{7})<?[0-9]([A-Z]{3})([0-9]{6})[0-9]([MF<])"
)
PASSPORT_SURNAME_LABEL = re.compile(r"\bSURNAME\b", re.IGNORECASE)
PASSPORT_GIVEN_NAME_LABEL = re.compile(r"\bGIVEN\s*NAME(?:\(S\)|S)?", re.IGNORECASE)
PASSPORT_NATIONALITY_LABEL = re.compile(r"\bNATIONALITY\b", re.IGNORECASE)

# ---------------------------------------------------------------- Marksheets

HIGHER_EDUCATION_KEYWORDS: tuple[str, ...] = (
    "SGPA",
    "CGPA",
    "GRADE SHEET",
    "SEMESTER",
    "UNIVERSITY",
)

# (keyword, weight) pairs summed by the tenth/twelfth disambiguation.
TENTH_KEYWORD_WEIGHTS: list[tuple[str, int]] = [
    ("SECONDARY SCHOOL EXAMINATION", 3),
    ("CLASS X", 3),
    ("AISSE", 3),
    ("SSC", 2),
    ("SSLC", 2),
    ("MATRICULATION", 2),
    ("HIGH SCHOOL", 2),
]
TWELFTH_KEYWORD_WEIGHTS: list[tuple[str, int]] = [
    ("SENIOR SCHOOL CERTIFICATE", 3),
    ("CLASS XII", 3),
    ("AISSCE", 3),
    ("HSC", 2),
    ("INTERMEDIATE", 2),
    ("PLUS TWO", 2),
    ("PUC", 2),
    ("HIGHER SECONDARY", 2),
]

GENERIC_MARKSHEET_KEYWORDS: tuple[str, ...] = (
    "SECONDARY SCHOOL EXAMINATION",
    "HIGHER SECONDARY EXAMINATION",
    "SENIOR SCHOOL CERTIFICATE",
    "SCHOOL NAME",
    "AISSE",
    "AISSCE",
    "BOARD OF",
)

UNIVERSITY_KEYWORDS: tuple[str, ...] = ("UNIVERSITY", "INSTITUTE", "COLLEGE")

COURSE_KEYWORDS: tuple[str, ...] = (
    "BACHELOR",
    "MASTER",
    "BTECH",
    "MTECH",
    "B.TECH",
    "M.TECH",
    "MBA",
    "MCA",
    "BCA",
    "ENGINEERING",
    "SCIENCE",
    "ARTS",
    "COMMERCE",
    "PHD",
    "DOCTORATE",
    "DIPLOMA",
)
COURSE_REJECT = re.compile(r"SGPA|CGPA|GRADE|CREDIT|RESULT", re.IGNORECASE)

ADMISSION_KEYWORDS: tuple[str, ...] = ("ADMISSION", "ADMITTED", "ENROLLED")
ADMISSION_LINE = re.compile(r"ADMISSION|ENROLLED", re.IGNORECASE)
PASSING_KEYWORDS: tuple[str, ...] = (
    "PASS",
    "RESULT",
    "EXAM",
    "DECLARED",
    "GRADUATED",
)

SCHOOL_KEYWORDS: tuple[str, ...] = (
    "SCHOOL",
    "VIDYALAYA",
    "INSTITUTION",
    "ACADEMY",
    "COLLEGE",
)
SCHOOL_HEADER_REJECT = re.compile(
    r"EXAMINATION|CERTIFICATE|MARKS|RESULT|STATEMENT|BOARD", re.IGNORECASE
)
SCHOOL_CODE = re.compile(r"\d{4,6}")
SCHOOL_CODE_PREFIX = re.compile(r"^\W*\d{4,6}\s*[-–:.]\s*[A-Za-z]")
SCHOOL_LOCATION_TOKENS = re.compile(
    r"\b(?:DISTRICT|DELHI|HARYANA|INDIA)\b", re.IGNORECASE
)

RESULT_STATUSES: tuple[str, ...] = ("PASS", "FAIL")

# ---------------------------------------------------------------- Student names

_NAME = r"([A-Z][A-Z\s.]{3,40})"

CERTIFY_NAME_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"THIS IS TO CERTIFY THAT\s+{_NAME}", re.IGNORECASE),
    re.compile(rf"CERTIFIED THAT\s+{_NAME}", re.IGNORECASE),
]
LABELLED_NAME_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"NAME OF (?:THE )?STUDENT\s*[:\-]?\s*{_NAME}", re.IGNORECASE),
    re.compile(rf"NAME OF (?:THE )?CANDIDATE\s*[:\-]?\s*{_NAME}", re.IGNORECASE),
    re.compile(rf"(?:STUDENT|CANDIDATE)(?:'S)? NAME\s*[:\-]?\s*{_NAME}", re.IGNORECASE),
]
PARENT_LINE = re.compile(r"MOTHER|FATHER|GUARDIAN", re.IGNORECASE)
SHORT_CAPS_LINE = re.compile(r"^[A-Z\s]{5,40}$")
NOT_A_NAME_LINE = re.compile(r"ROLL|DOB|DATE|SCHOOL|BOARD", re.IGNORECASE)
NAME_STOPWORDS = re.compile(
    r"\b(?:SON OF|DAUGHTER OF|S/O|D/O|MOTHER|FATHER|GUARDIAN|ROLL|HAS|HAVING"
    r"|WITH|BORN|DATE|DOB|SCHOOL|OF THE)\b.*$",
    re.IGNORECASE,
)

# ---------------------------------------------------------------- Passing years

TENTH_EXAM_YEAR_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"SECONDARY SCHOOL EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"HIGHER SECONDARY EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"MATRICULATION EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"HIGH SCHOOL EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"ANNUAL EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"EXAMINATION HELD IN\s+\w+[, ]+({YEAR})"),
    re.compile(rf"EXAMINATION[, ]+({YEAR})"),
]
TWELFTH_EXAM_YEAR_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"SENIOR SCHOOL CERTIFICATE EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"HIGHER SECONDARY (?:CERTIFICATE )?EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"INTERMEDIATE EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"ANNUAL EXAMINATION[, ]+({YEAR})"),
    re.compile(rf"EXAMINATION HELD IN\s+\w+[, ]+({YEAR})"),
    re.compile(rf"EXAMINATION[, ]+({YEAR})"),
]
RESULT_YEAR_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"PASSED.*?({YEAR})"),
    re.compile(rf"RESULT.*?({YEAR})"),
    re.compile(rf"QUALIFIED.*?({YEAR})"),
    re.compile(rf"SUCCESSFULLY COMPLETED.*?({YEAR})"),
]
ISSUE_DATE_PATTERN = re.compile(
    rf"\bDATED[: ]*\s*\d{{1,2}}[/\-.]\d{{1,2}}[/\-.]({YEAR})\b"
)
