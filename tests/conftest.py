"""Shared test fixtures for the document verification test suite."""

from pathlib import Path

import pytest

PAN_TEXT = """INCOME TAX DEPARTMENT
GOVT. OF INDIA
Permanent Account Number Card
ABCDE1234F
Name / नाम
RAHUL KUMAR SHARMA
Father's Name / पिता का नाम
SURESH KUMAR SHARMA
Date of Birth / जन्म की तारीख
15/08/1990
"""

LEGACY_PAN_TEXT = """INCOME TAX DEPARTMENT GOVT. OF INDIA
RAHUL KUMAR
SURESH KUMAR
15/08/1990
Permanent Account Number
ABCDE1234F
Signature
"""

AADHAAR_TEXT = """Government of India
RAHUL KUMAR
DOB: 15/08/1990
MALE
1234 5678 9012
VID : 9123 4567 8901 2345
Aadhaar - Aam Aadmi ka Adhikar
"""

PASSPORT_TEXT = """REPUBLIC OF INDIA
Type  Country Code  Passport No.
P  IND  J8369854
Surname
RAMADUGULA
Given Name(s)
SITA MAHA LAKSHMI
Nationality   Sex   Date of Birth
INDIAN  F  23/09/1959
Place of Issue
HYDERABAD
P<INDRAMADUGULA<<SITA<MAHA<LAKSHMI<<<<<<<<<<<<<<<<<
J8369854<4IND5909234F2203209<<<<<<<<<<<<<<<<2
"""

MARKSHEET_TEXT = """JAWAHARLAL NEHRU TECHNOLOGICAL UNIVERSITY
Grade Sheet
Bachelor of Technology in Computer Science and Engineering
Semester: V
Year of Admission: 2019
Result Declared: 2023
SGPA : 8.5
CGPA:9.1
"""

TENTH_TEXT = """CENTRAL BOARD OF SECONDARY EDUCATION
SECONDARY SCHOOL EXAMINATION, 2018
MARKS STATEMENT CUM CERTIFICATE
This is to certify that RAHUL SHARMA
Roll No. 1234567
Mother's Name SUNITA SHARMA
Father's Name RAJESH SHARMA
School 54321 - KENDRIYA VIDYALAYA NO 2 DELHI
Result: PASS
Dated: 28/05/2018
"""

TWELFTH_TEXT = """CENTRAL BOARD OF SECONDARY EDUCATION
SENIOR SCHOOL CERTIFICATE EXAMINATION 2020
CLASS XII
Name of Candidate: PRIYA VERMA
Mother's Name: ANITA VERMA
110045 - SARVODAYA VIDYALAYA ROHINI
Result: PASS
"""


@pytest.fixture
def pan_text() -> str:
    return PAN_TEXT


@pytest.fixture
def legacy_pan_text() -> str:
    return LEGACY_PAN_TEXT


@pytest.fixture
def aadhaar_text() -> str:
    return AADHAAR_TEXT


@pytest.fixture
def passport_text() -> str:
    return PASSPORT_TEXT


@pytest.fixture
def marksheet_text() -> str:
    return MARKSHEET_TEXT


@pytest.fixture
def tenth_text() -> str:
    return TENTH_TEXT


@pytest.fixture
def twelfth_text() -> str:
    return TWELFTH_TEXT


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"
