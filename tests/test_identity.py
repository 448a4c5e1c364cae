"""Tests for PAN, Aadhaar and passport field extraction."""

from docverify.extraction.fields import ExtractedField
from docverify.extraction.identity import (
    extract_aadhaar_dob,
    extract_aadhaar_gender,
    extract_aadhaar_number,
    extract_pan_dob,
    extract_pan_father_name,
    extract_pan_name,
    extract_pan_number,
    extract_passport_dob,
    extract_passport_given_name,
    extract_passport_nationality,
    extract_passport_number,
    extract_passport_surname,
    mrz_birth_year,
)

MRZ_ONLY = (
    "P<INDRAMADUGULA<<SITA<MAHA<LAKSHMI<<<<<<<<<<<<<<<<<\n"
    "J8369854<4IND5909234F2203209<<<<<<<<<<<<<<<<2\n"
)


class TestPanNumber:
    """Tests for the gated PAN number extractor."""

    def test_extracts_number(self, pan_text: str) -> None:
        assert extract_pan_number(pan_text) == ExtractedField("ABCDE1234F")

    def test_same_line_as_headers(self) -> None:
        text = "INCOME TAX DEPARTMENT PERMANENT ACCOUNT NUMBER ABCDE1234F"
        assert extract_pan_number(text).value == "ABCDE1234F"

    def test_gated_without_pan_headers(self) -> None:
        assert extract_pan_number("Invoice ref ABCDE1234F") is None

    def test_punctuation_around_number(self) -> None:
        text = "Permanent Account Number:ABCDE1234F."
        assert extract_pan_number(text).value == "ABCDE1234F"

    def test_lowercase_is_normalized(self) -> None:
        text = "permanent account number abcde1234f"
        assert extract_pan_number(text).value == "ABCDE1234F"

    def test_repairs_lookalike_digit(self) -> None:
        result = extract_pan_number("INCOME TAX DEPARTMENT\nABCDE12S4F")
        assert result == ExtractedField("ABCDE1254F", confidence="LOW")

    def test_repairs_lookalike_letter(self) -> None:
        result = extract_pan_number("INCOME TAX DEPARTMENT\nA8CDE1234F")
        assert result == ExtractedField("ABCDE1234F", confidence="LOW")

    def test_strict_match_has_no_confidence_tag(self, pan_text: str) -> None:
        assert extract_pan_number(pan_text).confidence is None

    def test_no_number(self) -> None:
        assert extract_pan_number("INCOME TAX DEPARTMENT\nGOVT. OF INDIA") is None

    def test_empty(self) -> None:
        assert extract_pan_number("") is None


class TestPanHolderDetails:
    """Tests for the label-anchored PAN card details."""

    def test_name_from_label(self, pan_text: str) -> None:
        assert extract_pan_name(pan_text).value == "RAHUL KUMAR SHARMA"

    def test_father_name_from_label(self, pan_text: str) -> None:
        assert extract_pan_father_name(pan_text).value == "SURESH KUMAR SHARMA"

    def test_dob_from_label(self, pan_text: str) -> None:
        assert extract_pan_dob(pan_text).value == "15/08/1990"

    def test_name_on_label_line(self) -> None:
        text = "INCOME TAX DEPARTMENT\nName: ANITA DESAI\nFather's Name: VIKRAM DESAI"
        assert extract_pan_name(text).value == "ANITA DESAI"
        assert extract_pan_father_name(text).value == "VIKRAM DESAI"

    def test_legacy_layout(self, legacy_pan_text: str) -> None:
        assert extract_pan_name(legacy_pan_text).value == "RAHUL KUMAR"
        assert extract_pan_father_name(legacy_pan_text).value == "SURESH KUMAR"
        assert extract_pan_dob(legacy_pan_text).value == "15/08/1990"

    def test_missing(self) -> None:
        assert extract_pan_name("") is None
        assert extract_pan_father_name("") is None
        assert extract_pan_dob("") is None


class TestAadhaar:
    """Tests for the Aadhaar extractors."""

    def test_number(self, aadhaar_text: str) -> None:
        assert extract_aadhaar_number(aadhaar_text).value == "1234 5678 9012"

    def test_vid_block_is_excluded(self) -> None:
        text = "VID 1234 5678 9012 3456\n1234 5678 9012"
        assert extract_aadhaar_number(text).value == "1234 5678 9012"

    def test_vid_only_yields_nothing(self) -> None:
        assert extract_aadhaar_number("VID : 9123 4567 8901 2345") is None

    def test_unlabelled_sixteen_digit_block_is_ignored(self) -> None:
        assert extract_aadhaar_number("1234 5678 9012 3456") is None

    def test_extra_spaces_between_groups(self) -> None:
        assert extract_aadhaar_number("4321  8765  2109").value == "4321 8765 2109"

    def test_number_absent(self) -> None:
        assert extract_aadhaar_number("UIDAI\nMALE") is None
        assert extract_aadhaar_number("") is None

    def test_dob(self, aadhaar_text: str) -> None:
        assert extract_aadhaar_dob(aadhaar_text).value == "15/08/1990"

    def test_year_of_birth(self) -> None:
        assert extract_aadhaar_dob("Year of Birth : 1985").value == "1985"

    def test_gender(self, aadhaar_text: str) -> None:
        assert extract_aadhaar_gender(aadhaar_text).value == "MALE"

    def test_gender_female(self) -> None:
        assert extract_aadhaar_gender("Female").value == "FEMALE"


class TestPassport:
    """Tests for the passport extractors."""

    def test_number_from_label(self, passport_text: str) -> None:
        assert extract_passport_number(passport_text).value == "J8369854"

    def test_surname_from_label(self, passport_text: str) -> None:
        assert extract_passport_surname(passport_text).value == "RAMADUGULA"

    def test_given_name_from_label(self, passport_text: str) -> None:
        assert extract_passport_given_name(passport_text).value == "SITA MAHA LAKSHMI"

    def test_dob_from_label(self, passport_text: str) -> None:
        assert extract_passport_dob(passport_text).value == "23/09/1959"

    def test_nationality_skips_neighbouring_labels(self, passport_text: str) -> None:
        assert extract_passport_nationality(passport_text).value == "INDIAN"

    def test_mrz_fallbacks(self) -> None:
        assert extract_passport_number(MRZ_ONLY).value == "J8369854"
        assert extract_passport_surname(MRZ_ONLY).value == "RAMADUGULA"
        assert extract_passport_given_name(MRZ_ONLY).value == "SITA MAHA LAKSHMI"
        assert extract_passport_dob(MRZ_ONLY).value == "23/09/1959"
        assert extract_passport_nationality(MRZ_ONLY).value == "INDIAN"

    def test_absent(self) -> None:
        assert extract_passport_number("") is None
        assert extract_passport_given_name("REPUBLIC OF INDIA") is None
        assert extract_passport_dob("") is None


class TestMrzBirthYear:
    """Tests for two-digit MRZ birth year expansion."""

    def test_past_century_when_after_reference(self) -> None:
        assert mrz_birth_year(59, 2026) == 1959

    def test_current_century_up_to_reference(self) -> None:
        assert mrz_birth_year(26, 2026) == 2026
        assert mrz_birth_year(5, 2026) == 2005

    def test_fixed_reference_is_stable(self) -> None:
        assert mrz_birth_year(27, 2026) == 1927
        assert mrz_birth_year(27, 2030) == 2027
