"""Tests for class X / class XII marksheet extraction."""

from docverify.extraction.patterns import TWELFTH_EXAM_YEAR_PATTERNS
from docverify.extraction.school import (
    clean_school_name,
    extract_result_status,
    extract_school_name,
    extract_student_name,
    extract_tenth_passing_year,
    extract_twelfth_passing_year,
)


class TestStudentName:
    """Tests for the student name cascade."""

    def test_certify_that(self, tenth_text: str) -> None:
        assert extract_student_name(tenth_text).value == "RAHUL SHARMA"

    def test_name_of_candidate_label(self, twelfth_text: str) -> None:
        assert extract_student_name(twelfth_text).value == "PRIYA VERMA"

    def test_certify_outranks_label(self) -> None:
        text = "Name of Candidate: WRONG PERSON\nThis is to certify that RIGHT PERSON"
        assert extract_student_name(text).value == "RIGHT PERSON"

    def test_name_split_across_lines(self) -> None:
        text = "Certified that\nMOHIT\nSINGH son of RAMESH SINGH"
        assert extract_student_name(text).value == "MOHIT SINGH"

    def test_line_above_parent(self) -> None:
        text = "BOARD OF SCHOOL EDUCATION HARYANA\nMATRICULATION\nAMIT KUMAR\nMother's Name KAMLA DEVI"
        assert extract_student_name(text).value == "AMIT KUMAR"

    def test_line_above_parent_keeps_scanning_past_label_lines(self) -> None:
        text = "GUARDIAN DETAILS\nFATHER NAME RAM LAL\nAMIT KUMAR\nMOTHER NAME SITA DEVI"
        assert extract_student_name(text).value == "AMIT KUMAR"

    def test_line_above_parent_skips_header_words(self) -> None:
        text = "ROLL NUMBER LIST\nFather's Name RAMESH"
        assert extract_student_name(text) is None

    def test_absent(self) -> None:
        assert extract_student_name("") is None
        assert extract_student_name("Marks obtained 450") is None


class TestSchoolName:
    """Tests for the school name scorer and cleanup."""

    def test_tenth_school(self, tenth_text: str) -> None:
        assert extract_school_name(tenth_text).value == "KENDRIYA VIDYALAYA NO 2"

    def test_twelfth_school(self, twelfth_text: str) -> None:
        assert extract_school_name(twelfth_text).value == "SARVODAYA VIDYALAYA ROHINI"

    def test_exam_title_never_chosen(self) -> None:
        assert extract_school_name("SENIOR SCHOOL CERTIFICATE EXAMINATION") is None

    def test_threshold(self) -> None:
        assert extract_school_name("XYZ SCHOOL").value == "XYZ SCHOOL"
        assert extract_school_name("Xyz school") is None
        assert extract_school_name("XYZ SCHOOL", min_score=7.0) is None

    def test_cleanup(self) -> None:
        assert clean_school_name("~~ 12345 - MODEL SCHOOL, HARYANA") == "MODEL SCHOOL"
        assert clean_school_name("SCHOOL ST PAUL ACADEMY") == "ST PAUL ACADEMY"


class TestPassingYear:
    """Tests for the passing year cascades."""

    def test_tenth_exam_title(self, tenth_text: str) -> None:
        assert extract_tenth_passing_year(tenth_text).value == "2018"

    def test_twelfth_exam_title(self, twelfth_text: str) -> None:
        assert extract_twelfth_passing_year(twelfth_text).value == "2020"

    def test_exam_held_in(self) -> None:
        text = "Examination held in March, 2017"
        assert extract_tenth_passing_year(text).value == "2017"

    def test_exam_title_outranks_result_phrase(self) -> None:
        text = "Result declared 2019\nANNUAL EXAMINATION 2018"
        assert extract_tenth_passing_year(text).value == "2018"

    def test_puc_exam_title_uses_generic_pattern(self) -> None:
        text = "KARNATAKA PUC EXAMINATION 2019"
        assert extract_twelfth_passing_year(text).value == "2019"

    def test_twelfth_titles_do_not_rely_on_university(self) -> None:
        assert not any("UNIVERSITY" in p.pattern for p in TWELFTH_EXAM_YEAR_PATTERNS)

    def test_result_phrase(self) -> None:
        assert extract_twelfth_passing_year("Passed in the year 2015").value == "2015"

    def test_issue_date_fallback(self) -> None:
        assert extract_tenth_passing_year("Dated: 12/06/2016").value == "2016"

    def test_absent(self) -> None:
        assert extract_tenth_passing_year("") is None
        assert extract_twelfth_passing_year("Roll No 2015") is None


class TestResultStatus:
    """Tests for the PASS/FAIL status check."""

    def test_pass(self, tenth_text: str) -> None:
        assert extract_result_status(tenth_text).value == "PASS"

    def test_fail(self) -> None:
        assert extract_result_status("Result: Fail").value == "FAIL"

    def test_pass_checked_before_fail(self) -> None:
        assert extract_result_status("FAIL IN ONE SUBJECT, PASS OVERALL").value == "PASS"

    def test_absent(self) -> None:
        assert extract_result_status("") is None
        assert extract_result_status("Compartment") is None
