"""Classification and extraction pipeline.

Classifies the text, compares the detected type with the caller's claim,
and runs the field extractors registered for the detected type.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from docverify.classification.classifier import DocumentClassifier, DocumentType
from docverify.utils.config import ExtractionConfig
from docverify.utils.logger import get_logger

from . import academic, identity, school
from .fields import ExtractedField, FieldExtractor

logger = get_logger(__name__)

MISMATCH_REASON = "DOCUMENT_TYPE_MISMATCH"


@dataclass
class ExtractionResult:
    """Structured outcome for one document.

    ``fields`` only holds values that were found; absent fields are
    left out rather than stored as empty placeholders.
    """

    document_type: DocumentType
    is_valid: bool
    data: str
    reason: str | None = None
    detected_type: DocumentType | None = None
    fields: dict[str, ExtractedField] = field(default_factory=dict)

    @property
    def is_mismatch(self) -> bool:
        return self.reason == MISMATCH_REASON

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON record handed to the presentation layer."""
        if self.is_mismatch:
            return {
                "isValid": self.is_valid,
                "reason": self.reason,
                "detectedType": str(self.detected_type),
                "data": self.data,
            }

        record: dict[str, Any] = {
            "documentType": str(self.document_type),
            "isValid": self.is_valid,
            "data": self.data,
        }
        for key, value in self.fields.items():
            record[key] = value.to_dict()
        return record


def normalize_claim(claimed_type: DocumentType | str | None) -> str | None:
    """Reduce a caller's claimed type to an upper-case token, or ``None``."""
    if claimed_type is None:
        return None
    claim = str(claimed_type).strip().upper()
    return claim or None


class ExtractionPipeline:
    """Stateless classify-then-extract engine.

    Args:
        config: Score thresholds for the line-scored extractors.
    """

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        self.config = config or ExtractionConfig()
        self.classifier = DocumentClassifier()
        self.extractors: dict[DocumentType, Mapping[str, FieldExtractor]] = {
            DocumentType.MARKSHEET: {
                "sgpaData": academic.extract_sgpa,
                "cgpaData": academic.extract_cgpa,
                "universityName": partial(
                    academic.extract_university,
                    min_score=self.config.university_min_score,
                    scan_lines=self.config.university_scan_lines,
                ),
                "courseName": partial(
                    academic.extract_course, min_score=self.config.course_min_score
                ),
                "admissionYr": academic.extract_admission_year,
                "passingYr": academic.extract_passing_year,
            },
            DocumentType.PAN: {
                "panData": identity.extract_pan_number,
                "panName": identity.extract_pan_name,
                "panFatherName": identity.extract_pan_father_name,
                "panDob": identity.extract_pan_dob,
            },
            DocumentType.AADHAAR: {
                "aadhaarNumber": identity.extract_aadhaar_number,
                "aadhaarDob": identity.extract_aadhaar_dob,
                "aadhaarGender": identity.extract_aadhaar_gender,
            },
            DocumentType.PASSPORT: {
                "passportNumber": identity.extract_passport_number,
                "passportSurname": identity.extract_passport_surname,
                "passportGivenName": identity.extract_passport_given_name,
                "passportDob": identity.extract_passport_dob,
                "passportNationality": identity.extract_passport_nationality,
            },
            DocumentType.TENTH_MARKSHEET: self._school_extractors(
                "tenth", school.extract_tenth_passing_year
            ),
            DocumentType.TWELFTH_MARKSHEET: self._school_extractors(
                "twelfth", school.extract_twelfth_passing_year
            ),
        }

    def _school_extractors(
        self, prefix: str, passing_year: FieldExtractor
    ) -> dict[str, FieldExtractor]:
        return {
            f"{prefix}StudentName": school.extract_student_name,
            f"{prefix}SchoolName": partial(
                school.extract_school_name,
                min_score=self.config.school_name_min_score,
            ),
            f"{prefix}PassingYear": passing_year,
            f"{prefix}ResultStatus": school.extract_result_status,
        }

    def run(
        self, text: str, claimed_type: DocumentType | str | None = None
    ) -> ExtractionResult:
        """Classify ``text`` and extract the fields of its document type.

        Args:
            text: Raw OCR text. Empty text classifies as ``UNKNOWN``.
            claimed_type: Type declared by the caller, if any.

        Returns:
            A mismatch result when the claim disagrees with the detected
            type, otherwise the extracted fields for the detected type.
        """
        text = text or ""
        detected = self.classifier.classify(text)

        claim = normalize_claim(claimed_type)
        if claim is not None and claim != detected.value:
            logger.info("Claimed type %s does not match detected %s", claim, detected)
            return ExtractionResult(
                document_type=detected,
                is_valid=False,
                data=text,
                reason=MISMATCH_REASON,
                detected_type=detected,
            )

        extractors = self.extractors.get(detected)
        if extractors is None:
            logger.info("No extractors for %s document", detected)
            return ExtractionResult(document_type=detected, is_valid=False, data=text)

        fields: dict[str, ExtractedField] = {}
        for key, extractor in extractors.items():
            value = self._safe_extract(key, extractor, text)
            if value is not None:
                fields[key] = value

        logger.info(
            "Extracted %d/%d fields from %s document",
            len(fields),
            len(extractors),
            detected,
        )
        return ExtractionResult(
            document_type=detected,
            is_valid=True,
            data=text,
            fields=fields,
        )

    @staticmethod
    def _safe_extract(
        key: str, extractor: FieldExtractor, text: str
    ) -> ExtractedField | None:
        try:
            return extractor(text)
        except Exception:
            logger.warning("Extractor for %s failed, treating as not found", key, exc_info=True)
            return None
