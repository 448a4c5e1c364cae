"""Pydantic request/response schemas for the FastAPI endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class TextExtractionRequest(BaseModel):
    """Request body for extracting fields from already-OCR'd text."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    document_type: str | None = Field(default=None, alias="documentType")


class ExtractionResponse(BaseModel):
    """Extraction record; type-specific field objects ride along as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    document_type: str | None = Field(default=None, alias="documentType")
    is_valid: bool = Field(alias="isValid")
    data: str
    reason: str | None = None
    detected_type: str | None = Field(default=None, alias="detectedType")


class DocumentTypesResponse(BaseModel):
    """Response schema listing the recognised document types."""

    document_types: list[str]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    tesseract_available: bool
