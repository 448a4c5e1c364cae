"""FastAPI application for the document verification API.

Provides REST endpoints for extraction from uploaded images, extraction
from raw OCR text, document type listing, and health checks.
"""

from typing import Annotated, Any

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from docverify import __version__
from docverify.classification.classifier import DocumentType
from docverify.extraction.pipeline import ExtractionPipeline
from docverify.ocr.tesseract_engine import TesseractEngine, tesseract_available
from docverify.utils.config import AppConfig, load_config
from docverify.utils.logger import get_logger

from .schemas import (
    DocumentTypesResponse,
    ExtractionResponse,
    HealthResponse,
    TextExtractionRequest,
)

logger = get_logger(__name__)

app = FastAPI(
    title="Document Verification API",
    description="Classify Indian identity and academic documents and extract their fields",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_components() -> tuple[AppConfig, TesseractEngine, ExtractionPipeline]:
    """Build fresh per-request processing components.

    Returns:
        Tuple of (config, ocr_engine, pipeline).
    """
    config = load_config()
    ocr_engine = TesseractEngine(
        tesseract_cmd=config.ocr.tesseract_cmd,
        default_lang=config.ocr.default_lang,
        psm=config.ocr.psm,
    )
    pipeline = ExtractionPipeline(config.extraction)
    return config, ocr_engine, pipeline


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return system health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        tesseract_available=tesseract_available(),
    )


@app.get("/document-types", response_model=DocumentTypesResponse)
async def list_document_types() -> DocumentTypesResponse:
    """List the document types the classifier can report."""
    return DocumentTypesResponse(document_types=[t.value for t in DocumentType])


@app.post(
    "/extract",
    response_model=ExtractionResponse,
    response_model_exclude_none=True,
)
async def extract_document(
    file: Annotated[UploadFile, File(...)],
    document_type: Annotated[str | None, Form(alias="documentType")] = None,
) -> dict[str, Any]:
    """OCR an uploaded image, then classify it and extract its fields.

    Args:
        file: Uploaded document image (PNG, JPEG or TIFF).
        document_type: Type the uploader claims the document is.

    Returns:
        The extraction record, or a mismatch record if the claim is wrong.
    """
    config, ocr_engine, pipeline = _get_components()

    if file.content_type and file.content_type not in config.intake.allowed_content_types:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: {file.content_type}",
        )

    content = await file.read()
    if len(content) > config.intake.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {config.intake.max_upload_bytes} bytes",
        )

    try:
        text = ocr_engine.extract_text(content)
        logger.info("Extracted text length: %d", len(text))
        return pipeline.run(text, document_type).to_dict()
    except Exception as exc:
        logger.error("Extraction failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post(
    "/extract/text",
    response_model=ExtractionResponse,
    response_model_exclude_none=True,
)
async def extract_text(request: TextExtractionRequest) -> dict[str, Any]:
    """Classify already-extracted OCR text and pull out its fields."""
    _, _, pipeline = _get_components()
    try:
        return pipeline.run(request.text, request.document_type).to_dict()
    except Exception as exc:
        logger.error("Extraction failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
