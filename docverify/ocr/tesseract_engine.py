"""Tesseract OCR provider producing plain text for the extraction engine.

OCR failures never propagate: they are logged and reported as empty
text, which the engine classifies as ``UNKNOWN``.
"""

import io
import shutil

import pytesseract
from PIL import Image, ImageSequence, UnidentifiedImageError

from docverify.utils.logger import get_logger

logger = get_logger(__name__)


def tesseract_available() -> bool:
    """Whether the Tesseract binary can be found on ``PATH``."""
    return shutil.which(pytesseract.pytesseract.tesseract_cmd) is not None


class TesseractEngine:
    """Wrapper around Tesseract OCR for document text extraction.

    Args:
        tesseract_cmd: Path to the Tesseract executable.
            If ``None``, uses the system default.
        default_lang: OCR language code.
        psm: Tesseract page segmentation mode.
    """

    def __init__(
        self,
        tesseract_cmd: str | None = None,
        default_lang: str = "eng",
        psm: int = 3,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.default_lang = default_lang
        self.psm = psm

    def extract_text(self, content: bytes) -> str:
        """Run OCR over every page of an image file.

        Args:
            content: Raw bytes of a PNG, JPEG or (multi-page) TIFF image.

        Returns:
            Page texts joined with newlines, or ``""`` if OCR failed.
        """
        try:
            image = Image.open(io.BytesIO(content))
            pages = [
                pytesseract.image_to_string(
                    frame.convert("RGB"),
                    lang=self.default_lang,
                    config=f"--psm {self.psm}",
                )
                for frame in ImageSequence.Iterator(image)
            ]
        except pytesseract.TesseractNotFoundError:
            logger.error("Tesseract executable not found")
            return ""
        except pytesseract.TesseractError as exc:
            logger.warning("Tesseract failed: %s", exc)
            return ""
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Could not read image for OCR: %s", exc)
            return ""

        text = "\n".join(page.strip() for page in pages)
        if not text.strip():
            logger.warning("OCR completed but returned no text")
        logger.info("OCR extracted %d characters from %d page(s)", len(text), len(pages))
        return text
