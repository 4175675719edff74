"""Text extraction from uploaded resumes: PDF, raster images (OCR), DOCX."""

import io
import logging

import pdfplumber

from config import settings

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_EXTENSION_MIME = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
}


class ExtractionError(Exception):
    """Text could not be extracted from an uploaded file."""


class NoTextFoundError(ExtractionError):
    """The file parsed fine but contains no extractable text (e.g. a scanned PDF)."""


class UnsupportedFileTypeError(ExtractionError):
    """The file is neither a PDF, an image nor a DOCX document."""


def guess_mime_type(file_name: str, declared: str | None = None) -> str:
    """Prefer the declared content type; fall back to the file extension."""
    if declared and declared != "application/octet-stream":
        return declared
    lower = (file_name or "").lower()
    for ext, mime in _EXTENSION_MIME.items():
        if lower.endswith(ext):
            return mime
    return declared or ""


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, skipping pages that fail to parse."""
    pages = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for number, page in enumerate(pdf.pages, start=1):
            try:
                pages.append(page.extract_text() or "")
            except Exception as e:
                logger.warning("Could not extract page %d: %s", number, e)
    return "\n".join(pages).strip()


def extract_text_image(image_bytes: bytes) -> str:
    """OCR a raster image with Tesseract."""
    import pytesseract
    from PIL import Image

    if settings.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd
    with Image.open(io.BytesIO(image_bytes)) as image:
        return (pytesseract.image_to_string(image, lang=settings.ocr_language) or "").strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    from docx import Document

    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text(content: bytes, mime_type: str, file_name: str = "") -> str:
    """Extract text from an uploaded file.

    Raises NoTextFoundError when the file has no text, UnsupportedFileTypeError
    for unknown types, and ExtractionError for any parser or OCR failure.
    """
    mime = guess_mime_type(file_name, mime_type)

    if mime == PDF_MIME:
        extractor = extract_text_pdf
    elif mime.startswith("image/"):
        extractor = extract_text_image
    elif mime == DOCX_MIME:
        extractor = extract_text_docx
    else:
        raise UnsupportedFileTypeError(
            "Please upload a PDF, DOCX or image file (PDF, JPG, PNG, GIF, BMP, WebP)"
        )

    try:
        text = extractor(content)
    except Exception as e:
        logger.warning("Text extraction failed for %s (%s): %s", file_name or "<upload>", mime, e)
        raise ExtractionError(f"Failed to extract text: {e}") from e

    if not text.strip():
        raise NoTextFoundError(
            "No text found in file. It may be scanned or empty; try an image upload or paste the text instead."
        )
    return text
