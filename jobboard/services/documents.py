# jobboard/services/documents.py
"""
Plain-text extraction for uploaded resumes (PDF, DOCX, TXT).

The skill core only ever sees the string this returns.
"""
import os
import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader
from pypdf.errors import PyPdfError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


class DocumentError(Exception):
    pass


class UnsupportedDocumentError(DocumentError):
    pass


class DocumentParseError(DocumentError):
    pass


def _extract_text_from_pdf_bytes(data: bytes) -> str:
    try:
        reader = PdfReader(BytesIO(data))
    except (PyPdfError, ValueError, OSError) as e:
        raise DocumentParseError("Failed to parse PDF file") from e
    texts = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            texts.append(page.extract_text() or "")
        except (PyPdfError, ValueError, KeyError) as e:
            # one unreadable page should not sink the whole resume
            logger.warning("skipping PDF page %d: %s", number, e)
    text = "\n".join(texts).strip()
    if not text:
        raise DocumentParseError(
            "This PDF appears to be scanned/image-based. Please use a PDF with selectable text, "
            "or apply manually."
        )
    return text


def _extract_text_from_docx_bytes(data: bytes) -> str:
    try:
        doc = Document(BytesIO(data))
    except Exception as e:
        # python-docx surfaces zip, xml and package errors with no common base
        raise DocumentParseError("Failed to parse DOCX file") from e
    text = "\n".join(p.text for p in doc.paragraphs).strip()
    if not text:
        raise DocumentParseError("This document appears to be empty.")
    return text


def _extract_text_from_txt_bytes(data: bytes) -> str:
    text = data.decode("utf-8", errors="replace").strip()
    if not text:
        raise DocumentParseError("This document appears to be empty.")
    return text


_EXTRACTORS = {
    ".pdf": _extract_text_from_pdf_bytes,
    ".docx": _extract_text_from_docx_bytes,
    ".txt": _extract_text_from_txt_bytes,
}


def extract_text(filename: str, data: bytes) -> str:
    """
    Text of an uploaded document, chosen by file extension.

    Raises:
        UnsupportedDocumentError: extension is not .pdf/.docx/.txt
        DocumentParseError: the file is unreadable or has no text
    """
    ext = os.path.splitext(filename or "")[1].lower()
    extractor = _EXTRACTORS.get(ext)
    if extractor is None:
        raise UnsupportedDocumentError(f"Unsupported file type: {ext or filename!r}")
    text = extractor(data)
    logger.info("extracted %d characters from %s", len(text), filename)
    return text


def extract_text_from_path(path: str) -> str:
    with open(path, "rb") as f:
        return extract_text(os.path.basename(path), f.read())
