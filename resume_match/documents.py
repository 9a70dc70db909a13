"""Extract plain text from uploaded resume documents."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import List, Optional

import fitz  # PyMuPDF
from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from .errors import DocumentError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = (".pdf", ".docx", ".txt", ".md")

_NO_TEXT_MESSAGE = (
    "Could not extract text from the document. It may be image-based (scanned) "
    "or contain no readable text. Please upload a document with selectable text."
)


def extract_text(data: bytes, filename: Optional[str] = None) -> str:
    """Return the trimmed text content of a PDF, DOCX, TXT or MD document.

    The format is detected from the content (PDF header, ZIP container)
    and, for plain text, from the file name suffix.

    Raises:
        DocumentError: empty input, unsupported or corrupt format,
            password protection, or no extractable text
    """
    if not data:
        raise DocumentError("Invalid document: file is empty")

    suffix = Path(filename).suffix.lower() if filename else ""
    if data[:4] == b"%PDF":
        text = _extract_pdf(data)
    elif data[:2] == b"PK" and suffix in ("", ".docx"):
        text = _extract_docx(data)
    elif suffix in (".txt", ".md"):
        text = _extract_plain(data)
    else:
        raise DocumentError(
            f"Unsupported document format. Supported: {', '.join(SUPPORTED_FORMATS)}",
            {"filename": filename or "", "supported": list(SUPPORTED_FORMATS)},
        )

    text = text.strip()
    if not text:
        raise DocumentError(_NO_TEXT_MESSAGE, {"filename": filename or ""})
    return text


def _extract_pdf(data: bytes) -> str:
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentError(
            "Invalid PDF file format. Please ensure the file is a valid PDF document.",
            {"reason": str(e)},
        ) from e

    try:
        if doc.needs_pass:
            raise DocumentError("This PDF is password-protected. Please remove the password and try again.")
        text_parts: List[str] = [page.get_text() for page in doc]
        logger.debug("Extracted %d page(s) from PDF", len(text_parts))
    finally:
        doc.close()
    return "\n".join(text_parts)


def _extract_docx(data: bytes) -> str:
    try:
        doc = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DocumentError(
            "Invalid DOCX file format. Please ensure the file is a valid Word document.",
            {"reason": str(e)},
        ) from e

    text_parts = [paragraph.text for paragraph in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                text_parts.append(" | ".join(cells))
    return "\n".join(text_parts)


def _extract_plain(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentError("Text file is not valid UTF-8", {"reason": str(e)}) from e
