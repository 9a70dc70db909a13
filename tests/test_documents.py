"""Tests for document text extraction."""

import io

import fitz  # PyMuPDF
import pytest
from docx import Document

from resume_match.documents import extract_text
from resume_match.errors import DocumentError, ErrorKind


def _pdf_bytes(text: str = "") -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def _docx_bytes(*paragraphs: str) -> bytes:
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def test_pdf_text():
    text = extract_text(_pdf_bytes("Jane Doe - Python Developer"), "resume.pdf")
    assert "Jane Doe - Python Developer" in text
    assert text == text.strip()


def test_pdf_detected_without_filename():
    assert "Python" in extract_text(_pdf_bytes("Python"))


def test_image_only_pdf_has_no_text():
    with pytest.raises(DocumentError) as exc_info:
        extract_text(_pdf_bytes(), "scan.pdf")
    assert "image-based" in exc_info.value.message


def test_corrupt_pdf():
    with pytest.raises(DocumentError):
        extract_text(b"%PDF-1.7 garbage that is not a pdf", "broken.pdf")


def test_docx_text():
    text = extract_text(_docx_bytes("Skills", "Python, AWS"), "resume.docx")
    assert text == "Skills\nPython, AWS"


def test_plain_text_by_suffix():
    assert extract_text("  Python developer \n".encode("utf-8"), "resume.txt") == "Python developer"


def test_empty_bytes():
    with pytest.raises(DocumentError) as exc_info:
        extract_text(b"", "resume.pdf")
    assert exc_info.value.kind == ErrorKind.INVALID_INPUT


def test_unsupported_format():
    with pytest.raises(DocumentError) as exc_info:
        extract_text(b"\x89PNG\r\n\x1a\n", "photo.png")
    assert ".pdf" in exc_info.value.message


def test_whitespace_only_text_file():
    with pytest.raises(DocumentError):
        extract_text(b"   \n\n", "resume.md")
