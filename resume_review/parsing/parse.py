from __future__ import annotations

import hashlib
import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import ParsedDoc

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("txt", "pdf", "docx")


class ExtractionFailure(ValueError):
    pass


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _parse_txt(content: bytes) -> tuple[str, int | None, list[str]]:
    return content.decode("utf-8", errors="replace"), None, []


def _parse_pdf(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    if not content.lstrip().startswith(b"%PDF-"):
        raise ExtractionFailure("Failed to extract text from PDF: missing PDF header.")
    try:
        reader = PdfReader(BytesIO(content))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except Exception as exc:
        raise ExtractionFailure(f"Failed to extract text from PDF: {exc}") from exc

    text_parts = [page for page in pages if page]
    if not text_parts:
        warnings.append("No extractable text found in PDF.")
    return "\n\n".join(text_parts), len(pages), warnings


def _parse_docx(content: bytes) -> tuple[str, int | None, list[str]]:
    warnings: list[str] = []
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise ExtractionFailure(f"Failed to extract text from DOCX: {exc}") from exc

    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    if not paragraphs:
        warnings.append("No extractable text found in DOCX.")
    return "\n".join(paragraphs), None, warnings


_PARSERS = {
    "txt": _parse_txt,
    "pdf": _parse_pdf,
    "docx": _parse_docx,
}


def extract_text(filename: str, content: bytes) -> ParsedDoc:
    extension = file_extension(filename)
    parser = _PARSERS.get(extension)
    if parser is None:
        raise ExtractionFailure(
            f"Unsupported file type '.{extension}'. Supported types: "
            + ", ".join(f".{ext}" for ext in SUPPORTED_EXTENSIONS)
        )

    text, page_count, warnings = parser(content)
    logger.info(
        "text_extracted source_type=%s bytes=%s characters=%s warnings=%s",
        extension,
        len(content),
        len(text),
        len(warnings),
    )
    return ParsedDoc(
        doc_id=_compute_doc_id(text, filename),
        source_type=extension,
        text=text,
        page_count=page_count,
        parsing_warnings=warnings,
    )
