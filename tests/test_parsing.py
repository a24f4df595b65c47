import sys
import unittest
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.parsing.parse import ExtractionFailure, extract_text  # noqa: E402


def _docx_bytes(paragraphs: list[str]) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TextExtractionTests(unittest.TestCase):
    def test_txt_is_decoded(self):
        content = "Line one\n- Bullet item\nLine three"
        parsed = extract_text("resume.txt", content.encode("utf-8"))
        self.assertEqual(parsed.source_type, "txt")
        self.assertEqual(parsed.text, content)
        self.assertTrue(parsed.doc_id)
        self.assertEqual(parsed.doc_id, extract_text("copy.TXT", content.encode("utf-8")).doc_id)

    def test_docx_paragraphs_are_joined(self):
        parsed = extract_text("resume.docx", _docx_bytes(["Jane Doe", "", "Experience", "Led the API team"]))
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.text, "Jane Doe\nExperience\nLed the API team")
        self.assertEqual(parsed.parsing_warnings, [])

    def test_pdf_without_text_returns_warning(self):
        parsed = extract_text("scan.pdf", _blank_pdf_bytes())
        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertEqual(parsed.page_count, 1)
        self.assertEqual(parsed.parsing_warnings, ["No extractable text found in PDF."])

    def test_unreadable_pdf_raises(self):
        with self.assertRaises(ExtractionFailure) as ctx:
            extract_text("broken.pdf", b"definitely not a pdf")
        self.assertIn("Failed to extract text from PDF", str(ctx.exception))

    def test_unreadable_docx_raises(self):
        with self.assertRaises(ExtractionFailure):
            extract_text("broken.docx", b"not a zip archive")

    def test_unsupported_extension_raises(self):
        with self.assertRaises(ExtractionFailure):
            extract_text("resume.rtf", b"{\\rtf1}")
        with self.assertRaises(ExtractionFailure):
            extract_text("resume", b"plain")


if __name__ == "__main__":
    unittest.main()
