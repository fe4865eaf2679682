"""
Tests for resume_builder.nlp.extractors — document text extraction.
"""

import codecs

import pytest

from resume_builder.nlp.exceptions import (
    EmptyContentError,
    ExtractionError,
    UnsupportedMediaTypeError,
)
from resume_builder.nlp.extractors import (
    DOCXExtractor,
    ExtractorFactory,
    PDFExtractor,
    TextExtractor,
    extract_file_lines,
    extract_file_text,
    extract_lines,
    extract_text,
    media_type_for_path,
    split_lines,
)
from resume_builder.utils.config import get_settings
from resume_builder.utils.constants import MediaType


# ── split_lines ──────────────────────────────────────────────────────────────


class TestSplitLines:
    def test_trims_and_drops_empty(self):
        assert split_lines("  Jane Doe  \n\n   \n\tEngineer\r\n") == ["Jane Doe", "Engineer"]

    def test_empty_text(self):
        assert split_lines("") == []

    def test_order_preserved(self):
        assert split_lines("b\na\nc") == ["b", "a", "c"]

    def test_only_newline_splits(self):
        assert split_lines("Jane Doe\u2028Engineer\x0cSKILLS") == ["Jane Doe\u2028Engineer\x0cSKILLS"]

    def test_crlf_endings_trimmed(self):
        assert split_lines("Jane Doe\r\nEngineer\r\n") == ["Jane Doe", "Engineer"]


# ── TextExtractor ────────────────────────────────────────────────────────────


class TestTextExtractor:
    @pytest.fixture
    def extractor(self):
        return TextExtractor()

    def test_utf8(self, extractor):
        result = extractor.extract_from_bytes("José Núñez".encode("utf-8"))
        assert result.success
        assert result.text == "José Núñez"

    def test_utf8_bom_stripped(self, extractor):
        result = extractor.extract_from_bytes(codecs.BOM_UTF8 + b"Jane")
        assert result.text == "Jane"

    def test_utf16_with_bom(self, extractor):
        result = extractor.extract_from_bytes("Jane Doe".encode("utf-16"))
        assert result.text == "Jane Doe"
        assert result.metadata["encoding"] == "utf-16"

    def test_cp1252_fallback(self, extractor):
        result = extractor.extract_from_bytes("Café – Bar".encode("cp1252"))
        assert result.text == "Café – Bar"
        assert result.metadata["encoding"] == "cp1252"

    def test_extract_file(self, extractor, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe\nEngineer", encoding="utf-8")
        result = extractor.extract(path)
        assert result.text == "Jane Doe\nEngineer"

    def test_missing_file_is_error_result(self, extractor, tmp_path):
        result = extractor.extract(tmp_path / "missing.txt")
        assert result.success is False
        assert isinstance(result.error, FileNotFoundError)

    def test_oversized_file_is_error_result(self, extractor, tmp_path, monkeypatch):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"x" * 64)
        monkeypatch.setattr(get_settings().upload, "max_file_size", 32)
        result = extractor.extract(path)
        assert result.success is False
        assert "MB limit" in result.error_message

    def test_directory_is_error_result(self, extractor, tmp_path):
        result = extractor.extract(tmp_path)
        assert result.success is False
        assert isinstance(result.error, ValueError)


# ── DOCXExtractor ────────────────────────────────────────────────────────────


class TestDOCXExtractor:
    def test_paragraphs(self, make_docx_bytes):
        content = make_docx_bytes(["Jane Doe", "", "Software Engineer"])
        result = DOCXExtractor().extract_from_bytes(content)
        assert result.success
        assert result.text == "Jane Doe\nSoftware Engineer"

    def test_table_rows_joined(self, make_docx_bytes):
        content = make_docx_bytes(["SKILLS"], table_rows=[["Python", "Go"]])
        result = DOCXExtractor().extract_from_bytes(content)
        assert result.text.splitlines() == ["SKILLS", "Python | Go"]

    def test_empty_document_warns(self, make_docx_bytes):
        result = DOCXExtractor().extract_from_bytes(make_docx_bytes([]))
        assert result.is_empty
        assert result.warnings

    def test_garbage_bytes_fail(self):
        result = DOCXExtractor().extract_from_bytes(b"not a word document")
        assert result.success is False
        assert result.error is not None


# ── PDFExtractor ─────────────────────────────────────────────────────────────


class TestPDFExtractor:
    def test_garbage_bytes_fail(self):
        result = PDFExtractor().extract_from_bytes(b"this is not a pdf")
        assert result.success is False
        assert result.error_message


# ── Factory / media types ────────────────────────────────────────────────────


class TestExtractorFactory:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("resume.pdf", MediaType.PDF),
            ("resume.DOCX", MediaType.DOCX),
            ("resume.doc", MediaType.DOC),
            ("resume.txt", MediaType.TEXT),
            ("notes.md", MediaType.TEXT),
        ],
    )
    def test_media_type_for_path(self, name, expected):
        assert media_type_for_path(name) == expected

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedMediaTypeError):
            media_type_for_path("resume.rtf")

    def test_extractor_for_media_type(self):
        assert isinstance(ExtractorFactory.get_extractor_for_media_type(MediaType.PDF.value), PDFExtractor)
        assert isinstance(ExtractorFactory.get_extractor_for_media_type(MediaType.DOC.value), DOCXExtractor)
        assert ExtractorFactory.get_extractor_for_media_type("image/png") is None

    def test_is_supported(self):
        assert ExtractorFactory.is_supported("cv.docx")
        assert not ExtractorFactory.is_supported("cv.rtf")

    def test_extract_by_extension(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"Jane Doe\nEngineer")
        result = ExtractorFactory.extract(path)
        assert result.success
        assert result.text == "Jane Doe\nEngineer"

    def test_extract_with_explicit_media_type(self, tmp_path):
        path = tmp_path / "resume.bin"
        path.write_bytes(b"Jane Doe")
        assert ExtractorFactory.extract(path, MediaType.TEXT.value).text == "Jane Doe"

    def test_extract_unknown_extension(self, tmp_path):
        result = ExtractorFactory.extract(tmp_path / "resume.rtf")
        assert result.success is False
        assert ".rtf" in result.error_message

    def test_doc_named_docx_warns(self, tmp_path, make_docx_bytes):
        path = tmp_path / "resume.doc"
        path.write_bytes(make_docx_bytes(["Jane Doe"]))
        result = ExtractorFactory.extract(path)
        assert result.text.strip() == "Jane Doe"
        assert any(".doc" in w for w in result.warnings)


# ── extract_text / extract_lines ─────────────────────────────────────────────


class TestExtractText:
    def test_text_str_used_directly(self):
        assert extract_text("Jane\nDoe", "text/plain") == "Jane\nDoe"

    def test_text_bytes(self):
        assert extract_lines(b"  Jane \n\n Doe ", MediaType.TEXT) == ["Jane", "Doe"]

    def test_docx_bytes(self, make_docx_bytes):
        content = make_docx_bytes(["Jane Doe", "Engineer"])
        assert extract_lines(content, MediaType.DOCX.value) == ["Jane Doe", "Engineer"]

    def test_unsupported_media_type(self):
        with pytest.raises(UnsupportedMediaTypeError):
            extract_text(b"data", "image/png")

    def test_corrupt_pdf_raises_extraction_error(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"this is not a pdf", MediaType.PDF)
        assert exc_info.value.media_type == MediaType.PDF.value
        assert exc_info.value.cause is not None

    def test_str_source_for_pdf_rejected(self):
        with pytest.raises(ExtractionError):
            extract_text("Jane Doe", MediaType.PDF)

    def test_empty_extraction_is_not_an_error_here(self):
        # Emptiness is decided by the parser, not the extractor
        assert extract_lines(b"   \n  ", MediaType.TEXT) == []

    def test_errors_share_base_class(self):
        from resume_builder.nlp.exceptions import ResumeParseError

        assert issubclass(ExtractionError, ResumeParseError)
        assert issubclass(EmptyContentError, ResumeParseError)
        assert issubclass(UnsupportedMediaTypeError, ResumeParseError)


class TestWordErrors:
    def test_word_failure_mentions_docx(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(b"legacy binary word file", MediaType.DOC)
        assert ".docx" in str(exc_info.value)

    def test_supported_extensions(self):
        extensions = ExtractorFactory.get_supported_extensions()
        assert {".pdf", ".docx", ".doc", ".txt"} <= set(extensions)


# ── extract_file_text / extract_file_lines ───────────────────────────────────


class TestExtractFile:
    def test_lines_from_text_file(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"  Jane \r\n\r\n Doe ")
        assert extract_file_lines(path) == ["Jane", "Doe"]

    def test_lines_from_docx_file(self, tmp_path, make_docx_bytes):
        path = tmp_path / "resume.docx"
        path.write_bytes(make_docx_bytes(["Jane Doe", "Engineer"]))
        assert extract_file_lines(path) == ["Jane Doe", "Engineer"]

    def test_explicit_media_type_overrides_extension(self, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"Jane Doe")
        assert extract_file_text(path, MediaType.TEXT) == "Jane Doe"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            extract_file_text(tmp_path / "missing.txt")

    def test_unknown_extension_checked_first(self, tmp_path):
        with pytest.raises(UnsupportedMediaTypeError):
            extract_file_text(tmp_path / "missing.rtf")

    def test_oversized_file_carries_media_type(self, tmp_path, monkeypatch):
        path = tmp_path / "resume.txt"
        path.write_bytes(b"x" * 64)
        monkeypatch.setattr(get_settings().upload, "max_file_size", 32)
        with pytest.raises(ExtractionError) as exc_info:
            extract_file_text(path, MediaType.TEXT)
        assert exc_info.value.media_type == "text/plain"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_unreadable_doc_file_mentions_docx(self, tmp_path):
        path = tmp_path / "resume.doc"
        path.write_bytes(b"legacy binary word file")
        with pytest.raises(ExtractionError) as exc_info:
            extract_file_text(path)
        assert ".docx" in str(exc_info.value)
