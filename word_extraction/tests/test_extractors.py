import tempfile
import unittest
from pathlib import Path

from word_extraction.app.services.extractors import (
    StructuredXmlExtractor,
    TextRunExtractor,
    body_markup,
    get_extractor,
    join_text_runs,
)
from word_extraction.app.utils.errors import DocumentParseError
from word_extraction.tests.helpers import make_docx_bytes


class TestJoinTextRuns(unittest.TestCase):

    def test_runs_are_joined_with_trailing_space(self):
        self.assertEqual(join_text_runs("<w:t>Hello</w:t><w:t>World</w:t>"), "Hello World ")

    def test_run_attributes_are_skipped(self):
        markup = '<w:r><w:t xml:space="preserve">Hello </w:t></w:r><w:r><w:t>there</w:t></w:r>'
        self.assertEqual(join_text_runs(markup), "Hello  there ")

    def test_similar_tags_do_not_match(self):
        markup = "<w:tbl><w:tc><w:p><w:r><w:tab/><w:t>cell</w:t></w:r></w:p></w:tc></w:tbl>"
        self.assertEqual(join_text_runs(markup), "cell ")

    def test_empty_markup(self):
        self.assertEqual(join_text_runs("<w:body/>"), "")

    def test_self_closing_runs_are_skipped(self):
        markup = '<w:r><w:t xml:space="preserve"/></w:r><w:r><w:t/><w:t>A</w:t></w:r>'
        self.assertEqual(join_text_runs(markup), "A ")


class BrokenBodyDocument:

    @property
    def element(self):
        raise ValueError("body element is missing")


class TestExtractors(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.path = Path(self.temp_dir.name) / "sample.docx"

    def test_text_run_extractor(self):
        self.path.write_bytes(make_docx_bytes("Hello", "World"))
        self.assertEqual(TextRunExtractor().extract(self.path), "Hello World ")

    def test_structured_extractor_returns_body_markup(self):
        self.path.write_bytes(make_docx_bytes("Hello"))
        content = StructuredXmlExtractor().extract(self.path)
        self.assertTrue(content.startswith("<w:body"))
        self.assertIn("<w:t>Hello</w:t>", content)
        self.assertIn("w:sectPr", content)

    def test_corrupt_document_raises_parse_error(self):
        self.path.write_bytes(b"definitely not a zip archive")
        for extractor in (TextRunExtractor(), StructuredXmlExtractor()):
            with self.assertRaises(DocumentParseError) as ctx:
                extractor.extract(self.path)
            self.assertTrue(ctx.exception.message.startswith("Error opening document: "))
            self.assertEqual(ctx.exception.status_code, 500)

    def test_body_serialization_failure_raises_parse_error(self):
        with self.assertRaises(DocumentParseError) as ctx:
            body_markup(BrokenBodyDocument())
        self.assertEqual(ctx.exception.message, "Error extracting content: body element is missing")
        self.assertEqual(ctx.exception.status_code, 500)

    def test_get_extractor(self):
        self.assertIsInstance(get_extractor("text_runs"), TextRunExtractor)
        self.assertIsInstance(get_extractor("structured"), StructuredXmlExtractor)
        with self.assertRaises(ValueError):
            get_extractor("ocr")


if __name__ == '__main__':
    unittest.main()
