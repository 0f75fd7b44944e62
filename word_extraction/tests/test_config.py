import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from word_extraction.app.config import DOC_CONTENT_TYPE, DOCX_CONTENT_TYPE, Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        self.assertEqual(settings.APP_PORT, 8989)
        self.assertEqual(settings.max_upload_size_bytes, 10 * 1024 * 1024)
        self.assertEqual(settings.allowed_content_types_set, {DOCX_CONTENT_TYPE, DOC_CONTENT_TYPE})
        self.assertEqual(settings.EXTRACTION_STRATEGY, "text_runs")
        self.assertIsNone(settings.TEMP_DIR)

    def test_environment_aliases(self):
        env = {"PORT": "9100", "HOST": "127.0.0.1", "EXTRACTION_STRATEGY": "structured"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        self.assertEqual(settings.APP_PORT, 9100)
        self.assertEqual(settings.APP_HOST, "127.0.0.1")
        self.assertEqual(settings.EXTRACTION_STRATEGY, "structured")

    def test_unknown_strategy_rejected(self):
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, EXTRACTION_STRATEGY="ocr")

    def test_upload_limit_must_be_positive(self):
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, MAX_UPLOAD_SIZE_MB=0)


if __name__ == '__main__':
    unittest.main()
