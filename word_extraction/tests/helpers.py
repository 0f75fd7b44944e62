import io
from pathlib import Path

import docx

from word_extraction.app.config import Settings

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_CONTENT_TYPE = "application/msword"


def make_docx_bytes(*paragraphs: str) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def make_settings(temp_dir: Path, **overrides) -> Settings:
    return Settings(_env_file=None, TEMP_DIR=temp_dir, **overrides)
