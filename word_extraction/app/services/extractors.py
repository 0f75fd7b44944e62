"""Content extractors for staged Word documents.

Both extractors open the file through python-docx and read the document body
(``w:body``). ``StructuredXmlExtractor`` returns the serialized body markup as
is; ``TextRunExtractor`` scrapes the text of every ``w:t`` run out of it.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Type

import docx
from lxml import etree

from ..utils.errors import DocumentParseError

# <w:t> with optional attributes (not self-closing), capturing everything up to the next tag
TEXT_RUN_PATTERN = re.compile(r"<w:t(?:\s[^>]*)?(?<!/)>([^<]*)")


def open_document(path: Path):
    try:
        return docx.Document(str(path))
    except Exception as exc:
        raise DocumentParseError(f"Error opening document: {exc}") from exc


def body_markup(document) -> str:
    """Serialize the document body element back to XML text."""
    try:
        return etree.tostring(document.element.body, encoding="unicode")
    except Exception as exc:
        raise DocumentParseError(f"Error extracting content: {exc}") from exc


def join_text_runs(markup: str) -> str:
    return "".join(f"{fragment} " for fragment in TEXT_RUN_PATTERN.findall(markup))


class ContentExtractor(ABC):
    """Turns a staged document into the text returned to the client."""

    name: str

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Return the content of the document at ``path``.

        Raises:
            DocumentParseError: the document could not be opened or read.
        """


class StructuredXmlExtractor(ContentExtractor):
    name = "structured"

    def extract(self, path: Path) -> str:
        return body_markup(open_document(path))


class TextRunExtractor(ContentExtractor):
    name = "text_runs"

    def extract(self, path: Path) -> str:
        return join_text_runs(body_markup(open_document(path)))


EXTRACTORS: Dict[str, Type[ContentExtractor]] = {
    StructuredXmlExtractor.name: StructuredXmlExtractor,
    TextRunExtractor.name: TextRunExtractor,
}


def get_extractor(name: str) -> ContentExtractor:
    try:
        return EXTRACTORS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown extraction strategy '{name}'. Expected one of: {', '.join(sorted(EXTRACTORS))}"
        ) from None
