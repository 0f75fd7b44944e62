"""Errors raised while handling an extraction request.

Every error carries the HTTP status and the plain-text message that is sent
back to the client, so the application only needs a single handler for them.
"""

from typing import Optional


class ExtractionServiceError(Exception):
    """Base class for errors that terminate an extraction request."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(ExtractionServiceError):
    status_code = 400
    default_message = "Bad request"


class UploadTooLargeError(ClientInputError):
    default_message = "File too large"


class MissingDocumentError(ClientInputError):
    default_message = "Error retrieving file"


class InvalidDocumentTypeError(ClientInputError):
    default_message = "Invalid file type. Only Word documents are allowed"


class ResourceError(ExtractionServiceError):
    """Temp file could not be created, read into or written."""

    default_message = "Error processing file"


class DocumentParseError(ExtractionServiceError):
    """The document library failed; the message includes its error text."""

    default_message = "Error opening document"


class ResponseEncodingError(ExtractionServiceError):
    default_message = "Error encoding response"
