"""Reading the ``document`` file part out of an extraction request."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, FrozenSet

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request
from starlette.types import Message, Receive

from ..models.schemas import UploadedDocument
from ..utils.errors import InvalidDocumentTypeError, MissingDocumentError, UploadTooLargeError
from ..utils.logging import logger

DOCUMENT_FIELD = "document"


def limit_body_size(receive: Receive, max_bytes: int) -> Receive:
    """Wrap an ASGI ``receive`` callable so the body cannot grow past ``max_bytes``."""
    received = 0

    async def limited_receive() -> Message:
        nonlocal received
        message = await receive()
        if message["type"] == "http.request":
            received += len(message.get("body", b""))
            if received > max_bytes:
                raise UploadTooLargeError()
        return message

    return limited_receive


def check_declared_length(request: Request, max_bytes: int) -> None:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise UploadTooLargeError()


def validate_content_type(upload: UploadFile, allowed: FrozenSet[str]) -> None:
    # Trusts the header sent with the part; the bytes themselves are not sniffed.
    if upload.content_type not in allowed:
        logger.log_error("invalid_document_type", {
            "filename": upload.filename,
            "content_type": upload.content_type
        })
        raise InvalidDocumentTypeError()


@asynccontextmanager
async def received_upload(
    request: Request,
    max_bytes: int,
    allowed_content_types: FrozenSet[str],
) -> AsyncIterator[UploadedDocument]:
    """Parse the multipart body and yield the validated ``document`` part.

    The parsed form (and the spooled file behind it) is closed on exit.
    """
    check_declared_length(request, max_bytes)
    limited = Request(request.scope, receive=limit_body_size(request.receive, max_bytes))

    try:
        form = await limited.form()
    except (MultiPartException, HTTPException, ValueError) as exc:
        logger.log_error("multipart_parse_failed", {"error": str(exc)})
        raise MissingDocumentError() from exc

    try:
        upload = form.get(DOCUMENT_FIELD)
        if not isinstance(upload, UploadFile):
            logger.log_error("document_field_missing", {"fields": list(form.keys())})
            raise MissingDocumentError()

        validate_content_type(upload, allowed_content_types)

        yield UploadedDocument(
            filename=upload.filename or "unknown",
            content_type=upload.content_type,
            size_bytes=upload.size,
            upload=upload,
        )
    finally:
        await form.close()
