import time

from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..config import Settings
from ..services.extraction_service import ExtractionService
from ..services.intake import received_upload
from ..utils.logging import logger


def build_extraction_router(settings: Settings, service: ExtractionService) -> APIRouter:
    """Create the router serving ``POST /extract`` for the given configuration."""
    router = APIRouter(tags=["Extraction"])
    max_bytes = settings.max_upload_size_bytes
    allowed_content_types = settings.allowed_content_types_set

    @router.post("/extract")
    async def extract_document(request: Request) -> Response:
        """Extract the text of the Word document uploaded as the ``document`` field."""
        start_time = time.time()

        logger.log_step("extraction_request_received", {
            "method": request.method,
            "url": str(request.url),
            "client": request.client.host if request.client else "unknown",
            "content_length": request.headers.get("content-length")
        })

        async with received_upload(request, max_bytes, allowed_content_types) as document:
            logger.log_step("document_received", {
                "filename": document.filename,
                "content_type": document.content_type,
                "size_bytes": document.size_bytes
            })
            content = await service.extract(document)

        body = service.encode(content)

        logger.log_step("extraction_request_completed", {
            "filename": document.filename,
            "process_time": time.time() - start_time
        })

        return Response(content=body, media_type="application/json")

    return router
