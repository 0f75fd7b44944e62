from starlette.concurrency import run_in_threadpool

from ..config import Settings
from ..models.schemas import ExtractionResponse, UploadedDocument
from ..utils.errors import ResponseEncodingError
from ..utils.logging import logger
from .extractors import ContentExtractor
from .staging import staged_upload


class ExtractionService:
    """Stages an uploaded Word document and runs the configured extractor on it."""

    def __init__(self, settings: Settings, extractor: ContentExtractor) -> None:
        self.extractor = extractor
        self.temp_dir = settings.TEMP_DIR
        self.chunk_size = settings.UPLOAD_CHUNK_SIZE
        logger.log_step("extraction_service_initialized", {
            "strategy": extractor.name,
            "temp_dir": str(self.temp_dir) if self.temp_dir else None,
            "chunk_size": self.chunk_size
        })

    async def extract(self, document: UploadedDocument) -> str:
        async with staged_upload(document, self.temp_dir, self.chunk_size) as temp_path:
            content = await run_in_threadpool(self.extractor.extract, temp_path)

        logger.log_extraction(document.filename, self.extractor.name, len(content))
        return content

    @staticmethod
    def encode(content: str) -> str:
        try:
            return ExtractionResponse(content=content).model_dump_json()
        except (ValueError, TypeError) as exc:
            logger.log_error("response_encoding_failed", {"error": str(exc)})
            raise ResponseEncodingError() from exc
