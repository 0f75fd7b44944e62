import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from starlette.concurrency import run_in_threadpool

from ..models.schemas import UploadedDocument
from ..utils.errors import ResourceError
from ..utils.logging import logger

TEMP_PREFIX = "word-"
TEMP_SUFFIX = ".docx"


@asynccontextmanager
async def staged_upload(
    document: UploadedDocument,
    temp_dir: Optional[Path] = None,
    chunk_size: int = 64 * 1024,
) -> AsyncIterator[Path]:
    """Copy the upload into a uniquely named temp file and remove it on exit."""
    try:
        handle = tempfile.NamedTemporaryFile(
            prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=temp_dir, delete=False
        )
    except OSError as exc:
        logger.log_error("temp_file_create_failed", {"error": str(exc)})
        raise ResourceError() from exc

    temp_path = Path(handle.name)
    try:
        written = 0
        with handle:
            while True:
                try:
                    chunk = await document.upload.read(chunk_size)
                except OSError as exc:
                    logger.log_error("upload_read_failed", {"filename": document.filename, "error": str(exc)})
                    raise ResourceError("Error reading file") from exc
                if not chunk:
                    break
                try:
                    await run_in_threadpool(handle.write, chunk)
                except OSError as exc:
                    logger.log_error("temp_file_write_failed", {"temp_path": str(temp_path), "error": str(exc)})
                    raise ResourceError() from exc
                written += len(chunk)

        if document.size_bytes is not None and written != document.size_bytes:
            logger.log_error("upload_size_mismatch", {
                "filename": document.filename,
                "declared_bytes": document.size_bytes,
                "written_bytes": written
            })

        logger.log_document_staged(document.filename, str(temp_path), written)
        yield temp_path
    finally:
        temp_path.unlink(missing_ok=True)
        logger.log_step("temp_file_removed", {"temp_path": str(temp_path)})
