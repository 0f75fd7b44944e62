"""Run script for the Word extraction service"""

import uvicorn

from word_extraction.app.config import settings


def main() -> None:
    uvicorn.run(
        "word_extraction.app.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
