import logging
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from pathlib import Path


class StructuredLogger:
    """Structured logger for the Word extraction agent"""

    def __init__(self, name: str = "word_extraction_agent"):
        self.agent = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)
        self._file_handlers_dir: Optional[Path] = None

        if not self.logger.handlers:
            self._configure_handlers()

    def _configure_handlers(self) -> None:
        """Configure the console handler."""
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(self._formatter())
        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    @staticmethod
    def _formatter() -> logging.Formatter:
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    def configure(self, level: str = "INFO", log_dir: Optional[Path] = None) -> None:
        """Apply the configured level and, when a directory is given, add file outputs."""
        self.logger.setLevel(level.upper())

        if log_dir is None or self._file_handlers_dir == Path(log_dir):
            return

        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        info_handler = logging.FileHandler(log_dir / "word_extraction_service.log", encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(self._formatter())

        error_handler = logging.FileHandler(log_dir / "word_extraction_service_error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(self._formatter())

        self.logger.addHandler(info_handler)
        self.logger.addHandler(error_handler)
        self._file_handlers_dir = log_dir

    def log_step(self, step: str, data: Dict[str, Any] = None):
        """Log a processing step"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "step": step,
            "agent": self.agent
        }
        if data:
            log_data.update(data)

        self.logger.info(f"STEP: {json.dumps(log_data, default=str)}")

    def log_error(self, error_type: str, data: Dict[str, Any] = None):
        """Log an error"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error": error_type,
            "agent": self.agent
        }
        if data:
            log_data.update(data)

        self.logger.error(f"ERROR: {json.dumps(log_data, default=str)}")

    def log_document_staged(self, filename: str, temp_path: str, size_bytes: int):
        """Log an upload written to its temp file"""
        self.log_step("document_staged", {
            "filename": filename,
            "temp_path": temp_path,
            "size_bytes": size_bytes
        })

    def log_extraction(self, filename: str, strategy: str, content_length: int):
        """Log extraction completion"""
        self.log_step("extraction_completed", {
            "filename": filename,
            "strategy": strategy,
            "content_length": content_length
        })


# Global logger instance
logger = StructuredLogger()
