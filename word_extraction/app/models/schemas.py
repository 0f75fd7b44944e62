from typing import Optional

from pydantic import BaseModel, ConfigDict
from starlette.datastructures import UploadFile


class UploadedDocument(BaseModel):
    """The single file part received with an extraction request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filename: str
    content_type: Optional[str]
    size_bytes: Optional[int]
    upload: UploadFile


class ExtractionResponse(BaseModel):
    content: str
