# app/api/schemas.py
from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class BlobPayload(BaseModel):
    filename: str = Field("", description="File name as stored")
    byte_size: Optional[int] = Field(None, description="Stored size in bytes; missing is treated as 0")
    content_type: Optional[str] = Field(None, description="MIME type, informational only")


class ValidateRequest(BaseModel):
    task_id: Optional[str] = Field(None, description="Caller supplied id, used as request_id")
    attachments: Dict[str, Union[List[BlobPayload], BlobPayload, None]] = Field(
        default_factory=dict,
        description="attribute -> one file, a list of files, or null when nothing is attached",
    )
