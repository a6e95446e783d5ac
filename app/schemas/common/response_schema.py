from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    success: bool
    message: str


class PageMeta(BaseModel):
    total: int
    page: int
    size: int
    total_pages: int
    has_more: bool


class ErrorResponse(BaseModel):
    success: bool = False
    status: int
    message: str
    error: Optional[str] = None
    errors: Optional[Dict[str, str]] = None
    timestamp: datetime = Field(default_factory=datetime.now)
