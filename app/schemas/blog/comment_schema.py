from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import datetime

from app.schemas.common.response_schema import BaseResponse, PageMeta

# -----------------------------
# Request
# -----------------------------
class CommentRequest(BaseModel):
    content: str
    author: str

    model_config = ConfigDict(from_attributes=True)

# -----------------------------
# Data (proyección)
# -----------------------------
class CommentData(BaseModel):
    id: int
    content: str
    author: str
    post_id: int
    approved: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class CommentCountData(BaseModel):
    post_id: int
    total: int
    approved: int
    pending: int

# -----------------------------
# Responses
# -----------------------------
class CommentResponse(BaseResponse):
    data: CommentData

class CommentCollectionResponse(BaseResponse):
    data: List[CommentData]

class CommentListResponse(BaseResponse, PageMeta):
    data: List[CommentData]

class CommentCountResponse(BaseResponse):
    data: CommentCountData
