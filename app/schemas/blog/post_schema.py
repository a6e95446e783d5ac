from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

from app.schemas.common.response_schema import BaseResponse, PageMeta

# -----------------------------
# Request
# -----------------------------
class PostRequest(BaseModel):
    title: str
    content: str
    author: str
    category_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

# -----------------------------
# Data (proyección)
# -----------------------------
class PostData(BaseModel):
    id: int
    title: str
    content: str
    author: str
    category_id: int
    category_name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

# -----------------------------
# Responses
# -----------------------------
class PostResponse(BaseResponse):
    data: PostData

class PostCollectionResponse(BaseResponse):
    data: List[PostData]

class PostListResponse(BaseResponse, PageMeta):
    data: List[PostData]
