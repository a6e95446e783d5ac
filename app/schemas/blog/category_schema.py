from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime

from app.schemas.common.response_schema import BaseResponse, PageMeta

# -----------------------------
# Request
# -----------------------------
class CategoryRequest(BaseModel):
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

# -----------------------------
# Data (proyección)
# -----------------------------
class CategoryData(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

# -----------------------------
# Responses
# -----------------------------
class CategoryResponse(BaseResponse):
    data: CategoryData

class CategoryListResponse(BaseResponse, PageMeta):
    data: List[CategoryData]
