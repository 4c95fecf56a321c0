# product_api/models.py
from pydantic import BaseModel
from typing import Optional, List, Union

class Product(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: str
    inStock: bool = True

class PagedResult(BaseModel):
    page: int
    limit: int
    totalItems: int
    data: List[Product]

class ErrorInfo(BaseModel):
    message: str
    type: str

class ErrorResponse(BaseModel):
    error: ErrorInfo

class ResetResult(BaseModel):
    status: str
    totalItems: int
