from typing import Generic, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar("T")

class BaseResponseModel(BaseModel, Generic[T]):
    success: bool = True
    code: int
    message: str
    data: Optional[T] = None
    error: Optional[str] = None
    meta: Optional[dict] = None
