from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: {success, message?, data?}"""

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Failure envelope: {success: false, message, code, errors?}"""

    success: bool = False
    message: str
    code: str
    errors: Optional[List[str]] = None


def ok(data=None, message: Optional[str] = None) -> ApiResponse:
    return ApiResponse(data=data, message=message)
