from typing import List, Optional

from fastapi import status
from libs.result import Error


class ApiError(Exception):
    """Base for errors rendered into the {success: false, ...} envelope"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error, errors: Optional[List[str]] = None):
        self.base_error = base_error
        self.errors = errors
        super().__init__(base_error.message)

    @property
    def code(self) -> str:
        return self.base_error.code

    @property
    def message(self) -> str:
        return self.base_error.message


class ClientError(ApiError):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        errors: Optional[List[str]] = None,
    ):
        super().__init__(base_error, errors)
        self.status_code = status_code


class ServerError(ApiError):
    pass
