from http import HTTPStatus
from typing import Optional

from fastapi import HTTPException


class AuthException(HTTPException):
    """Base exception class for API key authentication errors."""

    status_code = HTTPStatus.UNAUTHORIZED
    message = "Authentication failed."

    def __init__(self, status_code: HTTPStatus, message: str, header_name: str):
        self.status_code = status_code
        self.message = message
        self.header_name = header_name
        super().__init__(
            status_code,
            message,
            headers={"WWW-Authenticate": f'APIKey header="{header_name}"'},
        )


class MissingAPIKeyError(AuthException):
    """Raised when the API key header is absent or empty."""

    status_code = HTTPStatus.UNAUTHORIZED
    message = "Missing API key."

    def __init__(self, header_name: str):
        message = f"{self.message} Expected header: {header_name}"
        super().__init__(self.status_code, message, header_name)


class InvalidAPIKeyError(AuthException):
    """Raised when the API key does not match. Only a prefix is echoed back."""

    status_code = HTTPStatus.FORBIDDEN
    message = "Invalid API key provided."

    def __init__(self, header_name: str, api_key: Optional[str] = None):
        message = self.message
        if api_key:
            message += f" Key: {api_key[:4]}***"
        super().__init__(self.status_code, message, header_name)
