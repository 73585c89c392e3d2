from http import HTTPStatus

from fastapi import HTTPException


class FuelTrackerException(HTTPException):
    """Base exception class for fuel tracker errors."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "An error occurred in the fuel tracker."

    def __init__(
        self,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        message: str = "An error occurred in the fuel tracker.",
    ):
        self.status_code = status_code
        self.message = message or self.message
        super().__init__(status_code=status_code, detail=self.message)


class StorageException(FuelTrackerException):
    """Exception for snapshot load/save failures."""

    status_code = HTTPStatus.SERVICE_UNAVAILABLE
    message = "Failed to access fuel tracker storage."

    def __init__(self, operation: str, key: str, details: str = ""):
        self.operation = operation
        self.key = key
        self.details = details
        message = f"{self.message} Operation: {operation}, Key: {key}"
        if details != "":
            message += f" Details: {details}"
        super().__init__(status_code=self.status_code, message=message)


class StateNotLoadedException(FuelTrackerException):
    """Exception for requests served before the snapshot was loaded."""

    status_code = HTTPStatus.SERVICE_UNAVAILABLE
    message = "Fuel tracker state is not loaded yet."

    def __init__(self):
        super().__init__(status_code=self.status_code, message=self.message)
