from http import HTTPStatus

from src.fuel_tracker.state.exceptions import FuelTrackerException


class RecordNotFoundException(FuelTrackerException):
    """Exception for when no fuel record has the given ID."""

    status_code = HTTPStatus.NOT_FOUND
    message = "Fuel record not found."

    def __init__(self, record_id: str):
        self.record_id = record_id
        message = f"{self.message} Record ID: {record_id}"
        super().__init__(status_code=self.status_code, message=message)
