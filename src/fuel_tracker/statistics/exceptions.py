from http import HTTPStatus

from src.fuel_tracker.state.exceptions import FuelTrackerException


class InvalidMonthException(FuelTrackerException):
    """Exception for invalid month format."""

    status_code = HTTPStatus.BAD_REQUEST
    message = "Invalid month format, expected YYYY-MM."

    def __init__(self, month: str):
        self.month = month
        message = f"{self.message} Provided month: {month}"
        super().__init__(status_code=self.status_code, message=message)


class InvalidDateException(FuelTrackerException):
    """Exception for invalid date format."""

    status_code = HTTPStatus.BAD_REQUEST
    message = "Invalid date format, expected YYYY-MM-DD."

    def __init__(self, date: str):
        self.date = date
        message = f"{self.message} Provided date: {date}"
        super().__init__(status_code=self.status_code, message=message)
