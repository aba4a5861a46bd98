import re
from datetime import date, datetime
from typing import Tuple

from fastapi import HTTPException, status

from diary_api.exceptions import InvalidDateRangeError, ValidationError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str, message: str = "Invalid date format. Please use YYYY-MM-DD.") -> date:
    """
    Parse a strict YYYY-MM-DD string.

    Raises:
        ValidationError: If the string is not a real calendar date in that format.
    """
    if not DATE_PATTERN.match(value):
        raise ValidationError(message)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(message)


def parse_date_range(start_value: str, end_value: str) -> Tuple[date, date]:
    """
    Parse an inclusive date range from two path segments.

    Raises:
        ValidationError: If either date is malformed or end precedes start.
    """
    start_date = parse_date(start_value, "Invalid start date. Please use YYYY-MM-DD.")
    end_date = parse_date(end_value, "Invalid end date. Please use YYYY-MM-DD.")
    if end_date < start_date:
        raise InvalidDateRangeError()
    return start_date, end_date


def bad_request(error: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
