"""Wire formatting for dates and times used in Fitbit resource paths.

The API expects calendar dates as YYYY-MM-DD and intraday times of day as
HH:MM. Both helpers return None for a missing value so callers can decide
whether the value was required.
"""

import datetime
import re
from typing import Any
from typing import Optional

from hrquery.errors import InvalidDateArgument
from hrquery.errors import InvalidTimeArgument


_DATE_PATTERN = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')
_TIME_PATTERN = re.compile(r'([0-9]{2}):([0-9]{2})')


def format_date(value: Any) -> Optional[str]:
    """Convert a date-like value to the YYYY-MM-DD wire format.

    Args:
        value: A date, a datetime, a string starting with YYYY-MM-DD,
            'today' or 'yesterday'.

    Returns:
        The formatted date, or None if value is None.

    Raises:
        InvalidDateArgument: If value cannot be read as a date.
    """
    if value is None:
        return None

    if isinstance(value, datetime.datetime):
        return value.date().isoformat()

    if isinstance(value, datetime.date):
        return value.isoformat()

    if not isinstance(value, str):
        raise InvalidDateArgument(
            'Date used must be a date/time object or a string in the format '
            f'YYYY-MM-DD; supplied argument is a {type(value).__name__}'
        )

    if value in ('today', 'yesterday'):
        return _date_from_semantic(value).isoformat()

    match = _DATE_PATTERN.match(value)
    if not match:
        raise InvalidDateArgument(f'Invalid date: {value}. Expected format is YYYY-MM-DD.')

    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day).isoformat()
    except ValueError as e:
        raise InvalidDateArgument(f'Invalid date: {value}. {e}') from e


def format_time(value: Any) -> Optional[str]:
    """Convert a time-like value to the HH:MM wire format.

    Args:
        value: A time, a datetime or an HH:MM string.

    Returns:
        The formatted time, or None if value is None.

    Raises:
        InvalidTimeArgument: If value cannot be read as a time of day.
    """
    if value is None:
        return None

    if isinstance(value, (datetime.time, datetime.datetime)):
        return f'{value.hour:02d}:{value.minute:02d}'

    if isinstance(value, str):
        match = _TIME_PATTERN.fullmatch(value)
        if match:
            hour, minute = int(match.group(1)), int(match.group(2))
            if hour < 24 and minute < 60:
                return f'{hour:02d}:{minute:02d}'

    raise InvalidTimeArgument(f'Invalid time: {value}. Expected format is HH:MM.')


def _date_from_semantic(value: str) -> datetime.date:
    """Resolve 'today' or 'yesterday' against the local date.

    Args:
        value: Either 'today' or 'yesterday'.

    Returns:
        The matching calendar date.
    """
    today = datetime.date.today()
    if value == 'yesterday':
        return today - datetime.timedelta(days=1)
    return today
