"""Heart rate time series requests for the Fitbit Web API.

This module validates query arguments and builds resource paths for the
heart rate endpoints, then hands each path to an HttpGetter. Validation
always happens before any request is made; responses are returned exactly
as the getter produced them.
"""

import dataclasses
import logging
from typing import Any
from typing import Optional

import hrquery.transport
from hrquery.errors import InvalidArgumentError
from hrquery.formatting import format_date
from hrquery.formatting import format_time


logger = logging.getLogger(__name__)

HR_PERIODS = ('1d', '7d', '30d', '1w', '1m')
HR_DETAIL_LEVELS = ('1sec', '1min', '5min', '15min')
DEFAULT_PERIOD = '1d'

# Stands in for the end date of single-day intraday requests.
SINGLE_DAY = '1d'


@dataclasses.dataclass(frozen=True)
class QueryOptions:
    """Optional fields of a heart rate query.

    Dates may be date objects or YYYY-MM-DD strings, times may be time
    objects or HH:MM strings.
    """

    start_date: Any = None
    end_date: Any = None
    period: Optional[str] = None
    detail_level: Optional[str] = None
    start_time: Any = None
    end_time: Any = None


class HeartRateRequests:
    """Builds and executes heart rate requests for a single user."""

    def __init__(self, getter: hrquery.transport.HttpGetter, user_id: str = '-'):
        """Initialize HeartRateRequests.

        Args:
            getter: Transport used to GET built resource paths.
            user_id: Encoded Fitbit user id, '-' for the authenticated user.
        """
        self.getter = getter
        self.user_id = user_id

    def series_for_date_range(self, start: Any, end: Any) -> Any:
        """Get the heart rate time series between two dates.

        Args:
            start: First date of the range.
            end: Last date of the range.

        Returns:
            Response body from the getter.

        Raises:
            InvalidArgumentError: If either date is missing or invalid.
        """
        start_date = format_date(start)
        end_date = format_date(end)
        if start_date is None:
            raise InvalidArgumentError('Please specify a valid start date.')
        if end_date is None:
            raise InvalidArgumentError('Please specify a valid end date.')

        return self._get(self._heart_path(start_date, end_date))

    def series_for_period(self, start: Any, period: Optional[str]) -> Any:
        """Get the heart rate time series for a period ending at a date.

        Args:
            start: Base date of the series.
            period: One of HR_PERIODS.

        Returns:
            Response body from the getter.

        Raises:
            InvalidArgumentError: If the date is missing or the period is not allowed.
        """
        start_date = format_date(start)
        if start_date is None:
            raise InvalidArgumentError('Please specify a valid start date.')
        _check_period(period)

        return self._get(self._heart_path(start_date, period))

    def time_series(self, options: QueryOptions) -> Any:
        """Get the heart rate time series for either a date range or a period.

        Exactly one of end_date and period may be given. When neither is,
        the period defaults to DEFAULT_PERIOD.

        Args:
            options: Query with start_date and at most one of end_date/period.

        Returns:
            Response body from the getter.

        Raises:
            InvalidArgumentError: If the combination of options is not valid.
        """
        if options.end_date is not None and options.period is not None:
            raise InvalidArgumentError('Both end_date and period specified. Specify only one.')

        start_date = format_date(options.start_date)
        if start_date is None:
            raise InvalidArgumentError('Please specify a valid start date.')

        if options.end_date is not None:
            return self._get(self._heart_path(start_date, format_date(options.end_date)))

        period = options.period if options.period is not None else DEFAULT_PERIOD
        _check_period(period)
        return self._get(self._heart_path(start_date, period))

    def intraday_time_series(self, options: QueryOptions) -> Any:
        """Get intraday heart rate data, optionally bounded to a time window.

        Args:
            options: Query with start_date and detail_level, plus an optional
                end_date and an optional start_time/end_time pair.

        Returns:
            Response body from the getter.

        Raises:
            InvalidArgumentError: If a required option is missing, the detail
                level is not allowed, or only one window bound is given.
        """
        start_date = format_date(options.start_date)
        if start_date is None:
            raise InvalidArgumentError('Please specify a valid start date.')

        detail_level = options.detail_level
        if detail_level not in HR_DETAIL_LEVELS:
            raise InvalidArgumentError(
                f'Invalid detail level: {detail_level}. '
                f'Valid detail levels are {HR_DETAIL_LEVELS}.'
            )

        start_time = format_time(options.start_time)
        end_time = format_time(options.end_time)
        if (start_time is None) != (end_time is None):
            raise InvalidArgumentError('Both start_time and end_time must be specified.')

        end_date = format_date(options.end_date) or SINGLE_DAY
        parts = [start_date, end_date, detail_level]
        if start_time is not None:
            parts += ['time', start_time, end_time]

        return self._get(self._heart_path(*parts))

    def _heart_path(self, *parts: str) -> str:
        """Join path segments into a heart rate resource path.

        Args:
            parts: Segments following 'activities/heart/date'.

        Returns:
            Resource path ending in '.json'.
        """
        return '/'.join(['user', self.user_id, 'activities/heart/date', *parts]) + '.json'

    def _get(self, path: str) -> Any:
        """Log and GET a built resource path.

        Args:
            path: Resource path to request.

        Returns:
            Response body from the getter, unmodified.
        """
        logger.debug('Requesting heart rate resource %s', path)
        return self.getter.get(path)


def _check_period(period: Optional[str]) -> None:
    """Ensure period is one of HR_PERIODS.

    Args:
        period: Period token to check.

    Raises:
        InvalidArgumentError: If period is not allowed.
    """
    if period not in HR_PERIODS:
        raise InvalidArgumentError(f'Invalid period: {period}. Valid periods are {HR_PERIODS}.')
