"""Request construction and validation for Fitbit heart rate endpoints."""

from hrquery.errors import InvalidArgumentError
from hrquery.errors import InvalidDateArgument
from hrquery.errors import InvalidTimeArgument
from hrquery.heartrate import HR_DETAIL_LEVELS
from hrquery.heartrate import HR_PERIODS
from hrquery.heartrate import HeartRateRequests
from hrquery.heartrate import QueryOptions

__all__ = [
    'HR_DETAIL_LEVELS',
    'HR_PERIODS',
    'HeartRateRequests',
    'InvalidArgumentError',
    'InvalidDateArgument',
    'InvalidTimeArgument',
    'QueryOptions',
]
