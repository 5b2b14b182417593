"""Errors raised while validating heart rate query arguments."""


class InvalidArgumentError(ValueError):
    """A query argument is missing or not accepted by the API."""


class InvalidDateArgument(InvalidArgumentError):
    """A value could not be converted to a YYYY-MM-DD date."""


class InvalidTimeArgument(InvalidArgumentError):
    """A value could not be converted to an HH:MM time of day."""
