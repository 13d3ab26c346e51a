"""Custom exceptions for the duty roster."""


class InvalidArgumentError(ValueError):
    """Raised when an argument is outside its valid range (e.g. month not in 0-11)."""

    pass


class DuplicateHolidayError(ValueError):
    """Raised when a holiday is added on a date that already has one."""

    pass
