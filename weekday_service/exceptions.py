class WeekdayServiceError(Exception):
    """Base class for errors raised by the weekday service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class DateParseError(WeekdayServiceError):
    """Raised when a date string does not match the expected format or is not a real date."""

    def __init__(self, value, fmt: str, detail: str = ""):
        message = f"Cannot parse date {value!r} with format {fmt!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.value = value
        self.fmt = fmt
        self.detail = detail


class InvalidWeekdayError(WeekdayServiceError):
    """Raised when a weekday name is not recognised."""

    def __init__(self, value):
        super().__init__(f"Unknown weekday: {value!r}")
        self.value = value


class OrdinalError(WeekdayServiceError):
    """Raised when a value cannot be represented as a natural ordinal number."""

    def __init__(self, value):
        super().__init__(
            f"Ordinal value must be an integer greater than zero, got {value!r}"
        )
        self.value = value


class ObfuscationError(WeekdayServiceError):
    """Raised when the input is neither an email address nor a phone number."""

    def __init__(self, value: str):
        super().__init__("Unknown input: expected an email address or a phone number")
        self.value = value
