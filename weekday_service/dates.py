from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum

from weekday_service.exceptions import DateParseError, InvalidWeekdayError

# DD-MM-YYYY, e.g. "01-05-2021" is 1 May 2021
DATE_FORMAT = "%d-%m-%Y"


class Weekday(IntEnum):
    """Days of the week indexed from Monday = 0 to Sunday = 6 (ISO order)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def short_name(self) -> str:
        return self.name[:3].title()

    @classmethod
    def of(cls, d: date) -> "Weekday":
        return cls(d.weekday())

    @classmethod
    def parse(cls, value) -> "Weekday":
        """Resolve a weekday from its full name or three-letter abbreviation.

        Matching is case-insensitive and ignores surrounding whitespace, so
        "Sun", "sunday" and " SUNDAY " all resolve to Weekday.SUNDAY.

        Raises:
            InvalidWeekdayError: If the value names no weekday.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidWeekdayError(value)

        key = value.strip().upper()
        for weekday in cls:
            if key in (weekday.name, weekday.name[:3]):
                return weekday
        raise InvalidWeekdayError(value)


def day_of_year(d: date) -> int:
    return d.timetuple().tm_yday


@dataclass(frozen=True)
class DateRange:
    """An inclusive pair of dates.

    The range is not required to be ordered. Lengths are measured with the
    day-of-year of each boundary, so a range whose end has a smaller
    day-of-year than its start is empty. This includes ranges that cross a
    year boundary.
    """

    start: date
    end: date

    @property
    def start_day_of_year(self) -> int:
        return day_of_year(self.start)

    @property
    def end_day_of_year(self) -> int:
        return day_of_year(self.end)

    @property
    def num_days(self) -> int:
        """Day steps between the boundaries, i.e. the range length minus one."""
        return self.end_day_of_year - self.start_day_of_year

    @property
    def is_empty(self) -> bool:
        return self.end_day_of_year < self.start_day_of_year


def parse_date(text: str, fmt: str = DATE_FORMAT) -> date:
    """Parse a single date string.

    Args:
        text: The date string, e.g. "01-05-2021".
        fmt: A strptime format. Defaults to DATE_FORMAT (DD-MM-YYYY).

    Returns:
        date: The parsed calendar date.

    Raises:
        DateParseError: If the text does not match the format or is not a valid date.
    """
    if not isinstance(text, str):
        raise DateParseError(text, fmt, "expected a string")
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError as e:
        raise DateParseError(text, fmt, str(e)) from e


def parse_range(text_start: str, text_end: str, fmt: str = DATE_FORMAT) -> DateRange:
    """Parse two boundary strings into a DateRange.

    Each boundary is parsed independently; the first one that fails raises.

    Raises:
        DateParseError: If either boundary is malformed or not a valid date.
    """
    return DateRange(start=parse_date(text_start, fmt), end=parse_date(text_end, fmt))
