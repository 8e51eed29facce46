import logging
from typing import Dict, Union

from weekday_service.dates import DATE_FORMAT, DateRange, Weekday, parse_range

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


def count_weekday(date_range: DateRange, target: Weekday) -> int:
    """
    Count how many times a weekday occurs in an inclusive date range.

    The count is computed without walking the days: find the offset from the
    start date to the first occurrence of the target weekday, then count how
    many whole weeks fit between that occurrence and the end date.

    Args:
        date_range (DateRange): The range to inspect. Boundaries are compared by
            day-of-year, so the range must lie within a single calendar year.
        target (Weekday): The weekday to count.

    Returns:
        int: The number of occurrences, 0 for an empty or reversed range.
    """
    if date_range.is_empty:
        return 0

    num_days = date_range.num_days

    raw_diff = int(target) - int(Weekday.of(date_range.start))
    start_offset = raw_diff if raw_diff >= 0 else raw_diff + DAYS_IN_WEEK

    # first occurrence falls after the end date
    if start_offset > num_days:
        return 0

    # +1 for the first occurrence itself
    return (num_days - start_offset) // DAYS_IN_WEEK + 1


def weekday_breakdown(date_range: DateRange) -> Dict[Weekday, int]:
    """Occurrence count for every weekday in the range, Monday first."""
    return {weekday: count_weekday(date_range, weekday) for weekday in Weekday}


def count_target_weekday_in_range(
    text_start: str,
    text_end: str,
    target: Union[Weekday, str],
    fmt: str = DATE_FORMAT,
) -> int:
    """
    Parse two date strings and count the occurrences of a weekday between them.

    Args:
        text_start (str): Range start, e.g. "01-05-2021".
        text_end (str): Range end (inclusive).
        target (Weekday | str): The weekday to count, or its name ("Sun", "sunday").
        fmt (str): Format of both date strings. Defaults to DD-MM-YYYY.

    Returns:
        int: The non-negative number of occurrences.

    Raises:
        DateParseError: If either boundary cannot be parsed.
        InvalidWeekdayError: If target is a name that matches no weekday.
    """
    date_range = parse_range(text_start, text_end, fmt)
    weekday = Weekday.parse(target)
    count = count_weekday(date_range, weekday)
    logger.debug(
        "Counted %d x %s between %s and %s", count, weekday.short_name, text_start, text_end
    )
    return count


def count_sundays(text_start: str, text_end: str) -> int:
    return count_target_weekday_in_range(text_start, text_end, Weekday.SUNDAY)
