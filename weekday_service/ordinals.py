from functools import total_ordering

from weekday_service.exceptions import OrdinalError


def _suffix(digits: str) -> str:
    if digits.endswith("1") and not digits.endswith("11"):
        return "st"
    if digits.endswith("2") and not digits.endswith("12"):
        return "nd"
    if digits.endswith("3") and not digits.endswith("13"):
        return "rd"
    return "th"


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Ordinal:
    """Formats any integer as an ordinal number.

    Zero and negative values are not rejected: 0 becomes "0th" and negative
    numbers take the suffix of their absolute value ("-1st", "-2nd").
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if not _is_integer(value):
            raise TypeError(f"Ordinal expects an integer, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __str__(self):
        digits = str(self._value)
        return f"{digits}{_suffix(digits)}"

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


@total_ordering
class NaturalOrdinal(Ordinal):
    """An ordinal whose value is guaranteed to be an integer >= 1.

    Build instances with NaturalOrdinal.from_int(). Every construction path
    checks the value, and everything downstream relies on it.
    """

    __slots__ = ()

    def __init__(self, value: int):
        if not _is_integer(value) or value <= 0:
            raise OrdinalError(value)
        super().__init__(value)

    @classmethod
    def from_int(cls, value: int) -> "NaturalOrdinal":
        """Validate and wrap a value.

        Raises:
            OrdinalError: If the value is not an integer or is not greater than zero.
        """
        return cls(value)

    def __eq__(self, other):
        if not isinstance(other, NaturalOrdinal):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, NaturalOrdinal):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)


def ordinal(value: int) -> str:
    """
    Returns the ordinal representation of an integer, e.g. ordinal(1) == "1st".

    Zero and negative numbers are formatted as well ("0th", "-1st").
    """
    return str(Ordinal(value))


def natural_ordinal(value: int) -> str:
    """
    Returns the ordinal representation of a positive integer.

    Raises:
        OrdinalError: If the value is not an integer greater than zero.
    """
    return str(NaturalOrdinal.from_int(value))
