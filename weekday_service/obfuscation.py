"""Obfuscation of personal data (email addresses and phone numbers).

Values are parsed into small wrapper types first; the obfuscated text is
produced by wrapping a parsed value in Obfuscated and formatting it.
"""

from dataclasses import dataclass
from typing import Tuple

from weekday_service.exceptions import ObfuscationError

EMAIL_MASK = "*****"
PHONE_VISIBLE_DIGITS = 4


@dataclass(frozen=True)
class Email:
    """A simplified email address: a local part and a domain.

    No RFC validation is attempted, the text only has to contain exactly one "@".
    """

    local: str
    domain: str

    @classmethod
    def parse(cls, text: str) -> "Email":
        parts = text.split("@")
        if len(parts) != 2:
            raise ValueError("not an email")
        return cls(local=parts[0], domain=parts[1])

    def obfuscated(self) -> str:
        local = self.local
        masked = local[:1]
        if len(local) > 2:
            masked += EMAIL_MASK
        if len(local) > 1:
            masked += local[-1]
        return f"{masked}@{self.domain}"


@dataclass(frozen=True)
class PhoneNumber:
    """A phone number made of space separated groups of digits, optionally prefixed with "+"."""

    has_plus_prefix: bool
    parts: Tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> "PhoneNumber":
        parts = []
        for part in text.lstrip("+").split(" "):
            # a group may carry its own explicit "+" sign, e.g. "44 +123"
            digits = part[1:] if part.startswith("+") else part
            if not (digits.isascii() and digits.isdigit()):
                raise ValueError(f"invalid phone number group: {part!r}")
            parts.append(int(digits))
        return cls(has_plus_prefix=text.startswith("+"), parts=tuple(parts))

    def obfuscated(self) -> str:
        joined = "-".join(str(part) for part in self.parts)

        # walk from the right so the last digits stay visible
        visible = 0
        output = []
        for ch in reversed(joined):
            if ch.isdigit():
                if visible < PHONE_VISIBLE_DIGITS:
                    output.append(ch)
                    visible += 1
                else:
                    output.append("*")
            else:
                output.append("-")

        prefix = "+" if self.has_plus_prefix else ""
        return prefix + "".join(reversed(output))


class Obfuscated:
    """Wraps a parsed value; the original value is only exposed in obfuscated form."""

    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = value

    def __str__(self):
        return self._value.obfuscated()

    def __repr__(self):
        return f"Obfuscated({self})"


def obfuscate(text: str) -> str:
    """
    Obfuscate an email address or a phone number.

    Examples:
        obfuscate("local-part@domain-name.com") -> "l*****t@domain-name.com"
        obfuscate("+44 123 456 789") -> "+**-***-**6-789"

    Raises:
        ObfuscationError: If the text is neither an email nor a phone number.
    """
    for kind in (Email, PhoneNumber):
        try:
            parsed = kind.parse(text)
        except ValueError:
            continue
        return str(Obfuscated(parsed))
    raise ObfuscationError(text)
