"""Tests for email and phone number obfuscation."""

import pytest

from weekday_service.exceptions import ObfuscationError
from weekday_service.obfuscation import Email, Obfuscated, PhoneNumber, obfuscate


class TestEmail:
    """Tests for email parsing and masking."""

    def test_short_local_parts_stay_visible(self):
        assert Email.parse("a@domain.com").obfuscated() == "a@domain.com"
        assert Email.parse("ab@domain.com").obfuscated() == "ab@domain.com"

    def test_longer_local_parts_are_masked(self):
        assert Email.parse("abc@domain.com").obfuscated() == "a*****c@domain.com"
        assert Email.parse("abcdefghijk@domain.com").obfuscated() == "a*****k@domain.com"

    def test_parse_requires_single_at(self):
        for text in ("no-at-sign", "a@b@c.com"):
            with pytest.raises(ValueError):
                Email.parse(text)


class TestPhoneNumber:
    """Tests for phone number parsing and masking."""

    def test_last_four_digits_visible(self):
        assert PhoneNumber.parse("+44 123 456 789").obfuscated() == "+**-***-**6-789"
        assert PhoneNumber.parse("+7 999 123 45 67").obfuscated() == "+*-***-***-45-67"

    def test_without_plus_prefix(self):
        assert PhoneNumber.parse("123 456 789").obfuscated() == "***-**6-789"

    def test_parse_groups(self):
        phone = PhoneNumber.parse("+44 123 456 789")
        assert phone.has_plus_prefix
        assert phone.parts == (44, 123, 456, 789)

    def test_group_with_explicit_plus_sign(self):
        """A "+" in front of an inner group is accepted like an unsigned number."""
        phone = PhoneNumber.parse("44 +123")
        assert not phone.has_plus_prefix
        assert phone.parts == (44, 123)
        assert phone.obfuscated() == "*4-123"

    def test_invalid_groups(self):
        for text in ("+44 12a 456", "+44  123", "", "phone", "44 +", "44 ++123"):
            with pytest.raises(ValueError):
                PhoneNumber.parse(text)


class TestObfuscate:
    """Tests for the obfuscate entry point."""

    def test_phone(self):
        assert obfuscate("+44 123 456 789") == "+**-***-**6-789"

    def test_email(self):
        assert obfuscate("local-part@domain-name.com") == "l*****t@domain-name.com"

    def test_unknown_input(self):
        with pytest.raises(ObfuscationError):
            obfuscate("hello world")

    def test_wrapper_hides_value(self):
        wrapped = Obfuscated(Email.parse("secret@example.com"))
        assert str(wrapped) == "s*****t@example.com"
        assert "secret" not in repr(wrapped)
