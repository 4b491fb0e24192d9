"""Input checks applied before any pattern matching."""

import re

from boomer_buddy.errors import InputTooLargeError, InvalidInputError

_NON_DIGITS = re.compile(r"\D")


def validate_text(text: object, max_chars: int) -> str:
    """Return ``text`` as a str, or raise if it cannot be assessed.

    Accepts str, or bytes that decode as UTF-8. The empty string is valid.

    Raises:
        InvalidInputError: If text is None, not text, not UTF-8, or binary
        InputTooLargeError: If text is longer than max_chars

    """
    if text is None:
        raise InvalidInputError("Input text is required")

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError("Input bytes are not valid UTF-8") from e

    if not isinstance(text, str):
        raise InvalidInputError(
            f"Input must be str or UTF-8 bytes, got {type(text).__name__}"
        )

    if "\x00" in text:
        raise InvalidInputError("Input contains NUL characters (binary content)")

    if len(text) > max_chars:
        raise InputTooLargeError(len(text), max_chars)

    return text


def validate_caller_number(caller_number: object) -> str | None:
    """Return the caller number stripped of surrounding whitespace.

    Raises:
        InvalidInputError: If caller_number is neither None nor a str

    """
    if caller_number is None:
        return None
    if not isinstance(caller_number, str):
        raise InvalidInputError(
            f"Caller number must be str, got {type(caller_number).__name__}"
        )
    return caller_number.strip() or None


def national_number(caller_number: str) -> str:
    """Reduce a North American number to its digits without the country code.

    "+1 (800) 555-0199" and "800.555.0199" both become "8005550199".
    """
    digits = _NON_DIGITS.sub("", caller_number)
    if len(digits) == 11 and digits.startswith("1"):
        return digits[1:]
    return digits
