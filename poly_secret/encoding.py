"""
Base-N digit strings — Arbitrary-precision decoding and encoding.

Share values arrive as digit strings in any base from 2 to 36,
using 0-9 followed by a-z (case-insensitive). Values can be far
larger than a machine word, so everything is plain Python int.
"""

import re
import string

from .errors import InvalidBase, InvalidDigitCharacter, DigitOutOfRange


MIN_BASE = 2
MAX_BASE = 36

# Digit alphabet: index == digit value
ALPHABET = string.digits + string.ascii_lowercase

# Optional sign, ASCII digits only
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def _digit_value(c: str) -> int:
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 10
    raise InvalidDigitCharacter(f"Invalid character {c!r} in value")


def parse_base(text) -> int:
    """
    Parse the base field of a share entry.

    Documents carry the base as a string ("16"), but a bare int is accepted.
    Raises InvalidBase if the text is not an integer in range.
    """
    if isinstance(text, bool):
        raise InvalidBase(f"Base must be an integer, got {text!r}")
    if isinstance(text, int):
        base = text
    else:
        text = str(text).strip()
        if not INTEGER_RE.fullmatch(text):
            raise InvalidBase(f"Base must be an integer, got {text!r}")
        base = int(text)
    _check_base(base)
    return base


def decode(digits: str, base: int) -> int:
    """
    Decode a digit string in the given base to an exact integer.

    Args:
        digits: Digit string, most significant digit first. Case-insensitive.
            Surrounding whitespace is ignored. Empty string decodes to 0.
        base: Numeric base, 2..36

    Returns:
        The decoded non-negative integer

    Raises:
        InvalidBase: base outside 2..36
        InvalidDigitCharacter: character outside 0-9a-z
        DigitOutOfRange: digit value >= base
    """
    _check_base(base)

    result = 0
    for c in digits.strip().lower():
        digit = _digit_value(c)
        if digit >= base:
            raise DigitOutOfRange(
                f"Digit {digit} (from {c!r}) is invalid for base {base}"
            )
        result = result * base + digit
    return result


def encode(value: int, base: int) -> str:
    """Encode an integer as a lowercase digit string in the given base."""
    _check_base(base)

    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    value = abs(value)

    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(ALPHABET[digit])
    return sign + ''.join(reversed(out))
