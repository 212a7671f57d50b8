"""NRIC/FIN identifier value, constructors, and check-digit algorithm.

An identifier is ``<prefix><7 digits><check digit>``, e.g. ``S1234567D``.

The check digit follows Ngiam Shih Tung's published scheme:

    d = (offset + sum(digit_i * weight_i)) mod 11

where weights are ``2 7 6 5 4 3 2``, the offset is 0 for S/F and 4 for
T/G, and ``d`` indexes the UIN (S/T) or FIN (F/G) lookup alphabet.

INVARIANT: constructors never recompute a supplied or parsed check digit.
Use :func:`is_valid` to test correctness.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from nricctl.domain.errors import InvalidCharacterError, LengthError, PrefixError
from nricctl.domain.types import ChecksumFamily, Prefix

DIGIT_COUNT = 7
IDENTIFIER_LENGTH = 9

WEIGHTS: tuple[int, ...] = (2, 7, 6, 5, 4, 3, 2)

CHECK_DIGIT_TABLES: dict[ChecksumFamily, str] = {
    ChecksumFamily.UIN: "JZIHGFEDCBA",
    ChecksumFamily.FIN: "XWUTRQPNMLK",
}

IDENTIFIER_PATTERN = re.compile(r"^[STFG][0-9]{7}[ABCDEFGHIKJLMNPQRTUWXZ]$")


@dataclass(frozen=True)
class Identifier:
    """An NRIC or FIN number.

    Build instances with :func:`construct` or :func:`parse`.
    """

    prefix: Prefix
    digits: tuple[int, ...]
    check_digit: str

    @property
    def family(self) -> ChecksumFamily:
        return self.prefix.family

    def expected_check_digit(self) -> str:
        """Check digit computed from this identifier's prefix and digits."""
        return compute_check_digit(self.prefix, self.digits)

    def is_valid(self) -> bool:
        return is_valid(self)

    def __str__(self) -> str:
        return format_identifier(self)


def _to_prefix(prefix: Prefix | str) -> Prefix:
    """Map a prefix letter onto :class:`Prefix`, raising PrefixError if unknown."""
    try:
        return Prefix(prefix)
    except ValueError as exc:
        msg = f"Unknown prefix {prefix!r}; expected one of S, T, F, G"
        raise PrefixError(msg) from exc


def compute_check_digit(prefix: Prefix | str, digits: Sequence[int]) -> str:
    """Compute the check digit for *prefix* and seven body *digits*.

    Raises:
        LengthError: *digits* does not hold exactly 7 values.
    """
    if len(digits) != DIGIT_COUNT:
        msg = f"Expected {DIGIT_COUNT} digits, got {len(digits)}"
        raise LengthError(msg)

    p = _to_prefix(prefix)
    d = (p.offset + sum(digit * weight for digit, weight in zip(digits, WEIGHTS))) % 11
    return CHECK_DIGIT_TABLES[p.family][d]


def construct(
    prefix: Prefix | str,
    digits: Sequence[int],
    check_digit: str | None = None,
) -> Identifier:
    """Build an identifier from its components.

    When *check_digit* is None it is computed. An explicit *check_digit*
    is stored verbatim, so the result may fail :func:`is_valid`.

    Raises:
        PrefixError: *prefix* is not S, T, F, or G.
        LengthError: *digits* is not 7 long, or *check_digit* is not one character.
        InvalidCharacterError: a digit is not an integer in 0-9, or
            *check_digit* is not a string.
    """
    p = _to_prefix(prefix)

    if len(digits) != DIGIT_COUNT:
        msg = f"Expected {DIGIT_COUNT} digits, got {len(digits)}"
        raise LengthError(msg)

    for position, digit in enumerate(digits, start=1):
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            msg = f"Digit {position} must be an integer 0-9, got {digit!r}"
            raise InvalidCharacterError(msg)

    body = tuple(digits)
    if check_digit is None:
        check_digit = compute_check_digit(p, body)
    elif not isinstance(check_digit, str):
        msg = f"Check digit must be a letter, got {check_digit!r}"
        raise InvalidCharacterError(msg)
    elif len(check_digit) != 1:
        msg = f"Check digit must be a single character, got {check_digit!r}"
        raise LengthError(msg)

    return Identifier(prefix=p, digits=body, check_digit=check_digit)


def parse(text: str) -> Identifier:
    """Parse a 9-character identifier string.

    The check digit is kept as written; it is not recomputed or corrected.

    Raises:
        LengthError: *text* is not 9 characters long.
        InvalidCharacterError: *text* does not match ``IDENTIFIER_PATTERN``.
        PrefixError: the leading letter has no :class:`Prefix` (unreachable
            once the pattern check passes).
    """
    if len(text) != IDENTIFIER_LENGTH:
        msg = f"Expected {IDENTIFIER_LENGTH} characters, got {len(text)}"
        raise LengthError(msg)

    if IDENTIFIER_PATTERN.fullmatch(text) is None:
        msg = f"{text!r} contains characters not allowed in an NRIC/FIN"
        raise InvalidCharacterError(msg)

    prefix = _to_prefix(text[0])

    digits = tuple(int(ch) for ch in text[1:-1])
    if len(digits) != DIGIT_COUNT:
        msg = f"Expected {DIGIT_COUNT} digits, got {len(digits)}"
        raise LengthError(msg)

    return Identifier(prefix=prefix, digits=digits, check_digit=text[-1])


def is_valid(identifier: Identifier) -> bool:
    """Return True iff the stored check digit matches the computed one.

    Never raises; a computation failure counts as invalid.
    """
    try:
        expected = compute_check_digit(identifier.prefix, identifier.digits)
    except (TypeError, ValueError):
        return False
    return identifier.check_digit == expected


def format_identifier(identifier: Identifier) -> str:
    """Render the canonical 9-character form, e.g. ``S1234567D``."""
    body = "".join(str(digit) for digit in identifier.digits)
    return f"{identifier.prefix}{body}{identifier.check_digit}"
