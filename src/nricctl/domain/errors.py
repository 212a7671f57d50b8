"""Closed error taxonomy for identifier construction and parsing."""

from __future__ import annotations


class NRICError(ValueError):
    """Base class for all identifier errors.

    ``code`` is stable and surfaces as ``ServiceError.code``.
    """

    code = "NRIC_ERROR"


class LengthError(NRICError):
    """Digit sequence is not 7 long, or the full string is not 9 characters."""

    code = "LENGTH_ERROR"


class InvalidCharacterError(NRICError):
    """A character is outside the alphabet allowed at its position."""

    code = "INVALID_CHARACTER"


class PrefixError(NRICError):
    """The leading letter is not one of S, T, F, G."""

    code = "PREFIX_ERROR"
