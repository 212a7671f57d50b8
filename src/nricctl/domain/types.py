"""Identifier prefixes and checksum families.

The prefix letter selects both the lookup alphabet (family) and the
weighted-sum offset used by the check-digit algorithm.
"""

from __future__ import annotations

from enum import StrEnum


class ChecksumFamily(StrEnum):
    """Which check-digit alphabet an identifier uses."""

    UIN = "UIN"
    FIN = "FIN"


class Prefix(StrEnum):
    """Leading letter of an NRIC or FIN."""

    S = "S"
    T = "T"
    F = "F"
    G = "G"

    @property
    def family(self) -> ChecksumFamily:
        """S/T are citizen (UIN) numbers; F/G are foreigner (FIN) numbers."""
        if self in (Prefix.S, Prefix.T):
            return ChecksumFamily.UIN
        return ChecksumFamily.FIN

    @property
    def offset(self) -> int:
        """Weighted-sum offset: 0 for S/F, 4 for T/G."""
        if self in (Prefix.S, Prefix.F):
            return 0
        return 4
