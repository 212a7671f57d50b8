"""Tests for Prefix and ChecksumFamily enums."""

import pytest

from nricctl.domain.types import ChecksumFamily, Prefix


class TestPrefix:
    def test_closed_set(self) -> None:
        assert [p.value for p in Prefix] == ["S", "T", "F", "G"]

    def test_from_letter(self) -> None:
        assert Prefix("G") is Prefix.G

    def test_unknown_letter_rejected(self) -> None:
        with pytest.raises(ValueError):
            Prefix("X")

    @pytest.mark.parametrize(
        "prefix,family",
        [
            (Prefix.S, ChecksumFamily.UIN),
            (Prefix.T, ChecksumFamily.UIN),
            (Prefix.F, ChecksumFamily.FIN),
            (Prefix.G, ChecksumFamily.FIN),
        ],
    )
    def test_family(self, prefix: Prefix, family: ChecksumFamily) -> None:
        assert prefix.family is family

    @pytest.mark.parametrize(
        "prefix,offset",
        [(Prefix.S, 0), (Prefix.F, 0), (Prefix.T, 4), (Prefix.G, 4)],
    )
    def test_offset(self, prefix: Prefix, offset: int) -> None:
        assert prefix.offset == offset

    def test_is_str(self) -> None:
        assert Prefix.S == "S"
