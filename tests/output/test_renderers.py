"""Tests for operation-specific renderers."""

from nricctl.output.renderers import render_result
from nricctl.services.result import ServiceResult


def _batch() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="validate_batch",
        data={
            "items": [
                {
                    "input": "S1234567D",
                    "identifier": "S1234567D",
                    "valid": True,
                    "check_digit": "D",
                    "expected_check_digit": "D",
                },
                {"input": "[oops]", "valid": False, "error": "LENGTH_ERROR"},
            ],
            "count": 2,
            "valid_count": 1,
            "invalid_count": 1,
        },
    )


class TestRenderComplete:
    def test_identifier_and_check_digit(self) -> None:
        result = ServiceResult(
            ok=True,
            op="complete",
            data={
                "prefix": "S",
                "digits": "1234567",
                "check_digit": "D",
                "identifier": "S1234567D",
            },
        )
        output = render_result(result)
        assert output.splitlines() == [
            "OK  complete",
            "  identifier: S1234567D",
            "  check_digit: D",
        ]

    def test_verbose_shows_components(self) -> None:
        result = ServiceResult(
            ok=True,
            op="complete",
            data={"prefix": "T", "digits": "0000000", "check_digit": "G", "identifier": "T0000000G"},
        )
        output = render_result(result, verbose=True)
        assert "  prefix: T" in output
        assert "  digits: 0000000" in output


class TestRenderBatch:
    def test_table_and_counts(self) -> None:
        output = render_result(_batch())
        assert "S1234567D" in output
        assert "valid" in output
        assert "LENGTH_ERROR" in output
        assert "[oops]" in output
        assert "  count: 2" in output
        assert "  valid_count: 1" in output
        assert "  invalid_count: 1" in output

    def test_verbose_adds_expected_column(self) -> None:
        assert "Expected" in render_result(_batch(), verbose=True)
        assert "Expected" not in render_result(_batch())


class TestGeneric:
    def test_unknown_op_falls_back(self) -> None:
        output = render_result(ServiceResult(ok=True, op="mystery", data={"a": 1}))
        assert output.splitlines() == ["OK  mystery", "  a: 1"]
