"""Tests for configuration section models."""

import pytest

from nricctl.config.models import InputConfig, NricConfig, OutputConfig


class TestDefaults:
    def test_input_defaults(self) -> None:
        cfg = InputConfig()
        assert cfg.normalize is True
        assert cfg.ignore_separators is True

    def test_output_defaults(self) -> None:
        assert OutputConfig().show_expected is True

    def test_root_composes_sections(self) -> None:
        cfg = NricConfig()
        assert cfg.input == InputConfig()
        assert cfg.output == OutputConfig()

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            InputConfig().normalize = False  # type: ignore[misc]


class TestValidation:
    def test_partial_section(self) -> None:
        cfg = NricConfig.model_validate({"input": {"normalize": False}})
        assert cfg.input.normalize is False
        assert cfg.input.ignore_separators is True
        assert cfg.output.show_expected is True
