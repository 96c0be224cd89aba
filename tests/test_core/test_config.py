"""
Tests for pngshrink.core.config module.
"""

import dataclasses
from pathlib import Path

import pytest

from pngshrink.core.config import ParameterValidator, ShrinkConfig


@pytest.mark.unit
class TestShrinkConfig:
    """Tests for ShrinkConfig dataclass."""

    def test_config_initialization_with_defaults(self, sample_png):
        config = ShrinkConfig(input_path=sample_png)

        assert config.input_path == sample_png
        assert config.output_path is None
        assert config.verbose is False
        assert config.dry_run is False
        assert config.pngcrush_path is None
        assert config.optipng_path is None
        assert config.timeout is None
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_config_is_immutable(self, sample_png):
        config = ShrinkConfig(input_path=sample_png)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.verbose = True


@pytest.mark.unit
class TestParameterValidator:
    """Tests for ParameterValidator class."""

    def test_validate_valid_config(self, sample_png, temp_dir):
        config = ShrinkConfig(input_path=sample_png, output_path=temp_dir / "out.png", timeout=30)

        ParameterValidator.validate(config)

    def test_validate_missing_input(self, temp_dir):
        config = ShrinkConfig(input_path=temp_dir / "missing.png")

        with pytest.raises(FileNotFoundError, match="missing.png not found"):
            ParameterValidator.validate(config)

    def test_validate_input_is_directory(self, temp_dir):
        with pytest.raises(ValueError, match="not a file"):
            ParameterValidator.validate_input_path(temp_dir)

    def test_validate_output_same_as_input(self, sample_png):
        with pytest.raises(ValueError, match="cannot be the same"):
            ParameterValidator.validate_output_path(sample_png, sample_png)

    def test_validate_output_is_directory(self, sample_png, temp_dir):
        with pytest.raises(ValueError, match="is a directory"):
            ParameterValidator.validate_output_path(temp_dir, sample_png)

    def test_validate_output_directory_missing(self, sample_png, temp_dir):
        with pytest.raises(ValueError, match="Output directory does not exist"):
            ParameterValidator.validate_output_path(temp_dir / "nope" / "out.png", sample_png)

    def test_validate_output_none(self, sample_png):
        ParameterValidator.validate_output_path(None, sample_png)

    def test_validate_existing_output_file_allowed(self, sample_png, temp_dir):
        """An existing output file is overwritten, not rejected."""
        existing = temp_dir / "existing.png"
        existing.write_bytes(b"old")

        ParameterValidator.validate_output_path(existing, sample_png)

    @pytest.mark.parametrize("timeout", [0, -1, -0.5])
    def test_validate_timeout_invalid(self, timeout):
        with pytest.raises(ValueError, match="timeout must be positive"):
            ParameterValidator.validate_timeout(timeout)

    @pytest.mark.parametrize("timeout", [None, 0.1, 60])
    def test_validate_timeout_valid(self, timeout):
        ParameterValidator.validate_timeout(timeout)

    def test_validate_log_level_case_insensitive(self):
        ParameterValidator.validate_log_level("debug")

    def test_validate_log_level_invalid(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            ParameterValidator.validate_log_level("LOUD")

    def test_validate_relative_output_path(self, sample_png, monkeypatch):
        """Relative output paths resolve against the working directory."""
        monkeypatch.chdir(sample_png.parent)

        ParameterValidator.validate_output_path(Path("result.png"), sample_png)
