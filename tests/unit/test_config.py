"""Tests for .calckit.yaml configuration."""

import pytest
from pydantic import ValidationError

from calckit.schemas.config import CalckitConfig


class TestCalckitConfig:
    """Tests for CalckitConfig load/save."""

    def test_defaults(self) -> None:
        """Test default settings."""
        cfg = CalckitConfig()
        assert cfg.calculator.initial_value == 0
        assert cfg.output.show_steps is True
        assert cfg.output.json_indent == 2

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        """Test loading a file that does not exist."""
        cfg = CalckitConfig.load(tmp_path / "missing.yaml")
        assert cfg == CalckitConfig()

    def test_partial_file(self, tmp_path) -> None:
        """Test that unspecified sections keep defaults."""
        path = tmp_path / ".calckit.yaml"
        path.write_text("calculator:\n  initial_value: 2.5\n")

        cfg = CalckitConfig.load(path)

        assert cfg.calculator.initial_value == 2.5
        assert cfg.output.show_steps is True

    def test_save_and_load(self, tmp_path) -> None:
        """Test that saved settings load back unchanged."""
        path = tmp_path / "nested" / ".calckit.yaml"
        cfg = CalckitConfig()
        cfg.calculator.initial_value = 100
        cfg.output.show_steps = False

        cfg.save(path)

        assert CalckitConfig.load(path) == cfg

    def test_invalid_value(self, tmp_path) -> None:
        """Test that invalid settings fail validation."""
        path = tmp_path / ".calckit.yaml"
        path.write_text("calculator:\n  initial_value: lots\n")

        with pytest.raises(ValidationError):
            CalckitConfig.load(path)
