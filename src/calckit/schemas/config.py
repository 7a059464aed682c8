"""Pydantic models for .calckit.yaml configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_FILE = ".calckit.yaml"


class CalculatorSettings(BaseModel):
    """Calculator defaults."""

    initial_value: int | float = Field(
        default=0, description="Starting value when none is given"
    )


class OutputSettings(BaseModel):
    """Command-line output settings."""

    show_steps: bool = Field(
        default=True, description="Render the whole chain, not only the result"
    )
    json_indent: int = Field(default=2)


class CalckitConfig(BaseModel):
    """Complete configuration for .calckit.yaml."""

    calculator: CalculatorSettings = Field(default_factory=CalculatorSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    @classmethod
    def load(cls, path: str | Path) -> "CalckitConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
