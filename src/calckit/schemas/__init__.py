"""Pydantic schemas for calculation steps and configuration."""

from calckit.schemas.config import CalckitConfig
from calckit.schemas.steps import CalculationScript, Operation, Step

__all__ = ["Operation", "Step", "CalculationScript", "CalckitConfig"]
