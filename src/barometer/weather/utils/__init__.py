"""Weather-specific helpers."""

from .units import UnitConverter

__all__ = ["UnitConverter"]
