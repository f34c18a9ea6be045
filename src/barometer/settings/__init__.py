"""Client settings management.

This package provides:
- ClientSettings: connection settings loaded from a YAML config file
"""

from barometer.settings.user import ClientSettings

__all__ = ["ClientSettings"]
