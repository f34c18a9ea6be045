"""Data model base classes and validators for barometer.

This module provides shared base classes like TimeStampModel used for
validating and transforming raw OpenWeatherMap payloads into structured models.
"""
