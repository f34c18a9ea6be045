"""User-configurable client settings loaded from a YAML file."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from barometer.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ClientSettings(BaseModel):
    """Connection settings for OpenWeatherMapClient.

    Only ``api_key`` is required; the rest default to the public
    OpenWeatherMap endpoint. Values may reference environment variables
    as ``${NAME}``, so the key can stay out of the file.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("barometer.yaml"),
        Path("~/.config/barometer/config.yaml").expanduser(),
        Path("/etc/barometer/config.yaml"),
    ]

    api_key: str = Field(..., min_length=1, description="OpenWeatherMap API key")
    base_url: str = Field(DEFAULT_BASE_URL, description="API base URL")
    user_agent: str = Field(
        DEFAULT_USER_AGENT, description="User-Agent header value; empty to omit"
    )
    timeout: timedelta = Field(
        DEFAULT_TIMEOUT, description="Request timeout (seconds or ISO 8601 duration)"
    )

    # ---- validators ----
    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def find_config(cls) -> Path:
        """Locate the config file: BAROMETER_CONFIG first, then the defaults.

        Raises:
            FileNotFoundError: If no config file is found
        """
        env_path = os.environ.get("BAROMETER_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(
                    f"Config file from BAROMETER_CONFIG not found: {path}"
                )
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        raise FileNotFoundError(
            "No configuration file found. Create barometer.yaml or set BAROMETER_CONFIG."
        )

    @classmethod
    def load(cls, path: Path | None = None) -> ClientSettings:
        """Load configuration from a YAML file.

        A ``.env`` file in the working directory is loaded first, so
        ``${NAME}`` references can be satisfied from it. Variables already
        set in the environment win.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ClientSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        path = path or cls.find_config()
        load_dotenv(find_dotenv(usecwd=True))

        try:
            data = yaml.safe_load(_interpolate_env(path.read_text()))
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
