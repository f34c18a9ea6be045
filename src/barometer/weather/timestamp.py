"""Decoding of Unix-epoch timestamp tokens.

OpenWeatherMap encodes ``dt``, ``sys.sunrise`` and ``sys.sunset`` as bare
JSON integers rather than date-time strings.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Final

from barometer.models.base import TimeStampModel
from barometer.weather.errors import DecodeError

_INTEGER_TOKEN: Final = re.compile(r"[+-]?[0-9]+")


def decode_timestamp(token: bytes | str) -> datetime:
    """Decode a raw JSON integer token into a UTC datetime.

    Args:
        token: The token exactly as it appears in the JSON document

    Returns:
        Timezone-aware datetime ``token`` seconds after the Unix epoch

    Raises:
        DecodeError: If the token is not a base-10 integer literal
    """
    if isinstance(token, (bytes, bytearray)):
        try:
            text = token.decode("ascii")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Invalid timestamp token: {token!r}", exc) from exc
    else:
        text = token

    if not _INTEGER_TOKEN.fullmatch(text):
        raise DecodeError(f"Invalid timestamp token: {text!r}")

    try:
        return TimeStampModel.convert_timestamp(int(text))
    except ValueError as exc:
        raise DecodeError(f"Invalid timestamp token: {text!r}", exc) from exc
