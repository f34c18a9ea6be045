from datetime import timedelta
from typing import Final

VERSION: Final = "0.1.0"

# OpenWeatherMap current weather API (2.5)
DEFAULT_BASE_URL: Final = "https://api.openweathermap.org/data/2.5"

# Sent as the User-Agent header on every request
DEFAULT_USER_AGENT: Final = f"bike-barometer/{VERSION}"

# Per socket operation (connect, and each wait for response bytes), not the
# whole round trip
DEFAULT_TIMEOUT: Final = timedelta(seconds=60)
