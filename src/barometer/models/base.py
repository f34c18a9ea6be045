from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from barometer.utils.time import TimeUtils

ValidatorCallable = Callable[[type[Any], Any], Any]


def _drop_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_nulls(v) for v in value]
    return value


class WireModel(BaseModel):
    """Immutable base for models decoded from the upstream JSON payload.

    Every field is optional on the wire. Unknown keys are ignored and an
    explicit ``null`` is treated the same as a missing key, so the field
    falls back to its zero value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def treat_null_as_absent(cls, data: Any) -> Any:
        return _drop_nulls(data)


class TimeStampModel(WireModel):
    """Base model with timestamp conversion utilities.

    This class serves as a base for models that need to convert UNIX timestamps
    to datetime objects with consistent timezone handling.
    """

    @classmethod
    def convert_timestamp(cls, v: Any) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            v: UNIX timestamp (seconds since epoch)

        Returns:
            datetime: Timezone-aware datetime object in UTC

        Raises:
            ValueError: If ``v`` is not an integer or is out of range
        """
        # bool is an int subclass but never a valid timestamp
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(
                f"expected integer seconds since the Unix epoch, got {v!r}"
            )
        try:
            return TimeUtils.epoch_to_datetime(v)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"timestamp {v} is out of range") from exc

    @staticmethod
    def timestamp_validator(field_name: str) -> ValidatorCallable:
        """Factory method to create timestamp field validators.

        Args:
            field_name: The field name to validate

        Returns:
            A validator method for the specified field
        """

        @field_validator(field_name, mode="before")
        def validate_timestamp(cls: type[Any], v: Any) -> Any:
            # already-decoded values, e.g. from model_dump() or a test fake
            if isinstance(v, datetime):
                if v.tzinfo is None:
                    raise ValueError(f"datetime must be timezone-aware, got {v!r}")
                return v
            return TimeStampModel.convert_timestamp(v)

        return validate_timestamp
