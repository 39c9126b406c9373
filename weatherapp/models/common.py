"""Common types and helpers shared across models."""

from datetime import date, datetime, tzinfo
from enum import StrEnum
from typing import TypeAlias

UnixSeconds: TypeAlias = int

DEFAULT_CITY = "Narva"


class ConditionMain(StrEnum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    RAIN = "Rain"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"


def local_datetime(ts: UnixSeconds, tz: tzinfo | None = None) -> datetime:
    """Convert a unix timestamp to a datetime in ``tz`` (process local time if None)."""
    return datetime.fromtimestamp(ts, tz=tz)


def local_date(ts: UnixSeconds, tz: tzinfo | None = None) -> date:
    return local_datetime(ts, tz).date()
