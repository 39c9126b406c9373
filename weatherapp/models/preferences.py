"""User preference model."""

from dataclasses import dataclass

from weatherapp.models.common import DEFAULT_CITY


@dataclass(frozen=True)
class Preferences:
    city: str = DEFAULT_CITY
    use_celsius: bool = True
