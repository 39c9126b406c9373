"""Pydantic schemas for the OpenWeatherMap 5-day/3-hour forecast payload.

Only the fields the client uses are declared; everything else in the
payload is ignored.
"""

from pydantic import BaseModel, Field

from weatherapp.models.forecast import ForecastSample, ForecastSeries

# 9999-12-31T00:00:00Z; later timestamps cannot be rendered as local datetimes
MAX_TIMESTAMP = 253402214400


class OwmMain(BaseModel):
    model_config = {"allow_inf_nan": False}

    temp: float
    temp_max: float
    temp_min: float


class OwmWeather(BaseModel):
    main: str
    description: str
    icon: str


class OwmEntry(BaseModel):
    dt: int = Field(ge=0, le=MAX_TIMESTAMP)
    main: OwmMain
    weather: list[OwmWeather] = Field(min_length=1)

    def to_sample(self) -> ForecastSample:
        condition = self.weather[0]
        return ForecastSample(
            timestamp=self.dt,
            temperature_c=self.main.temp,
            temperature_max_c=self.main.temp_max,
            temperature_min_c=self.main.temp_min,
            condition_main=condition.main,
            condition_description=condition.description,
            icon_code=condition.icon,
        )


class OwmCity(BaseModel):
    name: str


class OwmForecastResponse(BaseModel):
    city: OwmCity
    entries: list[OwmEntry] = Field(alias="list")

    def to_series(self) -> ForecastSeries:
        return ForecastSeries(
            location_name=self.city.name,
            samples=tuple(e.to_sample() for e in self.entries),
        )


def parse_forecast(raw: object) -> ForecastSeries:
    """Validate a decoded forecast payload and map it to the domain model.

    Raises pydantic.ValidationError when the payload does not match, including
    non-finite temperatures and timestamps outside the representable range.
    """
    return OwmForecastResponse.model_validate(raw).to_series()
