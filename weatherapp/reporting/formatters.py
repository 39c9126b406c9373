"""Output formatters for the forecast screen."""

import json
from datetime import tzinfo

from weatherapp.forecast.aggregator import (
    DEFAULT_HOURLY_WINDOW,
    current_conditions,
    daily_summary,
    hourly_window,
)
from weatherapp.forecast.units import display_round, to_display_temperature, unit_symbol
from weatherapp.models.common import ConditionMain, local_datetime
from weatherapp.models.forecast import ForecastSample
from weatherapp.models.state import AppState, ViewStatus

ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"

BACKGROUNDS: dict[ConditionMain, str] = {
    ConditionMain.CLEAR: (
        "https://www.nordicexperience.com/wp-content/uploads/2018/03/"
        "AdobeStock_105794017-1024x683.jpeg"
    ),
    ConditionMain.CLOUDS: (
        "https://images.unsplash.com/photo-1498085245356-7c3cda3b412f"
        "?q=80&w=1267&auto=format&fit=crop&ixlib=rb-4.0.3"
        "&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    ),
    ConditionMain.RAIN: (
        "https://eesti-mesi.ee/wp-content/uploads/2024/01/"
        "DALL%C2%B7E-2024-02-26-15.58.53-A-rainy-February-scene-in-Estonia-showcasing-"
        "a-gloomy-and-overcast-sky-with-steady-rain-falling-over-an-urban-setting."
        "-The-streets-are-wet-and-reflec.webp"
    ),
    ConditionMain.SNOW: (
        "https://www.anadventurousworld.com/wp-content/uploads/2022/09/tallinn-in-winter.jpg"
    ),
    ConditionMain.THUNDERSTORM: (
        "https://img.atlasobscura.com/jL0gEhZKHLwd48O0a4OayWvQPp8Hu4xmjNhugU-VmZo/rs:fill:12000:12000/q:81/sm:1/scp:1/ar:1/aHR0cHM6Ly9hdGxh/cy1kZXYuczMuYW1h/em9uYXdzLmNvbS8y/MDE5LzAzLzI1LzE2/LzE3LzAyL2M2YjU3/NWI0LWZlNTAtNDJj/YS1iZTdhLWNmMWU1/MGMzYWM4Mi9SZWxh/bXBvU3RpbGxzXzAy/LmpwZw.jpg"
    ),
}


def icon_url(icon_code: str) -> str:
    return ICON_URL.format(icon=icon_code)


def background_url(condition_main: str | None) -> str:
    """Background image for a condition category; unknown ones fall back to Clear."""
    try:
        condition = ConditionMain(condition_main)
    except ValueError:
        condition = ConditionMain.CLEAR
    return BACKGROUNDS[condition]


def unit_toggle_label(use_celsius: bool) -> str:
    return "Switch to °F" if use_celsius else "Switch to °C"


def hour_label(sample: ForecastSample, tz: tzinfo | None = None) -> str:
    return f"{local_datetime(sample.timestamp, tz).hour}:00"


def day_label(sample: ForecastSample, tz: tzinfo | None = None) -> str:
    """E.g. 'Monday, Oct 19'."""
    dt = local_datetime(sample.timestamp, tz)
    return f"{dt:%A}, {dt:%b} {dt.day}"


def _temp(celsius: float, use_celsius: bool) -> int:
    return display_round(to_display_temperature(celsius, use_celsius))


def format_view_text(
    state: AppState,
    hourly: int = DEFAULT_HOURLY_WINDOW,
    tz: tzinfo | None = None,
) -> str:
    """Plain text rendering of the single forecast screen."""
    view = state.view
    if view.status == ViewStatus.LOADING:
        return "Loading..."
    if view.status == ViewStatus.ERROR:
        return view.error_message or ""

    series = view.series
    assert series is not None
    unit = unit_symbol(state.use_celsius)
    lines = [f"=== {series.location_name} ==="]

    now = current_conditions(series)
    if now is not None:
        lines.append(f"{_temp(now.temperature_c, state.use_celsius)}°{unit}")
        lines.append(now.condition_description)

    hours = hourly_window(series, hourly)
    lines.append("")
    lines.append("Hourly forecast")
    for s in hours:
        lines.append(
            f"  {hour_label(s, tz):>5}  {_temp(s.temperature_c, state.use_celsius):>4}°"
            f"  {s.condition_main}"
        )

    days = daily_summary(series, tz)
    lines.append("")
    lines.append(f"{len(days)}-day forecast")
    for s in days:
        lines.append(
            f"  {day_label(s, tz):<22} "
            f"{_temp(s.temperature_max_c, state.use_celsius)}° / "
            f"{_temp(s.temperature_min_c, state.use_celsius)}°"
            f"  {s.condition_main}"
        )

    lines.append("")
    lines.append(f"[{unit_toggle_label(state.use_celsius)}]")
    return "\n".join(lines)


def format_view_json(
    state: AppState,
    hourly: int = DEFAULT_HOURLY_WINDOW,
    tz: tzinfo | None = None,
) -> str:
    """JSON rendering for programmatic consumption."""
    view = state.view
    data: dict = {
        "status": str(view.status),
        "city": state.city,
        "unit": unit_symbol(state.use_celsius),
    }
    if view.status == ViewStatus.ERROR:
        data["error"] = view.error_message
    if view.status == ViewStatus.READY:
        series = view.series
        assert series is not None
        now = current_conditions(series)
        data["location"] = series.location_name
        data["background"] = background_url(now.condition_main if now else None)
        data["current"] = None
        if now is not None:
            data["current"] = {
                "temperature": _temp(now.temperature_c, state.use_celsius),
                "description": now.condition_description,
                "condition": now.condition_main,
            }
        data["hourly"] = [
            {
                "hour": hour_label(s, tz),
                "temperature": _temp(s.temperature_c, state.use_celsius),
                "icon": icon_url(s.icon_code),
            }
            for s in hourly_window(series, hourly)
        ]
        data["daily"] = [
            {
                "date": day_label(s, tz),
                "max": _temp(s.temperature_max_c, state.use_celsius),
                "min": _temp(s.temperature_min_c, state.use_celsius),
                "icon": icon_url(s.icon_code),
            }
            for s in daily_summary(series, tz)
        ]
    return json.dumps(data, indent=2, ensure_ascii=False)
