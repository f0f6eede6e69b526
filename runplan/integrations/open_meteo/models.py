from pydantic import BaseModel

# WMO weather interpretation codes, see https://open-meteo.com/en/docs
WMO_CONDITIONS: dict[int, str] = {
    0: "Clear",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing Rime Fog",
    51: "Light Drizzle",
    53: "Moderate Drizzle",
    55: "Dense Drizzle",
    56: "Light Freezing Drizzle",
    57: "Dense Freezing Drizzle",
    61: "Slight Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    66: "Light Freezing Rain",
    67: "Heavy Freezing Rain",
    71: "Slight Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Slight Rain Showers",
    81: "Moderate Rain Showers",
    82: "Violent Rain Showers",
    85: "Slight Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm with Slight Hail",
    99: "Thunderstorm with Heavy Hail",
}


def wmo_code_to_condition(code: int | None) -> str:
    if code is None:
        return "Unknown"
    return WMO_CONDITIONS.get(code, "Unknown")


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class GeocodingResult(BaseModel):
    id: int
    name: str
    latitude: float
    longitude: float
    country: str | None = None
    country_code: str | None = None
    admin1: str | None = None  # State/region

    def display_name(self) -> str:
        parts = [self.name, self.admin1, self.country]
        return ", ".join(part for part in parts if part)


class GeocodingResponse(BaseModel):
    results: list[GeocodingResult] | None = None


class OpenMeteoHourly(BaseModel):
    """Parallel arrays of hourly values, one element per hour.

    Open-Meteo reports hours it has no data for as null.
    """

    time: list[str]
    temperature_2m: list[float | None]
    apparent_temperature: list[float | None]
    precipitation_probability: list[float | None]
    weather_code: list[int | None]
    wind_speed_10m: list[float | None]
    relative_humidity_2m: list[float | None]
    wind_direction_10m: list[float | None] | None = None


class OpenMeteoForecast(BaseModel):
    latitude: float
    longitude: float
    timezone: str
    hourly: OpenMeteoHourly
