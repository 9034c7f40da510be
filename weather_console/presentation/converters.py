"""Unit conversion and display formatting for raw provider values.

The provider reports temperature in Kelvin, wind speed in meters per
second and wind direction in compass degrees.
"""

DEGREE_SIGN = "°"

# Precise factor; 3600 / 1609 would drift by about 0.02%.
MPH_PER_METER_PER_SECOND = 2.23694

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return (kelvin - 273.15) * 1.8 + 32


def format_fahrenheit(kelvin: float) -> str:
    """Format a Kelvin temperature as e.g. ``50.0°F``."""
    return f"{kelvin_to_fahrenheit(kelvin):.1f}{DEGREE_SIGN}F"


def meters_per_second_to_mph(speed: float) -> float:
    return speed * MPH_PER_METER_PER_SECOND


def format_mph(speed: float) -> str:
    return f"{meters_per_second_to_mph(speed):.1f}mph"


def cardinal_direction(degrees: float) -> str:
    """Bucket compass degrees into one of eight points.

    Rounds half to even, so 22.5 maps to N and 67.5 to E.
    """
    return COMPASS_POINTS[round((degrees % 360) / 45) % len(COMPASS_POINTS)]


def format_wind_direction(degrees: float) -> str:
    return f"{degrees:.0f}{DEGREE_SIGN} {cardinal_direction(degrees)}"


def format_longitude(longitude: float) -> str:
    return f"{abs(longitude)} {'E' if longitude >= 0 else 'W'}"


def format_latitude(latitude: float) -> str:
    return f"{abs(latitude)} {'N' if latitude >= 0 else 'S'}"


def format_coordinates(longitude: float, latitude: float) -> str:
    """Longitude and latitude with hemisphere letters, one per line."""
    return f"Longitude: {format_longitude(longitude)}\nLatitude: {format_latitude(latitude)}"


def format_humidity(humidity: float) -> str:
    return f"{humidity:.0f}%"


def format_decimal(value: float) -> str:
    """At most two decimals, trailing zeros dropped (``44.0`` -> ``44``)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")
