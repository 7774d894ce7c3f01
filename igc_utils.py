#!/usr/bin/env python3
"""
Utility functions for IGC route generator

Great-circle geometry used by the statistics and waypoint scoring code,
plus small formatting helpers.
"""

import re
import math
from typing import Union

from igc_constants import (
    EARTH_RADIUS_KM,
    DEGREES_IN_CIRCLE,
    MAX_COURSE_CHANGE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE
)


def numberOrString(value: str) -> Union[float, str]:
    """Convert a string to a number if possible, otherwise keep as string"""
    if re.sub('^[+-]', '', re.sub('\\.', '', value)).isnumeric():
        return float(value)
    else:
        return value


def distanceKm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on earth.
    Returns distance in kilometers.
    """
    # Convert decimal degrees to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # Haversine formula
    a = math.sin(dlat/2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon/2)**2
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))

    return EARTH_RADIUS_KM * c


def bearingDeg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the initial bearing from point 1 to point 2.

    Returns:
        bearing in degrees, normalized to [0, 360)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlon = math.radians(lon2 - lon1)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)

    bearing = (math.degrees(math.atan2(y, x)) + DEGREES_IN_CIRCLE) % DEGREES_IN_CIRCLE
    # (-tiny + 360) % 360 can round up to exactly 360.0
    if bearing >= DEGREES_IN_CIRCLE:
        bearing = 0.0
    return bearing


def courseChangeDeg(lat1: float, lon1: float,
                    lat2: float, lon2: float,
                    lat3: float, lon3: float) -> float:
    """
    Turn sharpness at point 2, in degrees, regardless of turn direction.

    Compares the bearing 1->2 with the bearing 2->3 and folds the
    difference into [0, 180].
    """
    bearing_in = bearingDeg(lat1, lon1, lat2, lon2)
    bearing_out = bearingDeg(lat2, lon2, lat3, lon3)

    diff = abs(bearing_in - bearing_out)
    if diff > MAX_COURSE_CHANGE:  # Handle wrap-around (e.g. 359 -> 1)
        diff = DEGREES_IN_CIRCLE - diff

    return diff


def formatDuration(seconds: Union[int, float]) -> str:
    """Format a duration in seconds as HH:MM:SS"""
    seconds = int(seconds)
    hours = seconds // SECONDS_PER_HOUR
    minutes = (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    secs = seconds % SECONDS_PER_MINUTE
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
