#!/usr/bin/env python3
"""
Data models and enums for IGC route generator
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from igc_constants import (
    DEFAULT_UNKNOWN_TEXT,
    DEFAULT_GPS_DATUM,
    EXPORT_ERROR_TOO_LARGE,
    EXPORT_ERROR_EMPTY
)


class DetailLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Union["DetailLevel", str]) -> "DetailLevel":
        """Accept an enum member or a case-insensitive level name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(level.value for level in cls)
            raise ValueError(f"Invalid detail level '{value}' (expected one of: {names})")


class ExportFormat(Enum):
    GPX = "gpx"
    CSV = "csv"
    COMPACT_CSV = "compact"

    @classmethod
    def parse(cls, value: Union["ExportFormat", str]) -> "ExportFormat":
        """Accept an enum member or a case-insensitive format name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(fmt.value for fmt in cls)
            raise ValueError(f"Invalid export format '{value}' (expected one of: {names})")

    @property
    def suffix(self) -> str:
        return '.gpx' if self is ExportFormat.GPX else '.csv'


class WaypointKind(Enum):
    TURN = "turn"
    ALTITUDE = "altitude"


@dataclass(frozen=True)
class Fix:
    """A single timestamped GPS/barometric sample decoded from a B record"""
    time: str
    timestamp_seconds: int
    latitude: float
    longitude: float
    valid: bool
    pressure_altitude: int
    gnss_altitude: int


@dataclass(frozen=True)
class FlightHeader:
    """Header metadata of a flight log. Every field is optional."""
    date: Optional[str] = None
    pilot: str = DEFAULT_UNKNOWN_TEXT
    glider_type: str = DEFAULT_UNKNOWN_TEXT
    glider_reg: str = DEFAULT_UNKNOWN_TEXT
    competition_id: Optional[str] = None
    firmware_version: Optional[str] = None
    hardware_version: Optional[str] = None
    logger_type: str = DEFAULT_UNKNOWN_TEXT
    logger_id: Optional[str] = None
    gps_datum: str = DEFAULT_GPS_DATUM


@dataclass(frozen=True)
class FlightStats:
    """Statistics derived from the fix sequence"""
    duration: int = 0
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    max_altitude: int = 0
    min_altitude: int = 0
    takeoff_altitude: int = 0
    landing_altitude: int = 0
    max_climb: float = 0.0
    max_sink: float = 0.0
    distance: float = 0.0


@dataclass(frozen=True)
class IgcFlight:
    """Represents a complete parsed flight"""
    header: FlightHeader = field(default_factory=FlightHeader)
    fixes: Tuple[Fix, ...] = ()
    stats: FlightStats = field(default_factory=FlightStats)


@dataclass(frozen=True)
class Waypoint:
    name: str
    lat: float
    lng: float
    altitude: int
    time: str

    @classmethod
    def from_fix(cls, name: str, fix: Fix) -> "Waypoint":
        return cls(
            name=name,
            lat=fix.latitude,
            lng=fix.longitude,
            altitude=fix.pressure_altitude,
            time=fix.time
        )


@dataclass(frozen=True)
class WaypointCandidate:
    """A sampled fix scored as a possible waypoint"""
    fix: Fix
    index: int
    importance: float
    kind: WaypointKind


@dataclass(frozen=True)
class WaypointRoute:
    """Result of one waypoint generation run"""
    level: DetailLevel = DetailLevel.MEDIUM
    flight_distance: float = 0.0
    target_count: int = 0
    waypoints: Tuple[Waypoint, ...] = ()


@dataclass(frozen=True)
class ExportResult:
    """Outcome of serializing a route under the payload size budget"""
    success: bool
    format: ExportFormat
    payload: Optional[str] = None
    error: Optional[str] = None

    @property
    def too_large(self) -> bool:
        return self.error == EXPORT_ERROR_TOO_LARGE

    @property
    def empty(self) -> bool:
        return self.error == EXPORT_ERROR_EMPTY
