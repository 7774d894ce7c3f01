#!/usr/bin/env python3
"""
Constants for IGC route generator
"""

# Default configuration values
DEFAULT_LEVEL = "medium"
DEFAULT_FORMAT = "csv"
DEFAULT_OUT_PATH = "."
DEFAULT_UNKNOWN_TEXT = "Unknown"
DEFAULT_NA_TEXT = "N/A"
DEFAULT_GPS_DATUM = "WGS84"

# IGC record types
IGC_RECORD_POSITION = "B"
IGC_RECORD_HEADER = "H"
IGC_RECORD_LOGGER = "A"
IGC_VALID_FIX = "A"
IGC_NORTH = "N"
IGC_EAST = "E"

# IGC header prefixes (source byte F = flight recorder, O = observer)
IGC_HEADER_DATE = "HFDTE"
IGC_HEADER_DATE_LONG = "HFDTEDATE:"
IGC_HEADER_PILOT = "PLT"
IGC_HEADER_GLIDER_TYPE = "GTY"
IGC_HEADER_GLIDER_ID = "GID"
IGC_HEADER_COMPETITION_ID = "CID"
IGC_HEADER_FIRMWARE = "HFRFW"
IGC_HEADER_HARDWARE = "HFRHW"
IGC_HEADER_LOGGER_TYPE = "HFFTY"
IGC_HEADER_DATUM = "HFDTM"
IGC_HEADER_SOURCES = ("HF", "HO")
IGC_HEADER_TAG_LENGTH = 5
IGC_CENTURY = 2000

# B record layout: (offset, length)
B_RECORD_MIN_LENGTH = 35
B_TIME = (1, 6)
B_LAT_DEGREES = (7, 2)
B_LAT_MINUTES = (9, 2)
B_LAT_THOUSANDTHS = (11, 3)
B_LAT_HEMISPHERE = (14, 1)
B_LON_DEGREES = (15, 3)
B_LON_MINUTES = (18, 2)
B_LON_THOUSANDTHS = (20, 3)
B_LON_HEMISPHERE = (23, 1)
B_VALIDITY = (24, 1)
B_PRESSURE_ALTITUDE = (25, 5)
B_GNSS_ALTITUDE = (30, 5)

# Earth radius in kilometers (for distance calculations)
EARTH_RADIUS_KM = 6371

# Time
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
TIME_FORMAT_HMS = "%H:%M:%S"

# Math constants
DEGREES_IN_CIRCLE = 360
MAX_COURSE_CHANGE = 180

# Waypoint generation
MAX_WAYPOINTS = 15
MAX_INTERIOR_WAYPOINTS = MAX_WAYPOINTS - 2
MAX_SAMPLED_FIXES = 200
MIN_SEGMENT_KM = 0.1
ALTITUDE_CHANGE_THRESHOLD = 100
ALTITUDE_IMPORTANCE_DIVISOR = 50
TURN_IMPORTANCE_FACTOR = 2
WAYPOINT_TAKEOFF = "TAKEOFF"
WAYPOINT_LANDING = "LANDING"
WAYPOINT_TURN_PREFIX = "TURN"
WAYPOINT_ALTITUDE_PREFIX = "WP"

# Per-level parameters: km per base waypoint, base waypoint cap, turn threshold (deg)
LEVEL_KM_PER_WAYPOINT = {"low": 15, "medium": 25, "high": 40}
LEVEL_BASE_CAP = {"low": 12, "medium": 8, "high": 5}
LEVEL_TURN_THRESHOLD = {"low": 30, "medium": 45, "high": 60}

# Distance brackets: (upper bound km, minimum count, bonus added to base)
DISTANCE_BRACKETS = (
    (100, 3, 1),
    (300, 4, 2),
    (float("inf"), 5, 3),
)
SHORT_FLIGHT_KM = 20
SHORT_FLIGHT_MIN_COUNT = 2

# Export formats
MAX_PAYLOAD_CHARS = 1500
GPX_COORD_DECIMALS = 6
CSV_COORD_DECIMALS = 6
COMPACT_COORD_DECIMALS = 5
CSV_HEADER = ("name", "latitude", "longitude", "altitude")
GPX_CREATOR = "igc2route"
GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
EXPORT_ERROR_TOO_LARGE = "Too many waypoints for QR code"
EXPORT_ERROR_EMPTY = "No waypoint data available"

# Configuration sections
CONFIG_SECTION_DEFAULTS = "Defaults"
CONFIG_FILE_NAMES = ("igc2route.conf", "igc2route.ini")
