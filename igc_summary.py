#!/usr/bin/env python3
"""
Flight and route summary functions for IGC route generator
"""

from igc_model import IgcFlight, WaypointRoute
from igc_utils import formatDuration
from igc_constants import DEFAULT_NA_TEXT


def flightSummary(flight: IgcFlight) -> str:
    """Generate a summary string for the flight"""
    header = flight.header
    stats = flight.stats

    pilot = f' by {header.pilot}'
    distance = f" {stats.distance:.2f} km" if stats.distance else ""
    date_str = header.date or "Unknown Date"
    heading = f"{header.glider_reg} - {date_str}{distance}{pilot} ({formatDuration(stats.duration)})"
    underline = '\n' + ('-' * len(heading))

    start_time = stats.start_time or DEFAULT_NA_TEXT
    end_time = stats.end_time or DEFAULT_NA_TEXT

    return f'''{heading}{underline}
   Glider: {header.glider_type}
    Fixes: {len(flight.fixes)}
     From: {start_time} ({stats.takeoff_altitude} m)
       To: {end_time} ({stats.landing_altitude} m)
 Altitude: {stats.min_altitude} m - {stats.max_altitude} m
    Climb: {stats.max_climb:.1f} m/min
     Sink: {stats.max_sink:.1f} m/min
   Logger: {header.logger_type} ({header.gps_datum})'''


def routeSummary(route: WaypointRoute) -> str:
    """Generate a summary string for a generated waypoint route"""
    if not route.waypoints:
        return "No waypoints generated"

    return f'''Optimization: {route.level.value.capitalize()}
Flight Distance: {route.flight_distance:.1f} km
Waypoints: {len(route.waypoints)}
Start: {route.waypoints[0].name}
End: {route.waypoints[-1].name}'''
