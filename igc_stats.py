#!/usr/bin/env python3
"""
Flight statistics for IGC route generator

Derives duration, altitude extremes, climb/sink rates and distance flown
from a decoded fix sequence.
"""

import logging
from typing import Sequence

from igc_model import Fix, FlightStats
from igc_utils import distanceKm
from igc_constants import SECONDS_PER_DAY, SECONDS_PER_MINUTE

# Configure logger
logger = logging.getLogger(__name__)


class FlightStatistics:
    """
    Computes FlightStats from scratch for a sequence of fixes.
    An empty sequence yields all-zero statistics.
    """

    @staticmethod
    def calculate_duration(fixes: Sequence[Fix]) -> int:
        """
        Seconds between first and last fix.
        Assumes at most one crossing of local midnight.
        """
        if not fixes:
            return 0
        duration = fixes[-1].timestamp_seconds - fixes[0].timestamp_seconds
        if duration < 0:
            duration += SECONDS_PER_DAY
        return duration

    @staticmethod
    def calculate_rates(fixes: Sequence[Fix]):
        """
        Maximum climb and sink rates in m/min.
        Pairs without a positive time step are skipped.
        Returns (max_climb, max_sink) with sink as a positive magnitude.
        """
        max_climb = 0.0
        max_sink = 0.0

        for prev_fix, fix in zip(fixes, fixes[1:]):
            time_diff = fix.timestamp_seconds - prev_fix.timestamp_seconds
            if time_diff <= 0:
                continue
            alt_diff = fix.pressure_altitude - prev_fix.pressure_altitude
            rate = alt_diff / time_diff * SECONDS_PER_MINUTE
            max_climb = max(max_climb, rate)
            max_sink = min(max_sink, rate)

        return max_climb, abs(max_sink)

    @staticmethod
    def calculate_distance(fixes: Sequence[Fix]) -> float:
        """Total distance flown in km, summed over consecutive fixes"""
        return sum(
            distanceKm(prev_fix.latitude, prev_fix.longitude, fix.latitude, fix.longitude)
            for prev_fix, fix in zip(fixes, fixes[1:])
        )

    def calculate(self, fixes: Sequence[Fix]) -> FlightStats:
        """Calculate flight statistics based on fixes"""
        if not fixes:
            return FlightStats()

        altitudes = [fix.pressure_altitude for fix in fixes]
        max_climb, max_sink = self.calculate_rates(fixes)

        stats = FlightStats(
            duration=self.calculate_duration(fixes),
            start_time=fixes[0].time,
            end_time=fixes[-1].time,
            max_altitude=max(altitudes),
            min_altitude=min(altitudes),
            takeoff_altitude=fixes[0].pressure_altitude,
            landing_altitude=fixes[-1].pressure_altitude,
            max_climb=max_climb,
            max_sink=max_sink,
            distance=self.calculate_distance(fixes)
        )
        logger.debug(f"Flight statistics: {stats}")
        return stats


def calculateFlightStats(fixes: Sequence[Fix]) -> FlightStats:
    """Calculate flight statistics for a fix sequence"""
    return FlightStatistics().calculate(fixes)
