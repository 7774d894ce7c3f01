#!/usr/bin/env python3
"""
Waypoint generation for IGC route generator

Reduces a full fix sequence to at most MAX_WAYPOINTS path-ordered waypoints.
Sampled fixes are scored as turn points (course change) and altitude
excursions, ranked by importance, trimmed to a distance-dependent budget and
put back in flight order between TAKEOFF and LANDING.
"""

import math
import logging
from typing import List, Sequence, Tuple, Union

from igc_model import (
    DetailLevel,
    Fix,
    Waypoint,
    WaypointCandidate,
    WaypointKind,
    WaypointRoute
)
from igc_stats import FlightStatistics
from igc_utils import distanceKm, courseChangeDeg
from igc_constants import (
    MAX_INTERIOR_WAYPOINTS,
    MAX_SAMPLED_FIXES,
    MIN_SEGMENT_KM,
    ALTITUDE_CHANGE_THRESHOLD,
    ALTITUDE_IMPORTANCE_DIVISOR,
    TURN_IMPORTANCE_FACTOR,
    WAYPOINT_TAKEOFF,
    WAYPOINT_LANDING,
    WAYPOINT_TURN_PREFIX,
    WAYPOINT_ALTITUDE_PREFIX,
    LEVEL_KM_PER_WAYPOINT,
    LEVEL_BASE_CAP,
    LEVEL_TURN_THRESHOLD,
    DISTANCE_BRACKETS,
    SHORT_FLIGHT_KM,
    SHORT_FLIGHT_MIN_COUNT
)

# Configure logger
logger = logging.getLogger(__name__)


def targetWaypointCount(distance: float, level: Union[DetailLevel, str]) -> int:
    """
    Number of interior waypoints (excluding TAKEOFF and LANDING) for a flight
    of the given distance in km.
    """
    level = DetailLevel.parse(level)
    base_count = min(LEVEL_BASE_CAP[level.value],
                     math.ceil(distance / LEVEL_KM_PER_WAYPOINT[level.value]))

    if distance <= SHORT_FLIGHT_KM:
        count = max(SHORT_FLIGHT_MIN_COUNT, base_count)
    else:
        for upper_km, min_count, bonus in DISTANCE_BRACKETS:
            if distance <= upper_km:
                count = max(min_count, min(MAX_INTERIOR_WAYPOINTS, base_count + bonus))
                break

    return min(MAX_INTERIOR_WAYPOINTS, count)


class WaypointSelector:
    """
    Selects the navigationally significant fixes of a flight.
    Holds no state between calls; every call returns a new WaypointRoute.
    """

    @staticmethod
    def sample_fixes(fixes: Sequence[Fix]) -> List[Tuple[int, Fix]]:
        """
        Take every n-th fix so at most ~MAX_SAMPLED_FIXES are scored.
        The last fix is always included. Returns (original index, fix) pairs.
        """
        stride = max(1, len(fixes) // MAX_SAMPLED_FIXES)
        sampled = [(index, fixes[index]) for index in range(0, len(fixes), stride)]

        last_index = len(fixes) - 1
        if sampled[-1][0] != last_index:
            sampled.append((last_index, fixes[last_index]))

        return sampled

    @staticmethod
    def find_candidates(sampled: Sequence[Tuple[int, Fix]], level: DetailLevel) -> List[WaypointCandidate]:
        """
        Score every interior sampled fix against its sampled neighbours.
        A fix can yield both a turn and an altitude candidate.
        """
        turn_threshold = LEVEL_TURN_THRESHOLD[level.value]
        candidates = []

        for i in range(1, len(sampled) - 1):
            _, prev_fix = sampled[i - 1]
            index, fix = sampled[i]
            _, next_fix = sampled[i + 1]

            # Near-duplicate of the previous sample
            if distanceKm(prev_fix.latitude, prev_fix.longitude,
                          fix.latitude, fix.longitude) < MIN_SEGMENT_KM:
                continue

            course_change = courseChangeDeg(
                prev_fix.latitude, prev_fix.longitude,
                fix.latitude, fix.longitude,
                next_fix.latitude, next_fix.longitude
            )
            if course_change > turn_threshold:
                candidates.append(WaypointCandidate(
                    fix=fix,
                    index=index,
                    importance=course_change * TURN_IMPORTANCE_FACTOR,
                    kind=WaypointKind.TURN
                ))

            alt_change_prev = abs(fix.pressure_altitude - prev_fix.pressure_altitude)
            alt_change_next = abs(next_fix.pressure_altitude - fix.pressure_altitude)
            if alt_change_prev > ALTITUDE_CHANGE_THRESHOLD and alt_change_next > ALTITUDE_CHANGE_THRESHOLD:
                candidates.append(WaypointCandidate(
                    fix=fix,
                    index=index,
                    importance=(alt_change_prev + alt_change_next) / ALTITUDE_IMPORTANCE_DIVISOR,
                    kind=WaypointKind.ALTITUDE
                ))

        return candidates

    @staticmethod
    def select_candidates(candidates: Sequence[WaypointCandidate], count: int) -> List[WaypointCandidate]:
        """Keep the `count` most important candidates, returned in flight order"""
        ranked = sorted(candidates, key=lambda candidate: candidate.importance, reverse=True)
        return sorted(ranked[:count], key=lambda candidate: candidate.index)

    def generate(self, fixes: Sequence[Fix], level: Union[DetailLevel, str] = DetailLevel.MEDIUM) -> WaypointRoute:
        """
        Generate optimized waypoints from a fix sequence.
        Returns an empty route when there are no fixes.
        """
        level = DetailLevel.parse(level)
        if not fixes:
            return WaypointRoute(level=level)

        flight_distance = FlightStatistics.calculate_distance(fixes)
        target_count = targetWaypointCount(flight_distance, level)

        waypoints = [Waypoint.from_fix(WAYPOINT_TAKEOFF, fixes[0])]

        if target_count > 0:
            sampled = self.sample_fixes(fixes)
            candidates = self.find_candidates(sampled, level)
            selected = self.select_candidates(candidates, target_count)
            logger.debug(
                f"{len(sampled)} sampled fixes, {len(candidates)} candidates, "
                f"{len(selected)} selected (budget {target_count})"
            )

            for candidate in selected:
                prefix = WAYPOINT_TURN_PREFIX if candidate.kind is WaypointKind.TURN else WAYPOINT_ALTITUDE_PREFIX
                waypoints.append(Waypoint.from_fix(f"{prefix}{len(waypoints)}", candidate.fix))

        waypoints.append(Waypoint.from_fix(WAYPOINT_LANDING, fixes[-1]))

        logger.info(f"Generated {len(waypoints)} waypoints for {flight_distance:.1f} km flight ({level.value})")
        return WaypointRoute(
            level=level,
            flight_distance=flight_distance,
            target_count=target_count,
            waypoints=tuple(waypoints)
        )


def generateWaypoints(fixes: Sequence[Fix], level: Union[DetailLevel, str] = DetailLevel.MEDIUM) -> WaypointRoute:
    """Generate a waypoint route for a fix sequence"""
    return WaypointSelector().generate(fixes, level)
