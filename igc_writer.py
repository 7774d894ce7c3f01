#!/usr/bin/env python3
"""
Route writer module for IGC route generator

This module serializes waypoint routes to GPX, CSV and compact CSV text
and enforces the payload size budget of the QR export channel.
"""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence, Union
from xml.sax.saxutils import escape, quoteattr

from igc_model import ExportFormat, ExportResult, Waypoint, WaypointRoute
from igc_constants import (
    MAX_PAYLOAD_CHARS,
    GPX_COORD_DECIMALS,
    CSV_COORD_DECIMALS,
    COMPACT_COORD_DECIMALS,
    CSV_HEADER,
    GPX_CREATOR,
    GPX_NAMESPACE,
    GPX_TIMESTAMP_FORMAT,
    EXPORT_ERROR_TOO_LARGE,
    EXPORT_ERROR_EMPTY
)

# Configure logger
logger = logging.getLogger(__name__)


class RouteWriter:
    """
    Handles writing waypoint routes for export.
    Falls back to compact CSV when the primary format exceeds the size budget.
    """

    def __init__(self, max_chars: int = MAX_PAYLOAD_CHARS, generated_at: Optional[datetime] = None):
        """
        Initialize with the payload size budget. `generated_at` fixes the
        GPX metadata timestamp, otherwise the current UTC time is used.
        """
        self.max_chars = max_chars
        self.generated_at = generated_at

    @staticmethod
    def format_coordinate(value: float, decimals: int) -> str:
        return f"{value:.{decimals}f}"

    def format_timestamp(self) -> str:
        generated_at = self.generated_at or datetime.now(timezone.utc)
        return generated_at.strftime(GPX_TIMESTAMP_FORMAT)

    def format_gpx(self, route: WaypointRoute) -> str:
        """Generate waypoint data in GPX 1.1 format"""
        level = route.level.value

        def point_attrs(waypoint: Waypoint) -> str:
            lat = self.format_coordinate(waypoint.lat, GPX_COORD_DECIMALS)
            lon = self.format_coordinate(waypoint.lng, GPX_COORD_DECIMALS)
            return f'lat={quoteattr(lat)} lon={quoteattr(lon)}'

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<gpx version="1.1" creator="{GPX_CREATOR}" xmlns="{GPX_NAMESPACE}">',
            '  <metadata>',
            f'    <name>Optimized Flight Waypoints ({escape(level)})</name>',
            f'    <time>{self.format_timestamp()}</time>',
            '  </metadata>',
        ]

        for waypoint in route.waypoints:
            lines.extend([
                f'  <wpt {point_attrs(waypoint)}>',
                f'    <ele>{waypoint.altitude}</ele>',
                f'    <name>{escape(waypoint.name)}</name>',
                '  </wpt>',
            ])

        lines.extend([
            '  <trk>',
            f'    <name>Optimized Flight Path ({escape(level)})</name>',
            '    <trkseg>',
        ])
        for waypoint in route.waypoints:
            lines.extend([
                f'      <trkpt {point_attrs(waypoint)}>',
                f'        <ele>{waypoint.altitude}</ele>',
                '      </trkpt>',
            ])
        lines.extend([
            '    </trkseg>',
            '  </trk>',
            '</gpx>',
        ])

        return '\n'.join(lines)

    def format_csv(self, waypoints: Sequence[Waypoint]) -> str:
        """Generate waypoint data in simple CSV format with a header row"""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(CSV_HEADER)
        for waypoint in waypoints:
            writer.writerow([
                waypoint.name,
                self.format_coordinate(waypoint.lat, CSV_COORD_DECIMALS),
                self.format_coordinate(waypoint.lng, CSV_COORD_DECIMALS),
                waypoint.altitude,
            ])
        return buffer.getvalue()

    def format_compact_csv(self, waypoints: Sequence[Waypoint]) -> str:
        """Headerless CSV with name and reduced precision coordinates only"""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        for waypoint in waypoints:
            writer.writerow([
                waypoint.name,
                self.format_coordinate(waypoint.lat, COMPACT_COORD_DECIMALS),
                self.format_coordinate(waypoint.lng, COMPACT_COORD_DECIMALS),
            ])
        return buffer.getvalue()

    def format_route(self, route: WaypointRoute, fmt: ExportFormat) -> str:
        if fmt is ExportFormat.GPX:
            return self.format_gpx(route)
        if fmt is ExportFormat.CSV:
            return self.format_csv(route.waypoints)
        return self.format_compact_csv(route.waypoints)

    def export(self, route: WaypointRoute, fmt: Union[ExportFormat, str] = ExportFormat.CSV) -> ExportResult:
        """
        Serialize a route for the QR channel.
        Never truncates: if even the compact form is over budget the
        export fails and the caller has to reduce the waypoint count.
        """
        fmt = ExportFormat.parse(fmt)
        if not route.waypoints:
            logger.warning("No waypoints to export")
            return ExportResult(success=False, format=fmt, error=EXPORT_ERROR_EMPTY)

        payload = self.format_route(route, fmt)
        if len(payload) <= self.max_chars:
            return ExportResult(success=True, format=fmt, payload=payload)

        logger.info(f"{fmt.value} payload is {len(payload)} chars (limit {self.max_chars}), using compact CSV")
        compact = self.format_compact_csv(route.waypoints)
        if len(compact) <= self.max_chars:
            return ExportResult(success=True, format=ExportFormat.COMPACT_CSV, payload=compact)

        logger.warning(f"Compact payload is {len(compact)} chars (limit {self.max_chars}): {EXPORT_ERROR_TOO_LARGE}")
        return ExportResult(success=False, format=ExportFormat.COMPACT_CSV, error=EXPORT_ERROR_TOO_LARGE)


# Public function
def exportRoute(route: WaypointRoute, fmt: Union[ExportFormat, str] = ExportFormat.CSV,
                max_chars: int = MAX_PAYLOAD_CHARS) -> ExportResult:
    """Serialize a waypoint route under the payload size budget"""
    return RouteWriter(max_chars).export(route, fmt)
