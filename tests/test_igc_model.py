"""
Tests for igc_model.py data models
"""
import pytest
from dataclasses import FrozenInstanceError
from igc_model import (
    DetailLevel,
    ExportFormat,
    ExportResult,
    Fix,
    FlightHeader,
    FlightStats,
    IgcFlight,
    Waypoint,
    WaypointRoute
)
from igc_constants import EXPORT_ERROR_TOO_LARGE, EXPORT_ERROR_EMPTY


class TestDetailLevel:
    """Tests for DetailLevel enum"""

    def test_values(self):
        assert DetailLevel.LOW.value == 'low'
        assert DetailLevel.MEDIUM.value == 'medium'
        assert DetailLevel.HIGH.value == 'high'

    def test_parse_name(self):
        assert DetailLevel.parse('high') is DetailLevel.HIGH
        assert DetailLevel.parse(' Low ') is DetailLevel.LOW

    def test_parse_member(self):
        assert DetailLevel.parse(DetailLevel.MEDIUM) is DetailLevel.MEDIUM

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Invalid detail level"):
            DetailLevel.parse('extreme')


class TestExportFormat:
    """Tests for ExportFormat enum"""

    def test_parse(self):
        assert ExportFormat.parse('GPX') is ExportFormat.GPX
        assert ExportFormat.parse('csv') is ExportFormat.CSV
        assert ExportFormat.parse('compact') is ExportFormat.COMPACT_CSV

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Invalid export format"):
            ExportFormat.parse('kml')

    def test_suffix(self):
        assert ExportFormat.GPX.suffix == '.gpx'
        assert ExportFormat.CSV.suffix == '.csv'
        assert ExportFormat.COMPACT_CSV.suffix == '.csv'


class TestFlightHeader:
    """Tests for FlightHeader defaults"""

    def test_default_initialization(self):
        header = FlightHeader()
        assert header.date is None
        assert header.pilot == 'Unknown'
        assert header.glider_type == 'Unknown'
        assert header.glider_reg == 'Unknown'
        assert header.competition_id is None
        assert header.firmware_version is None
        assert header.hardware_version is None
        assert header.logger_type == 'Unknown'
        assert header.logger_id is None
        assert header.gps_datum == 'WGS84'


class TestValueRecords:
    """Records are immutable once produced"""

    def test_fix_is_frozen(self, fix_factory):
        fix = fix_factory(46.0, 8.0)
        with pytest.raises(FrozenInstanceError):
            fix.latitude = 47.0

    def test_stats_defaults(self):
        stats = FlightStats()
        assert stats.duration == 0
        assert stats.start_time is None
        assert stats.distance == 0.0

    def test_empty_flight(self):
        flight = IgcFlight()
        assert flight.fixes == ()
        assert flight.header == FlightHeader()
        assert flight.stats == FlightStats()

    def test_empty_route(self):
        route = WaypointRoute()
        assert route.level is DetailLevel.MEDIUM
        assert route.waypoints == ()


class TestWaypoint:
    """Tests for Waypoint data model"""

    def test_from_fix(self, fix_factory):
        fix = fix_factory(46.5, 8.25, pressure_altitude=1234, timestamp_seconds=45296)
        waypoint = Waypoint.from_fix('TAKEOFF', fix)
        assert waypoint.name == 'TAKEOFF'
        assert waypoint.lat == 46.5
        assert waypoint.lng == 8.25
        assert waypoint.altitude == 1234
        assert waypoint.time == '12:34:56'


class TestExportResult:
    """Tests for ExportResult classification"""

    def test_success(self):
        result = ExportResult(success=True, format=ExportFormat.CSV, payload='x')
        assert not result.too_large
        assert not result.empty

    def test_too_large(self):
        result = ExportResult(success=False, format=ExportFormat.COMPACT_CSV, error=EXPORT_ERROR_TOO_LARGE)
        assert result.too_large
        assert result.payload is None

    def test_empty(self):
        result = ExportResult(success=False, format=ExportFormat.GPX, error=EXPORT_ERROR_EMPTY)
        assert result.empty
