"""
Pytest configuration and shared fixtures for igc2route tests
"""
import pytest

from igc_model import Fix

# Coordinates below are in thousandths of an arc minute, as stored in B records
MMIN_PER_DEGREE = 60000
START_LAT = 46 * MMIN_PER_DEGREE
START_LON = 8 * MMIN_PER_DEGREE
EAST_STEP = 900    # 0.015 deg of longitude, ~1.16 km at 46N
NORTH_STEP = 600   # 0.01 deg of latitude, ~1.11 km


def format_b_record(seconds, lat_mmin, lon_mmin, pressure_alt, gnss_alt=None, valid=True):
    """Build a 35 character B record"""
    hours, rest = divmod(seconds % 86400, 3600)
    minutes, secs = divmod(rest, 60)

    lat_hemi = 'N' if lat_mmin >= 0 else 'S'
    lon_hemi = 'E' if lon_mmin >= 0 else 'W'
    lat, lon = abs(lat_mmin), abs(lon_mmin)
    lat_str = f"{lat // MMIN_PER_DEGREE:02d}{(lat % MMIN_PER_DEGREE) // 1000:02d}{lat % 1000:03d}{lat_hemi}"
    lon_str = f"{lon // MMIN_PER_DEGREE:03d}{(lon % MMIN_PER_DEGREE) // 1000:02d}{lon % 1000:03d}{lon_hemi}"

    if gnss_alt is None:
        gnss_alt = pressure_alt
    validity = 'A' if valid else 'V'
    return f"B{hours:02d}{minutes:02d}{secs:02d}{lat_str}{lon_str}{validity}{pressure_alt:05d}{gnss_alt:05d}"


def scenario_track():
    """
    120 fixes, 30 s apart starting 10:00:00: east for 39 steps, north for 40,
    west for 40. Turns at fix 39 and fix 79; a two-step climb of 150 m per
    step peaks its excursion at fix 20 and then levels off.
    """
    lat, lon = START_LAT, START_LON
    records = []
    for i in range(120):
        if i > 0:
            if i < 40:
                lon += EAST_STEP
            elif i < 80:
                lat += NORTH_STEP
            else:
                lon -= EAST_STEP
        if i < 20:
            altitude = 1000
        elif i == 20:
            altitude = 1150
        else:
            altitude = 1300
        records.append(format_b_record(36000 + 30 * i, lat, lon, altitude))
    return records


def make_fix(latitude, longitude, pressure_altitude=1000, timestamp_seconds=0, valid=True):
    """Build a Fix directly, bypassing the decoder"""
    hours, rest = divmod(timestamp_seconds % 86400, 3600)
    minutes, secs = divmod(rest, 60)
    return Fix(
        time=f"{hours:02d}:{minutes:02d}:{secs:02d}",
        timestamp_seconds=timestamp_seconds,
        latitude=latitude,
        longitude=longitude,
        valid=valid,
        pressure_altitude=pressure_altitude,
        gnss_altitude=pressure_altitude
    )


@pytest.fixture
def b_record():
    """Factory for B record lines"""
    return format_b_record


@pytest.fixture
def fix_factory():
    """Factory for Fix values"""
    return make_fix


@pytest.fixture
def sample_igc_content():
    """Sample IGC file content for testing"""
    return """AXCS001 SeeYou Navigator
HFDTE090525
HFPLTPILOTINCHARGE:Juan Gabriel
HFGTYGLIDERTYPE:JS3-15
HFGIDGLIDERID:CC-JUGA
HFCIDCOMPETITIONID:JG
HFRFWFIRMWAREVERSION:2.1
HFRHWHARDWAREVERSION:1.0
HFFTYFRTYPE:Naviter,Oudie
HFDTM100GPSDATUM:WGS-1984
B1214284605990N00805990EA0090200912
B1214294605995N00806000EA0090500915
B1214304606000N00806010EA0091000920
B1214314606005N00806020EA0091500925
B1214324606010N00806030EA0092000930
"""


@pytest.fixture
def scenario_igc_content():
    """One hour flight with two sharp turns and one climb excursion"""
    lines = ["AXXX001", "HFDTE230599", "HFPLTPILOT:Jane Doe"] + scenario_track()
    return "\n".join(lines) + "\n"


@pytest.fixture
def scenario_fixes(scenario_igc_content):
    from igc_parser import parseIgcText
    return parseIgcText(scenario_igc_content).fixes


@pytest.fixture
def straight_fixes():
    """50 fixes due north at constant altitude"""
    return tuple(
        make_fix(46.0 + 0.01 * i, 8.0, 1200, 36000 + 30 * i)
        for i in range(50)
    )


@pytest.fixture
def sample_igc_file(tmp_path, scenario_igc_content):
    """Create a temporary IGC file for testing"""
    igc_file = tmp_path / "test_flight.igc"
    igc_file.write_text(scenario_igc_content)
    return igc_file


@pytest.fixture
def sample_config_content():
    """Sample configuration file content"""
    return """[Defaults]
Level = high
Format = gpx
OutPath = .
MaxPayload = 1450
"""


@pytest.fixture
def sample_config_file(tmp_path, sample_config_content):
    """Create a temporary config file for testing"""
    config_file = tmp_path / "test_config.conf"
    config_file.write_text(sample_config_content)
    return config_file


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory"""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def mock_cli_args(sample_config_file, temp_output_dir):
    """Mock command-line arguments for testing"""
    class MockArgs:
        def __init__(self):
            self.config = str(sample_config_file)
            self.level = None
            self.format = None
            self.output = str(temp_output_dir)
            self.trackfile = []

    return MockArgs()
