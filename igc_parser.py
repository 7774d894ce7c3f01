#!/usr/bin/env python3
"""
IGC file parser module for IGC route generator

This module handles parsing of IGC files including header metadata extraction
and decoding of the fixed-column B records into fixes. Malformed records are
dropped without aborting the parse.
"""

import re
import logging
from dataclasses import replace
from datetime import date
from typing import TextIO, Iterable, List, Optional, Tuple

from igc_model import Fix, FlightHeader, IgcFlight
from igc_stats import FlightStatistics
from igc_constants import (
    IGC_RECORD_POSITION,
    IGC_RECORD_HEADER,
    IGC_RECORD_LOGGER,
    IGC_VALID_FIX,
    IGC_NORTH,
    IGC_EAST,
    IGC_HEADER_DATE,
    IGC_HEADER_PILOT,
    IGC_HEADER_GLIDER_TYPE,
    IGC_HEADER_GLIDER_ID,
    IGC_HEADER_COMPETITION_ID,
    IGC_HEADER_FIRMWARE,
    IGC_HEADER_HARDWARE,
    IGC_HEADER_LOGGER_TYPE,
    IGC_HEADER_DATUM,
    IGC_HEADER_SOURCES,
    IGC_HEADER_TAG_LENGTH,
    IGC_CENTURY,
    B_RECORD_MIN_LENGTH,
    B_TIME,
    B_LAT_DEGREES,
    B_LAT_MINUTES,
    B_LAT_THOUSANDTHS,
    B_LAT_HEMISPHERE,
    B_LON_DEGREES,
    B_LON_MINUTES,
    B_LON_THOUSANDTHS,
    B_LON_HEMISPHERE,
    B_VALIDITY,
    B_PRESSURE_ALTITUDE,
    B_GNSS_ALTITUDE,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE
)

# Configure logger
logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(IGC_HEADER_DATE + r'(?:DATE:)?(\d{2})(\d{2})(\d{2})')
_HEADER_DEFAULTS = FlightHeader()


class IgcHeaderParser:
    """
    Parses header records from IGC files and extracts metadata.
    The first line found for a field wins; later duplicates are ignored.
    """

    # Three-letter codes that may come from the recorder (HF) or an observer (HO)
    SOURCE_FIELDS = {
        IGC_HEADER_PILOT: 'pilot',
        IGC_HEADER_GLIDER_TYPE: 'glider_type',
        IGC_HEADER_GLIDER_ID: 'glider_reg',
        IGC_HEADER_COMPETITION_ID: 'competition_id',
    }

    RECORDER_FIELDS = {
        IGC_HEADER_FIRMWARE: 'firmware_version',
        IGC_HEADER_HARDWARE: 'hardware_version',
        IGC_HEADER_LOGGER_TYPE: 'logger_type',
        IGC_HEADER_DATUM: 'gps_datum',
    }

    @classmethod
    def field_for_tag(cls, tag: str) -> Optional[str]:
        """Map a five character header tag (e.g. HFPLT) to a FlightHeader field"""
        if tag in cls.RECORDER_FIELDS:
            return cls.RECORDER_FIELDS[tag]
        if tag[:2] in IGC_HEADER_SOURCES:
            return cls.SOURCE_FIELDS.get(tag[2:])
        return None

    @staticmethod
    def header_value(line: str) -> str:
        """Text after the first colon, empty when the line has none"""
        rest = line[IGC_HEADER_TAG_LENGTH:]
        if ':' not in rest:
            return ''
        return rest.split(':', 1)[1].strip()

    @staticmethod
    def parse_date(line: str) -> Optional[str]:
        """Extract a DDMMYY date as YYYY-MM-DD"""
        match = _DATE_PATTERN.match(line)
        if not match:
            logger.warning(f"Invalid date format in IGC header: {line}")
            return None

        day, month, year = (int(group) for group in match.groups())
        year += IGC_CENTURY
        try:
            return date(year, month, day).isoformat()
        except ValueError:
            logger.warning(f"Invalid date in IGC header: {line}")
            return None

    @staticmethod
    def set_once(header: FlightHeader, field_name: str, value: Optional[str]) -> FlightHeader:
        """Return a header with the field set, unless it was already filled"""
        if not value:
            return header
        if getattr(header, field_name) != getattr(_HEADER_DEFAULTS, field_name):
            return header
        return replace(header, **{field_name: value})

    def parse_header_line(self, line: str, header: FlightHeader) -> FlightHeader:
        """
        Parse a single header line and return the updated FlightHeader.
        Unrecognized lines leave the header unchanged.
        """
        if line.startswith(IGC_RECORD_LOGGER):
            return self.set_once(header, 'logger_id', line[1:].strip())

        if len(line) < IGC_HEADER_TAG_LENGTH or line[0] != IGC_RECORD_HEADER:
            return header

        if line.startswith(IGC_HEADER_DATE):
            if header.date is not None:
                return header
            return self.set_once(header, 'date', self.parse_date(line))

        field_name = self.field_for_tag(line[:IGC_HEADER_TAG_LENGTH])
        if field_name is None:
            return header

        return self.set_once(header, field_name, self.header_value(line))


class IgcFixDecoder:
    """
    Decodes position records (B records) from IGC files.
    Extracts time, coordinates, validity and altitude data.
    """

    @staticmethod
    def field(line: str, layout: Tuple[int, int]) -> str:
        offset, length = layout
        return line[offset:offset + length]

    @classmethod
    def parse_time(cls, line: str) -> Tuple[str, int]:
        """
        Extract time from a B record
        Returns tuple of (HH:MM:SS, seconds since midnight)
        """
        hhmmss = cls.field(line, B_TIME)
        hour = int(hhmmss[0:2])
        minute = int(hhmmss[2:4])
        second = int(hhmmss[4:6])

        time = f"{hour:02d}:{minute:02d}:{second:02d}"
        return time, hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second

    @classmethod
    def parse_latitude(cls, line: str) -> float:
        """Extract latitude from a B record"""
        lat_deg = int(cls.field(line, B_LAT_DEGREES))
        lat_min = int(cls.field(line, B_LAT_MINUTES))
        lat_frac = int(cls.field(line, B_LAT_THOUSANDTHS)) / 1000
        sign = 1 if cls.field(line, B_LAT_HEMISPHERE) == IGC_NORTH else -1

        return sign * (lat_deg + (lat_min + lat_frac) / 60)

    @classmethod
    def parse_longitude(cls, line: str) -> float:
        """Extract longitude from a B record"""
        lon_deg = int(cls.field(line, B_LON_DEGREES))
        lon_min = int(cls.field(line, B_LON_MINUTES))
        lon_frac = int(cls.field(line, B_LON_THOUSANDTHS)) / 1000
        sign = 1 if cls.field(line, B_LON_HEMISPHERE) == IGC_EAST else -1

        return sign * (lon_deg + (lon_min + lon_frac) / 60)

    @classmethod
    def parse_altitude(cls, line: str) -> Tuple[int, int]:
        """
        Extract pressure and GNSS altitude from a B record
        Returns tuple of (pressure_altitude, gnss_altitude) in meters
        """
        return int(cls.field(line, B_PRESSURE_ALTITUDE)), int(cls.field(line, B_GNSS_ALTITUDE))

    def decode_fix(self, line: str) -> Optional[Fix]:
        """
        Decode a complete B record.
        Returns None for records that are too short or carry non-numeric fields.
        """
        if len(line) < B_RECORD_MIN_LENGTH:
            logger.debug(f"Skipping short B record ({len(line)} chars): {line}")
            return None

        try:
            time, timestamp = self.parse_time(line)
            latitude = self.parse_latitude(line)
            longitude = self.parse_longitude(line)
            pressure_altitude, gnss_altitude = self.parse_altitude(line)
        except ValueError:
            logger.debug(f"Skipping malformed B record: {line}")
            return None

        return Fix(
            time=time,
            timestamp_seconds=timestamp,
            latitude=latitude,
            longitude=longitude,
            valid=self.field(line, B_VALIDITY) == IGC_VALID_FIX,
            pressure_altitude=pressure_altitude,
            gnss_altitude=gnss_altitude
        )


class IgcParser:
    """
    Main parser class for IGC files. Orchestrates the parsing process
    using specialized components.
    """

    def __init__(self):
        self.header_parser = IgcHeaderParser()
        self.fix_decoder = IgcFixDecoder()
        self.statistics = FlightStatistics()

    def parse_lines(self, lines: Iterable[str]) -> Tuple[FlightHeader, Tuple[Fix, ...]]:
        """
        Single pass over all lines. Header lines may appear anywhere,
        task (C) and other records are ignored.
        """
        header = FlightHeader()
        fixes: List[Fix] = []
        skipped = 0

        for line in lines:
            line = line.strip()
            if not line:
                continue

            record_type = line[0]

            if record_type == IGC_RECORD_POSITION:
                fix = self.fix_decoder.decode_fix(line)
                if fix is None:
                    skipped += 1
                else:
                    fixes.append(fix)

            elif record_type in (IGC_RECORD_HEADER, IGC_RECORD_LOGGER):
                header = self.header_parser.parse_header_line(line, header)

        logger.info(f"Parsed {len(fixes)} fixes ({skipped} malformed records skipped)")
        return header, tuple(fixes)

    def parse_text(self, igc_text: str) -> IgcFlight:
        """
        Parse the raw content of an IGC file into an IgcFlight.
        Main entry point for IGC parsing.
        """
        header, fixes = self.parse_lines(igc_text.splitlines())
        return IgcFlight(header=header, fixes=fixes, stats=self.statistics.calculate(fixes))

    def parse_file(self, track_file: TextIO) -> IgcFlight:
        """Parse an already opened IGC file"""
        content = track_file.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8', errors='ignore')
        return self.parse_text(content)


# Public functions

def decodeFix(line: str) -> Optional[Fix]:
    """Decode a single B record, or None if it is malformed"""
    return IgcFixDecoder().decode_fix(line)

def parseIgcText(igc_text: str) -> IgcFlight:
    """Parse IGC text into an IgcFlight"""
    return IgcParser().parse_text(igc_text)

def parseIgcFile(track_file: TextIO) -> IgcFlight:
    """Parse an open IGC file into an IgcFlight"""
    return IgcParser().parse_file(track_file)
