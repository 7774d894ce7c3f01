#!/usr/bin/env python3
"""
Configuration handling for IGC route generator

This module provides configuration management for the route generator.
It handles config file loading and command line argument overrides.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any

from igc_model import DetailLevel, ExportFormat
from igc_utils import numberOrString
from igc_constants import (
    DEFAULT_LEVEL,
    DEFAULT_FORMAT,
    DEFAULT_OUT_PATH,
    MAX_PAYLOAD_CHARS,
    CONFIG_SECTION_DEFAULTS,
    CONFIG_FILE_NAMES
)

# Configure logger
logger = logging.getLogger(__name__)


class ConfigParser:
    """
    Handles parsing of configuration files.
    Separates the parsing logic from the configuration storage.
    """

    def __init__(self):
        """Initialize the config parser"""
        self.parser = configparser.RawConfigParser()

    def find_config_file(self, cli_path: Optional[str] = None) -> Optional[str]:
        """Find a configuration file to use"""
        if cli_path and os.path.isfile(cli_path):
            logger.info(f"Using configuration file: {cli_path}")
            return cli_path

        # Look in standard locations
        paths = ('.', os.path.dirname(os.path.abspath(__file__)))

        for path in paths:
            for file in CONFIG_FILE_NAMES:
                full_path = os.path.join(path, file)
                if Path(full_path).is_file():
                    logger.info(f"Found configuration file: {full_path}")
                    return full_path

        logger.debug("No configuration file found, using defaults")
        return None

    def load_config_file(self, file_path: Optional[str] = None) -> bool:
        """Load configuration from file"""
        config_file = self.find_config_file(file_path)
        if not config_file:
            return False

        try:
            self.parser.read(config_file)
            return True
        except configparser.Error as e:
            logger.error(f"Error reading config file: {e}")
            return False

    def get_default_settings(self) -> Dict[str, Any]:
        """Get default settings from configuration"""
        defaults = {}

        if CONFIG_SECTION_DEFAULTS in self.parser:
            section = self.parser[CONFIG_SECTION_DEFAULTS]

            # Copy all values from defaults section
            for key, value in section.items():
                defaults[key] = value

            # Convert numeric values
            if 'maxpayload' in defaults:
                defaults['maxpayload'] = numberOrString(defaults['maxpayload'])

        return defaults


class Config:
    """Main configuration class for IGC route generator"""

    def __init__(self, cli_args):
        """Initialize with command line arguments"""
        self.parser = ConfigParser()
        self.cli_args = cli_args

        # Initialize defaults
        self.level = DetailLevel.parse(DEFAULT_LEVEL)
        self.format = ExportFormat.parse(DEFAULT_FORMAT)
        self.out_path = DEFAULT_OUT_PATH
        self.max_payload = MAX_PAYLOAD_CHARS

        # Load configuration
        self._load_config()

    def _cli_value(self, name: str) -> Optional[str]:
        return getattr(self.cli_args, name, None)

    def _load_config(self):
        """Load and process configuration"""
        # Load config file
        self.parser.load_config_file(self._cli_value('config'))

        # Get default settings
        defaults = self.parser.get_default_settings()

        # Apply CLI arguments (override config file)
        if self._cli_value('level'):
            self.level = DetailLevel.parse(self._cli_value('level'))
        elif 'level' in defaults:
            self.level = DetailLevel.parse(defaults['level'])

        if self._cli_value('format'):
            self.format = ExportFormat.parse(self._cli_value('format'))
        elif 'format' in defaults:
            self.format = ExportFormat.parse(defaults['format'])

        if self._cli_value('output'):
            self.out_path = self._cli_value('output')
        elif 'outpath' in defaults:
            self.out_path = defaults['outpath']

        if 'maxpayload' in defaults:
            max_payload = defaults['maxpayload']
            if not isinstance(max_payload, float) or max_payload <= 0:
                raise ValueError(f"Invalid MaxPayload value: {max_payload}")
            self.max_payload = int(max_payload)

    @property
    def outPath(self) -> str:
        """Get output path"""
        return self.out_path

    def output_path_for(self, in_path: str, fmt: Optional[ExportFormat] = None) -> Path:
        """Output file for an input log, next to it unless an output folder is configured"""
        out_path = Path(in_path).with_suffix((fmt or self.format).suffix)
        if self.outPath and self.outPath != DEFAULT_OUT_PATH:
            out_path = Path(self.outPath) / out_path.name
        return out_path
