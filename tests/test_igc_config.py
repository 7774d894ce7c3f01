"""
Tests for igc_config.py configuration handling
"""
import pytest
from pathlib import Path
from igc_config import Config, ConfigParser
from igc_model import DetailLevel, ExportFormat


class MockArgs:
    def __init__(self, config=None, level=None, format=None, output=None):
        self.config = config
        self.level = level
        self.format = format
        self.output = output


class TestConfigParser:
    """Tests for ConfigParser"""

    def test_find_config_file_from_cli(self, sample_config_file):
        parser = ConfigParser()
        assert parser.find_config_file(str(sample_config_file)) == str(sample_config_file)

    def test_find_config_file_in_working_directory(self, tmp_path, monkeypatch, sample_config_content):
        (tmp_path / 'igc2route.conf').write_text(sample_config_content)
        monkeypatch.chdir(tmp_path)
        parser = ConfigParser()
        found = parser.find_config_file(None)
        assert Path(found).name == 'igc2route.conf'

    def test_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        parser = ConfigParser()
        assert parser.load_config_file(str(tmp_path / 'missing.conf')) is False

    def test_get_default_settings(self, sample_config_file):
        parser = ConfigParser()
        assert parser.load_config_file(str(sample_config_file))
        defaults = parser.get_default_settings()
        assert defaults['level'] == 'high'
        assert defaults['format'] == 'gpx'
        assert defaults['maxpayload'] == 1450.0


class TestConfig:
    """Tests for Config"""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config(MockArgs())
        assert config.level is DetailLevel.MEDIUM
        assert config.format is ExportFormat.CSV
        assert config.outPath == '.'
        assert config.max_payload == 1500

    def test_values_from_file(self, sample_config_file):
        config = Config(MockArgs(config=str(sample_config_file)))
        assert config.level is DetailLevel.HIGH
        assert config.format is ExportFormat.GPX
        assert config.max_payload == 1450

    def test_cli_overrides_file(self, sample_config_file, temp_output_dir):
        config = Config(MockArgs(
            config=str(sample_config_file), level='low', format='csv', output=str(temp_output_dir)
        ))
        assert config.level is DetailLevel.LOW
        assert config.format is ExportFormat.CSV
        assert config.outPath == str(temp_output_dir)

    def test_invalid_level_in_file(self, tmp_path):
        config_file = tmp_path / 'bad.conf'
        config_file.write_text("[Defaults]\nLevel = extreme\n")
        with pytest.raises(ValueError):
            Config(MockArgs(config=str(config_file)))

    def test_invalid_max_payload(self, tmp_path):
        config_file = tmp_path / 'bad.conf'
        config_file.write_text("[Defaults]\nMaxPayload = lots\n")
        with pytest.raises(ValueError):
            Config(MockArgs(config=str(config_file)))

    def test_output_path_next_to_input(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config(MockArgs())
        assert config.output_path_for('/data/flight.igc') == Path('/data/flight.csv')
        assert config.output_path_for('/data/flight.igc', ExportFormat.GPX) == Path('/data/flight.gpx')

    def test_output_path_in_folder(self, mock_cli_args, temp_output_dir):
        config = Config(mock_cli_args)
        assert config.output_path_for('/data/flight.igc') == temp_output_dir / 'flight.gpx'
