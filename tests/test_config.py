"""Tests for settings loading and cutoff policies."""
from datetime import date
from pathlib import Path

import pytest

from cookielog_core.config import DEFAULT_HEADER, CutoffPolicy, Settings, load_settings
from cookielog_core.exceptions import ConfigError


class TestCutoffPolicy:
    """Test boundary semantics of each policy."""

    def test_inclusive_keeps_cutoff_day(self):
        cutoff = date(2022, 1, 1)
        assert not CutoffPolicy.INCLUSIVE.stops_at(date(2022, 1, 1), cutoff)
        assert CutoffPolicy.INCLUSIVE.stops_at(date(2021, 12, 31), cutoff)
        assert not CutoffPolicy.INCLUSIVE.stops_at(date(2022, 1, 2), cutoff)

    def test_exclusive_drops_cutoff_day(self):
        cutoff = date(2022, 1, 1)
        assert CutoffPolicy.EXCLUSIVE.stops_at(date(2022, 1, 1), cutoff)
        assert CutoffPolicy.EXCLUSIVE.stops_at(date(2021, 12, 31), cutoff)
        assert not CutoffPolicy.EXCLUSIVE.stops_at(date(2022, 1, 2), cutoff)

    def test_cutoff_for_target(self):
        assert CutoffPolicy.INCLUSIVE.cutoff_for(date(2022, 1, 1)) == date(2022, 1, 1)
        assert CutoffPolicy.EXCLUSIVE.cutoff_for(date(2022, 1, 1)) == date(2021, 12, 31)

    def test_all_values(self):
        assert CutoffPolicy.all_values() == ['inclusive', 'exclusive']


class TestSettings:
    """Test settings validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.expected_header == DEFAULT_HEADER
        assert settings.cutoff_policy is CutoffPolicy.INCLUSIVE
        assert settings.log_level == 'WARNING'

    def test_from_mapping(self):
        settings = Settings.from_mapping({
            'expected_header': [' id ', 'ts'],
            'cutoff_policy': 'EXCLUSIVE',
            'log_level': 'debug',
        })
        assert settings.expected_header == ('id', 'ts')
        assert settings.cutoff_policy is CutoffPolicy.EXCLUSIVE
        assert settings.log_level == 'DEBUG'

    @pytest.mark.parametrize('raw', [
        {'unknown': 1},
        {'expected_header': 'cookie,timestamp'},
        {'expected_header': []},
        {'expected_header': ['cookie', '']},
        {'cutoff_policy': 'sometimes'},
        {'log_level': 'LOUD'},
    ])
    def test_invalid_values(self, raw):
        with pytest.raises(ConfigError):
            Settings.from_mapping(raw)


class TestLoadSettings:
    """Test reading settings from YAML."""

    def test_none_gives_defaults(self):
        assert load_settings(None) == Settings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('', encoding='utf-8')
        assert load_settings(path) == Settings()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('expected_header: [id, ts]\ncutoff_policy: exclusive\n', encoding='utf-8')
        settings = load_settings(path)
        assert settings.expected_header == ('id', 'ts')
        assert settings.cutoff_policy is CutoffPolicy.EXCLUSIVE

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_settings(tmp_path / 'missing.yaml')

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('expected_header: [id, ts\n', encoding='utf-8')
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('- cookie\n- timestamp\n', encoding='utf-8')
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_example_config_loads(self):
        root = Path(__file__).resolve().parents[1]
        settings = load_settings(root / 'config' / 'cookielog.example.yaml')
        assert settings == Settings()
