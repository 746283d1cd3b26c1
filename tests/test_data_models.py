"""
Tests for dump configuration and rows.
"""

import dataclasses
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from rxd.data_models import DumpConfig, DumpLine
from rxd.errors import ConfigError


def test_defaults():
    config = DumpConfig()
    assert config.line_width == 16
    assert config.group_length == 1
    assert config.line_limit is None
    assert config.show_control_chars is False


@pytest.mark.parametrize('kwargs', [
    {'line_width': 0},
    {'group_length': 0},
    {'line_limit': 0},
    {'line_width': -4},
    {'line_width': True},
    {'line_limit': '3'},
])
def test_invalid_values(kwargs):
    """Test that bad values raise ConfigError."""
    with pytest.raises(ConfigError):
        DumpConfig(**kwargs)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        DumpConfig(line_width=0)


def test_config_is_immutable():
    config = DumpConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.line_width = 8


@pytest.mark.parametrize('width, group, groups, hex_width', [
    (16, 1, 16, 47),
    (8, 4, 2, 17),
    (10, 4, 3, 22),
    (4, 8, 1, 8),
])
def test_hex_width(width, group, groups, hex_width):
    config = DumpConfig(line_width=width, group_length=group)
    assert config.groups_per_line == groups
    assert config.hex_width == hex_width


def test_dump_line_str():
    line = DumpLine(offset=0, data=b'AB', offset_text='00000000', hex_text='41 42', char_text='AB')
    assert str(line) == '00000000  41 42  AB'


if __name__ == '__main__':
    pytest.main([__file__])
