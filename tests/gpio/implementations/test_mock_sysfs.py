"""
Mock Sysfs Tests

The mock stands in for the kernel in most session tests, so its kernel-like
behavior is checked here on its own.

To run:
    pytest tests/gpio/implementations/test_mock_sysfs.py -v
"""

import pytest

from sysfs_gpio.constants import Direction, Level, NumberingMode
from sysfs_gpio.errors import ExportTimeoutError, SysfsIOError


@pytest.fixture
def pin7(board_table):
    return board_table.channels_for(NumberingMode.BOARD)[7]


@pytest.mark.unit
def test_export_creates_input_line(mock_sysfs, pin7):
    mock_sysfs.export(pin7)

    assert mock_sysfs.is_exported(pin7)
    assert mock_sysfs.get_line_info(pin7) == {"direction": "in", "value": "0"}
    assert mock_sysfs.writes == [("export", "454")]


@pytest.mark.unit
def test_export_twice_writes_once(mock_sysfs, pin7):
    mock_sysfs.export(pin7)
    mock_sysfs.export(pin7)

    assert mock_sysfs.writes == [("export", "454")]


@pytest.mark.unit
def test_stalled_export_times_out(mock_sysfs, pin7):
    mock_sysfs.stall_exports = True

    with pytest.raises(ExportTimeoutError):
        mock_sysfs.export(pin7)


@pytest.mark.unit
def test_unexport_is_idempotent(mock_sysfs, pin7):
    mock_sysfs.export(pin7)
    mock_sysfs.unexport(pin7)
    mock_sysfs.unexport(pin7)

    assert mock_sysfs.writes.count(("unexport", "454")) == 1
    assert mock_sysfs.reported_direction(pin7) is None


@pytest.mark.unit
def test_write_value_to_input_is_refused(mock_sysfs, pin7):
    mock_sysfs.export(pin7)

    with pytest.raises(SysfsIOError):
        mock_sysfs.write_value(pin7, "1")


@pytest.mark.unit
def test_external_level_is_read_back(mock_sysfs, pin7):
    mock_sysfs.export(pin7)
    mock_sysfs.set_input_level(pin7, Level.HIGH)

    assert mock_sysfs.read_value(pin7) == "1"


@pytest.mark.unit
def test_reported_direction_tracks_writes(mock_sysfs, pin7):
    mock_sysfs.export(pin7)
    assert mock_sysfs.reported_direction(pin7) == Direction.IN

    mock_sysfs.write_direction(pin7, "out")
    assert mock_sysfs.reported_direction(pin7) == Direction.OUT


@pytest.mark.unit
def test_missing_interface(mock_sysfs):
    mock_sysfs.present = False

    with pytest.raises(SysfsIOError):
        mock_sysfs.has_write_access()
