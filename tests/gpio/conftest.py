"""
Test Configuration and Fixtures

Shared pytest fixtures for the sysfs_gpio tests.

To use pytest:
    pip install -e ".[test]"
    pytest tests/gpio/
"""

import pytest

from sysfs_gpio.constants import NumberingMode
from sysfs_gpio.controllers.gpio_session import GPIOSession
from sysfs_gpio.implementations.mock_sysfs import MockSysfs
from sysfs_gpio.models.board_table import BoardDescriptorTable
from sysfs_gpio.models.channel_descriptor import ChannelDescriptor
from sysfs_gpio.utils.sysfs_utils import safe_gpio_cleanup

PWM_CHIP_DIR = "/sys/devices/platform/3280000.pwm/pwm/pwmchip0"


def make_descriptor(channel, global_gpio, name, gpio=True, pwm=False):
    """Build a descriptor on chip 2200000.gpio (base 348)"""
    return ChannelDescriptor(
        channel=channel,
        gpio_chip_dir="/sys/devices/platform/2200000.gpio" if gpio else "",
        chip_gpio=global_gpio - 348,
        global_gpio=global_gpio,
        global_gpio_name=name,
        pwm_chip_dir=PWM_CHIP_DIR if pwm else None,
        pwm_id=0 if pwm else None,
    )


# =============================================================================
# BOARD FIXTURES
# =============================================================================

@pytest.fixture
def board_table():
    """
    Small board: BOARD 7/11/15 are GPIOs (15 also PWM), BOARD 27 is a
    PWM-only pin. BCM and TEGRA_SOC map to the same lines; no CVM channels.
    """
    pin7 = dict(global_gpio=454, name="PQ.06")
    pin11 = dict(global_gpio=460, name="PR.04")
    pin15 = dict(global_gpio=433, name="PN.01", pwm=True)

    return BoardDescriptorTable(
        "TEST_BOARD",
        {
            NumberingMode.BOARD: {
                7: make_descriptor(7, **pin7),
                11: make_descriptor(11, **pin11),
                15: make_descriptor(15, **pin15),
                27: make_descriptor(27, 0, "", gpio=False, pwm=True),
            },
            NumberingMode.BCM: {
                4: make_descriptor(4, **pin7),
                17: make_descriptor(17, **pin11),
                22: make_descriptor(22, **pin15),
            },
            NumberingMode.TEGRA_SOC: {
                "GP66": make_descriptor("GP66", **pin7),
                "GP72_UART1_RTS_N": make_descriptor("GP72_UART1_RTS_N", **pin11),
            },
        },
    )


# =============================================================================
# SYSFS FIXTURES
# =============================================================================

@pytest.fixture
def mock_sysfs():
    """
    Provide a fresh MockSysfs for each test.

    Export timeout is kept short so stalled-export tests finish quickly.
    """
    return MockSysfs(export_timeout=0.05, poll_interval=0.005)


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def session(board_table, mock_sysfs):
    """GPIOSession over the mock sysfs, no numbering mode selected"""
    gpio = GPIOSession(board_table, sysfs=mock_sysfs)
    yield gpio
    # Tests may leave the mock in a failing state
    mock_sysfs.failing_nodes.clear()
    if gpio.getmode() is not None:
        safe_gpio_cleanup(gpio)


@pytest.fixture
def board_session(session):
    """GPIOSession already in BOARD mode"""
    session.setmode(NumberingMode.BOARD)
    return session


@pytest.fixture
def line_watcher():
    """
    Line watcher double recording unwatch() calls.

    Usage:
        session = GPIOSession(table, sysfs=mock, line_watcher=line_watcher)
    """
    from sysfs_gpio.interfaces.line_watcher_interface import LineWatcherInterface

    class RecordingWatcher(LineWatcherInterface):
        def __init__(self):
            self.watched = []
            self.unwatched = []

        def watch(self, descriptor, edge, callback, bouncetime_ms=0):
            self.watched.append(descriptor.channel)

        def unwatch(self, descriptor):
            self.unwatched.append(descriptor.channel)

    return RecordingWatcher()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configure pytest with custom markers.

        pytest -m unit          # Only unit tests
        pytest -m integration   # Only integration tests
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (may be slower)")
    config.addinivalue_line("markers", "hardware: Tests requiring a real sysfs GPIO interface")
