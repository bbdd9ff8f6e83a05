"""
GPIO Constants

This file centralizes the enumerations and sysfs node names used throughout
the sysfs_gpio package. Tunable values (sysfs root, export timeout) come from
config/settings.py so they can be changed per machine through .env.

Each concern gets its own Enum: numbering modes, directions, levels and pull
resistor modes never share a value space.
"""

from enum import Enum

from config.settings import (
    GPIO_EXPORT_POLL_INTERVAL,
    GPIO_EXPORT_TIMEOUT,
    GPIO_SYSFS_DEVICE_ROOTS,
    GPIO_SYSFS_ROOT,
)

# =============================================================================
# SYSFS LAYOUT
# =============================================================================
# Import from central config.settings to maintain single source of truth

DEFAULT_SYSFS_ROOT = GPIO_SYSFS_ROOT
DEFAULT_DEVICE_ROOTS = list(GPIO_SYSFS_DEVICE_ROOTS)

# Control nodes under the sysfs root
EXPORT_NODE = "export"
UNEXPORT_NODE = "unexport"

# Per-line nodes under {root}/{exported-name}/
DIRECTION_NODE = "direction"
VALUE_NODE = "value"

# Strings written to / read from the direction node
DIRECTION_IN = "in"
DIRECTION_OUT = "out"


# =============================================================================
# EXPORT TIMING
# =============================================================================
# The kernel creates gpioN/value asynchronously after an export write

EXPORT_POLL_INTERVAL = GPIO_EXPORT_POLL_INTERVAL
EXPORT_TIMEOUT = GPIO_EXPORT_TIMEOUT


# =============================================================================
# ENUMS
# =============================================================================


class NumberingMode(Enum):
    """How callers name channels"""

    BOARD = "BOARD"  # Physical header pin number
    BCM = "BCM"  # Broadcom-compatible SOC channel number
    TEGRA_SOC = "TEGRA_SOC"  # Tegra SOC pin name
    CVM = "CVM"  # Compute module connector signal name


class Direction(Enum):
    """Channel direction, as configured by this process or reported by sysfs"""

    UNKNOWN = "unknown"  # Not set up yet
    IN = "in"
    OUT = "out"
    HARD_PWM = "hard_pwm"  # Driven by a PWM controller, read-only here


class Level(Enum):
    """Digital pin levels"""

    LOW = 0
    HIGH = 1


class PullMode(Enum):
    """Pull resistor configuration (accepted by setup() but not applied)"""

    OFF = "off"
    UP = "up"
    DOWN = "down"


class EdgeDetection(Enum):
    """Edges a line watcher can report"""

    RISING = "rising"  # LOW -> HIGH transition
    FALLING = "falling"  # HIGH -> LOW transition
    BOTH = "both"  # Any transition


# Directions a caller may request from setup()
SETUP_DIRECTIONS = (Direction.IN, Direction.OUT)

# Directions under which input() may read a channel
READABLE_DIRECTIONS = (Direction.IN, Direction.OUT)
