"""
sysfs_gpio

GPIO access for single-board computers through the Linux sysfs interface
(/sys/class/gpio), addressed by board pin numbers instead of kernel line ids.

Public API:
    - GPIOSession: setmode / setup / input / output / cleanup
    - GPIOFactory, create_session: Build a session (real or mock sysfs)
    - BoardConfig, load_board_table: YAML board descriptions
    - NumberingMode, Direction, Level, PullMode: Enumerations
    - GPIOError and subclasses: Error taxonomy

Usage:
    from sysfs_gpio import Direction, Level, NumberingMode, create_session

    with create_session() as gpio:
        gpio.setmode(NumberingMode.BOARD)
        gpio.setup(7, Direction.OUT, initial=Level.HIGH)
        print(gpio.input(7))
"""

from sysfs_gpio.board_config import BoardConfig, load_board_table
from sysfs_gpio.constants import Direction, EdgeDetection, Level, NumberingMode, PullMode
from sysfs_gpio.controllers.gpio_session import GPIOSession
from sysfs_gpio.errors import (
    BoardConfigError,
    ExportTimeoutError,
    GPIOError,
    GPIOPermissionError,
    InvalidArgumentError,
    InvalidChannelError,
    InvalidDirectionError,
    InvalidModeError,
    LengthMismatchError,
    ModeConflictError,
    ModeNotSetError,
    NotGPIOCapableError,
    NotPWMCapableError,
    NotSetUpError,
    SysfsIOError,
)
from sysfs_gpio.factory import GPIOFactory, create_session
from sysfs_gpio.interfaces import LineWatcherInterface, SysfsInterface
from sysfs_gpio.models import BoardDescriptorTable, ChannelDescriptor

__all__ = [
    "BoardConfig",
    "BoardConfigError",
    "BoardDescriptorTable",
    "ChannelDescriptor",
    "Direction",
    "EdgeDetection",
    "ExportTimeoutError",
    "GPIOError",
    "GPIOFactory",
    "GPIOPermissionError",
    "GPIOSession",
    "InvalidArgumentError",
    "InvalidChannelError",
    "InvalidDirectionError",
    "InvalidModeError",
    "LengthMismatchError",
    "Level",
    "LineWatcherInterface",
    "ModeConflictError",
    "ModeNotSetError",
    "NotGPIOCapableError",
    "NotPWMCapableError",
    "NotSetUpError",
    "NumberingMode",
    "PullMode",
    "SysfsIOError",
    "SysfsInterface",
    "create_session",
    "load_board_table",
]
