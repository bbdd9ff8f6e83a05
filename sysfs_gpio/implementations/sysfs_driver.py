"""
Sysfs GPIO Driver

Concrete implementation of SysfsInterface that reads and writes the kernel's
GPIO pseudo-filesystem (/sys/class/gpio by default).

Every operation opens its node fresh, seeks to the start, does one read or
write and closes it again. Nothing is kept open between calls, so changes
made by other processes in between are always seen.
"""

import logging
import os
from typing import Optional

from sysfs_gpio.constants import (
    DEFAULT_SYSFS_ROOT,
    DIRECTION_IN,
    DIRECTION_NODE,
    DIRECTION_OUT,
    EXPORT_NODE,
    EXPORT_POLL_INTERVAL,
    EXPORT_TIMEOUT,
    UNEXPORT_NODE,
    VALUE_NODE,
    Direction,
)
from sysfs_gpio.errors import ExportTimeoutError, SysfsIOError
from sysfs_gpio.interfaces.sysfs_interface import SysfsInterface
from sysfs_gpio.models.channel_descriptor import ChannelDescriptor
from sysfs_gpio.utils.sysfs_utils import wait_for_path


class SysfsDriver(SysfsInterface):
    """
    Sysfs GPIO backend for real hardware.

    Args:
        root: GPIO class directory (default from settings)
        export_timeout: Maximum wait for an exported line's value node
        poll_interval: Sleep between value node checks after export
    """

    def __init__(
        self,
        root: str = DEFAULT_SYSFS_ROOT,
        export_timeout: float = EXPORT_TIMEOUT,
        poll_interval: float = EXPORT_POLL_INTERVAL,
    ):
        self.logger = logging.getLogger(__name__)
        self.root = root
        self.export_timeout = export_timeout
        self.poll_interval = poll_interval

        self.logger.debug(f"Sysfs driver using {self.root}")

    # =========================================================================
    # PATHS
    # =========================================================================

    def _line_dir(self, descriptor: ChannelDescriptor) -> str:
        return os.path.join(self.root, descriptor.global_gpio_name)

    def _line_node(self, descriptor: ChannelDescriptor, node: str) -> str:
        return os.path.join(self._line_dir(descriptor), node)

    def _pwm_node(self, descriptor: ChannelDescriptor) -> str:
        return os.path.join(descriptor.pwm_chip_dir, f"pwm{descriptor.pwm_id}")

    # =========================================================================
    # RAW NODE ACCESS
    # =========================================================================

    def _write(self, path: str, data: str) -> None:
        try:
            with open(path, "w") as f:
                f.seek(0)
                f.write(data)
        except OSError as e:
            raise SysfsIOError(f"Failed to write {data!r} to {path}: {e}") from e

    def _read(self, path: str) -> str:
        try:
            with open(path, "r") as f:
                f.seek(0)
                return f.read().strip()
        except OSError as e:
            raise SysfsIOError(f"Failed to read {path}: {e}") from e

    # =========================================================================
    # SysfsInterface
    # =========================================================================

    def has_write_access(self) -> bool:
        export_path = os.path.join(self.root, EXPORT_NODE)
        unexport_path = os.path.join(self.root, UNEXPORT_NODE)

        for path in (export_path, unexport_path):
            if not os.path.exists(path):
                raise SysfsIOError(f"Sysfs GPIO interface not found: {path} is missing")

        return os.access(export_path, os.W_OK) and os.access(unexport_path, os.W_OK)

    def export(self, descriptor: ChannelDescriptor) -> None:
        value_path = self._line_node(descriptor, VALUE_NODE)

        if not os.path.exists(value_path):
            self._write(os.path.join(self.root, EXPORT_NODE), str(descriptor.global_gpio))
            self.logger.debug(f"Exported {descriptor.global_gpio_name}")

        # The kernel creates the line's nodes asynchronously
        if not wait_for_path(value_path, self.export_timeout, self.poll_interval):
            raise ExportTimeoutError(
                f"{value_path} did not appear within {self.export_timeout}s "
                f"after exporting GPIO {descriptor.global_gpio}"
            )

    def unexport(self, descriptor: ChannelDescriptor) -> None:
        if not os.path.exists(self._line_dir(descriptor)):
            return

        self._write(os.path.join(self.root, UNEXPORT_NODE), str(descriptor.global_gpio))
        self.logger.debug(f"Unexported {descriptor.global_gpio_name}")

    def write_direction(self, descriptor: ChannelDescriptor, direction: str) -> None:
        self._write(self._line_node(descriptor, DIRECTION_NODE), direction)

    def write_value(self, descriptor: ChannelDescriptor, value: str) -> None:
        self._write(self._line_node(descriptor, VALUE_NODE), value)

    def read_value(self, descriptor: ChannelDescriptor) -> str:
        return self._read(self._line_node(descriptor, VALUE_NODE))

    def reported_direction(self, descriptor: ChannelDescriptor) -> Optional[Direction]:
        if descriptor.is_pwm and descriptor.pwm_id is not None:
            if os.path.exists(self._pwm_node(descriptor)):
                return Direction.HARD_PWM

        if not os.path.exists(self._line_dir(descriptor)):
            return None

        direction = self._read(self._line_node(descriptor, DIRECTION_NODE))
        if direction == DIRECTION_IN:
            return Direction.IN
        if direction == DIRECTION_OUT:
            return Direction.OUT
        return None
