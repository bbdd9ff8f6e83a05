"""
Mock Sysfs Implementation

Simulated kernel GPIO pseudo-filesystem for development and testing without
a board. Exports create lines in memory, directions and values are stored per
line, and every write is logged so tests can check exactly what reached the
"kernel".

This is a "Test Double" (specifically, a "Fake" - it has working logic but no
real hardware).
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from sysfs_gpio.constants import (
    DIRECTION_IN,
    DIRECTION_NODE,
    DIRECTION_OUT,
    EXPORT_NODE,
    EXPORT_POLL_INTERVAL,
    UNEXPORT_NODE,
    VALUE_NODE,
    Direction,
    Level,
)
from sysfs_gpio.errors import ExportTimeoutError, SysfsIOError
from sysfs_gpio.interfaces.sysfs_interface import SysfsInterface
from sysfs_gpio.models.channel_descriptor import ChannelDescriptor
from sysfs_gpio.utils.sysfs_utils import level_to_value, wait_for


class MockSysfs(SysfsInterface):
    """
    In-memory sysfs GPIO backend that mimics kernel behavior.

    Args:
        export_timeout: Maximum wait for a stalled export (keep small in tests)
        poll_interval: Sleep between checks while waiting
    """

    def __init__(
        self,
        export_timeout: float = 0.1,
        poll_interval: float = EXPORT_POLL_INTERVAL,
    ):
        self.logger = logging.getLogger(__name__)
        self.export_timeout = export_timeout
        self.poll_interval = poll_interval

        # Key: exported name, Value: {'direction': 'in'|'out', 'value': '0'|'1'}
        self._lines: Dict[str, Dict[str, str]] = {}

        # (pwm chip dir, pwm id) pairs exported by "someone"
        self._pwm_exports: Set[Tuple[str, int]] = set()

        # Every write that reached the fake kernel: (node, data)
        self.writes: List[Tuple[str, str]] = []

        # Knobs for simulating failure modes
        self.present = True  # Sysfs GPIO interface exists at all
        self.write_access = True  # export/unexport writable
        self.stall_exports = False  # Kernel never creates exported nodes
        self.failing_nodes: Set[str] = set()  # Node names that raise SysfsIOError

        self.logger.info("Mock sysfs initialized (simulation mode)")

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    def _check_node(self, node: str, descriptor: Optional[ChannelDescriptor] = None) -> None:
        if node in self.failing_nodes:
            path = f"{descriptor.global_gpio_name}/{node}" if descriptor else node
            raise SysfsIOError(f"[MOCK] I/O error on {path}")

    def _line(self, descriptor: ChannelDescriptor) -> Dict[str, str]:
        line = self._lines.get(descriptor.global_gpio_name)
        if line is None:
            raise SysfsIOError(
                f"[MOCK] {descriptor.global_gpio_name} is not exported"
            )
        return line

    def _log_write(self, node: str, data: str) -> None:
        self.writes.append((node, data))

    # =========================================================================
    # SysfsInterface
    # =========================================================================

    def has_write_access(self) -> bool:
        if not self.present:
            raise SysfsIOError("[MOCK] Sysfs GPIO interface not found")
        return self.write_access

    def export(self, descriptor: ChannelDescriptor) -> None:
        name = descriptor.global_gpio_name

        if name not in self._lines:
            self._check_node(EXPORT_NODE)
            self._log_write(EXPORT_NODE, str(descriptor.global_gpio))
            if not self.stall_exports:
                self._lines[name] = {"direction": DIRECTION_IN, "value": "0"}
            self.logger.debug(f"[MOCK] Exported {name}")

        if not wait_for(lambda: name in self._lines, self.export_timeout, self.poll_interval):
            raise ExportTimeoutError(
                f"[MOCK] {name}/value did not appear within {self.export_timeout}s"
            )

    def unexport(self, descriptor: ChannelDescriptor) -> None:
        name = descriptor.global_gpio_name
        if name not in self._lines:
            return

        self._check_node(UNEXPORT_NODE)
        self._log_write(UNEXPORT_NODE, str(descriptor.global_gpio))
        del self._lines[name]
        self.logger.debug(f"[MOCK] Unexported {name}")

    def write_direction(self, descriptor: ChannelDescriptor, direction: str) -> None:
        self._check_node(DIRECTION_NODE, descriptor)
        line = self._line(descriptor)
        if direction not in (DIRECTION_IN, DIRECTION_OUT):
            raise SysfsIOError(f"[MOCK] Invalid argument {direction!r} for direction")

        self._log_write(f"{descriptor.global_gpio_name}/{DIRECTION_NODE}", direction)
        line["direction"] = direction

    def write_value(self, descriptor: ChannelDescriptor, value: str) -> None:
        self._check_node(VALUE_NODE, descriptor)
        line = self._line(descriptor)
        if line["direction"] != DIRECTION_OUT:
            # The kernel refuses writes to input lines with EPERM
            raise SysfsIOError(
                f"[MOCK] Operation not permitted: {descriptor.global_gpio_name} is an input"
            )

        self._log_write(f"{descriptor.global_gpio_name}/{VALUE_NODE}", value)
        line["value"] = value

    def read_value(self, descriptor: ChannelDescriptor) -> str:
        self._check_node(VALUE_NODE, descriptor)
        return self._line(descriptor)["value"]

    def reported_direction(self, descriptor: ChannelDescriptor) -> Optional[Direction]:
        if descriptor.is_pwm and (descriptor.pwm_chip_dir, descriptor.pwm_id) in self._pwm_exports:
            return Direction.HARD_PWM

        line = self._lines.get(descriptor.global_gpio_name)
        if line is None:
            return None
        if line["direction"] == DIRECTION_IN:
            return Direction.IN
        if line["direction"] == DIRECTION_OUT:
            return Direction.OUT
        return None

    # =========================================================================
    # TESTING HELPER METHODS (not part of SysfsInterface)
    # =========================================================================
    # These methods are ONLY for testing - they simulate other processes and
    # external signals acting on the kernel

    def simulate_external_export(
        self,
        descriptor: ChannelDescriptor,
        direction: str = DIRECTION_IN,
    ) -> None:
        """Export a line as if another process had done it"""
        self._lines[descriptor.global_gpio_name] = {"direction": direction, "value": "0"}
        self.logger.info(f"[MOCK] Simulated external export of {descriptor.global_gpio_name}")

    def simulate_pwm_export(self, descriptor: ChannelDescriptor) -> None:
        """Create the channel's pwmN node as if a PWM user had exported it"""
        self._pwm_exports.add((descriptor.pwm_chip_dir, descriptor.pwm_id))

    def set_input_level(self, descriptor: ChannelDescriptor, level: Level) -> None:
        """Drive an exported line from outside (e.g. a button)"""
        self._line(descriptor)["value"] = level_to_value(level)

    def is_exported(self, descriptor: ChannelDescriptor) -> bool:
        return descriptor.global_gpio_name in self._lines

    def get_line_info(self, descriptor: ChannelDescriptor) -> dict:
        """
        Get the simulated direction and value of an exported line.

        Raises:
            SysfsIOError: If the line is not exported
        """
        return dict(self._line(descriptor))

    def exported_names(self) -> List[str]:
        return sorted(self._lines)

    def clear_writes(self) -> None:
        self.writes.clear()
