"""
Sysfs Interface - Abstract Kernel Layer

This defines the contract that any sysfs GPIO backend must follow. The
session never touches the filesystem itself; it sequences calls on an
object implementing this interface.

Two implementations ship:
1. SysfsDriver: real reads/writes under /sys/class/gpio
2. MockSysfs: in-memory kernel simulation for tests and development
"""

from abc import ABC, abstractmethod
from typing import Optional

from sysfs_gpio.constants import Direction
from sysfs_gpio.models.channel_descriptor import ChannelDescriptor


class SysfsInterface(ABC):
    """
    Abstract base class for sysfs GPIO operations.

    Every method may raise SysfsIOError when the underlying node cannot be
    read or written (permission denied, path missing, device removed).
    """

    @abstractmethod
    def has_write_access(self) -> bool:
        """
        Check that the export and unexport control nodes are writable.

        Raises:
            SysfsIOError: If the sysfs GPIO interface is not present at all
        """

    @abstractmethod
    def export(self, descriptor: ChannelDescriptor) -> None:
        """
        Export a GPIO line and wait until its value node exists.

        Does nothing but wait if the line is already exported.

        Raises:
            ExportTimeoutError: If the value node does not appear in time
        """

    @abstractmethod
    def unexport(self, descriptor: ChannelDescriptor) -> None:
        """
        Unexport a GPIO line. A line that is not exported is left alone.
        """

    @abstractmethod
    def write_direction(self, descriptor: ChannelDescriptor, direction: str) -> None:
        """
        Write "in" or "out" to the line's direction node.
        """

    @abstractmethod
    def write_value(self, descriptor: ChannelDescriptor, value: str) -> None:
        """
        Write "0" or "1" to the line's value node.
        """

    @abstractmethod
    def read_value(self, descriptor: ChannelDescriptor) -> str:
        """
        Read the line's value node.

        Returns:
            Node contents with surrounding whitespace removed
        """

    @abstractmethod
    def reported_direction(self, descriptor: ChannelDescriptor) -> Optional[Direction]:
        """
        Report how the kernel currently has this channel configured.

        A PWM export wins over GPIO state. Only used for the "already in use"
        warning; never used to authorise reads or writes.

        Returns:
            Direction.HARD_PWM, Direction.IN, Direction.OUT or None
        """
