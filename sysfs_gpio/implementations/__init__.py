"""
Implementations Package

Exposes concrete implementations of the sysfs interface.
"""

from sysfs_gpio.implementations.mock_sysfs import MockSysfs
from sysfs_gpio.implementations.sysfs_driver import SysfsDriver

# Public API (sorted alphabetically)
__all__ = [
    "MockSysfs",
    "SysfsDriver",
]
