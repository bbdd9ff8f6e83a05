"""
Interfaces Package

Exposes abstract interfaces that define contracts for kernel backends.
"""

from sysfs_gpio.interfaces.line_watcher_interface import LineWatcherInterface
from sysfs_gpio.interfaces.sysfs_interface import SysfsInterface

# Public API (sorted alphabetically)
__all__ = [
    "LineWatcherInterface",
    "SysfsInterface",
]
