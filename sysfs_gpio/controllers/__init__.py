"""
Controllers Package

High-level coordination: channel resolution, process-local channel state and
the GPIOSession facade that sequences them against a sysfs backend.
"""

from sysfs_gpio.controllers.channel_resolver import ChannelResolver
from sysfs_gpio.controllers.channel_state import ChannelStateTracker
from sysfs_gpio.controllers.gpio_session import GPIOSession

# Public API (sorted alphabetically)
__all__ = [
    "ChannelResolver",
    "ChannelStateTracker",
    "GPIOSession",
]
