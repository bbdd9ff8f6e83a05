"""
Models Package

Data structures describing boards and channels.
"""

from sysfs_gpio.models.board_table import BoardDescriptorTable
from sysfs_gpio.models.channel_descriptor import Channel, ChannelDescriptor, PinDefinition

__all__ = [
    "BoardDescriptorTable",
    "Channel",
    "ChannelDescriptor",
    "PinDefinition",
]
