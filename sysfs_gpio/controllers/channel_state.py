"""
Channel State Tracker

Process-local record of which channels this process has set up and in which
direction. This is the only authority for whether a channel may be read or
written; what sysfs reports is never trusted for that.
"""

from typing import Dict, Optional

from sysfs_gpio.constants import Direction
from sysfs_gpio.errors import InvalidDirectionError
from sysfs_gpio.models.channel_descriptor import Channel


class ChannelStateTracker:
    """Maps channel -> Direction for every channel this process exported"""

    def __init__(self):
        self._directions: Dict[Channel, Direction] = {}

    def get(self, channel: Channel) -> Optional[Direction]:
        return self._directions.get(channel)

    def record(self, channel: Channel, direction: Direction) -> None:
        if direction == Direction.UNKNOWN:
            raise InvalidDirectionError("Cannot record a channel as UNKNOWN; use forget()")
        self._directions[channel] = direction

    def forget(self, channel: Channel) -> None:
        self._directions.pop(channel, None)

    def is_configured(self, channel: Channel) -> bool:
        return channel in self._directions

    def channels(self) -> Dict[Channel, Direction]:
        """Snapshot of all records"""
        return dict(self._directions)

    def clear(self) -> None:
        self._directions.clear()

    def __contains__(self, channel: Channel) -> bool:
        return channel in self._directions

    def __len__(self) -> int:
        return len(self._directions)
