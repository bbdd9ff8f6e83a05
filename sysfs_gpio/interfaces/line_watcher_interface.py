"""
Line Watcher Interface

Extension point for edge detection on input channels. No implementation
ships with this package: sysfs edge events need poll() on the value node,
which a caller can provide by implementing this interface.

When a watcher is given to GPIOSession, the session calls unwatch() for
every channel it cleans up, so a watcher never outlives the export it reads.
"""

from abc import ABC, abstractmethod
from typing import Callable

from sysfs_gpio.constants import EdgeDetection
from sysfs_gpio.models.channel_descriptor import Channel, ChannelDescriptor


class LineWatcherInterface(ABC):
    """Contract for components that report edges on exported lines"""

    @abstractmethod
    def watch(
        self,
        descriptor: ChannelDescriptor,
        edge: EdgeDetection,
        callback: Callable[[Channel], None],
        bouncetime_ms: int = 0,
    ) -> None:
        """
        Start reporting edges on an exported input line.

        Args:
            descriptor: Resolved channel to watch
            edge: Which transitions trigger the callback
            callback: Called with the channel number on each edge
            bouncetime_ms: Ignore further edges for this long after one fires
        """

    @abstractmethod
    def unwatch(self, descriptor: ChannelDescriptor) -> None:
        """
        Stop reporting edges. Must be a no-op for unwatched lines.
        """
