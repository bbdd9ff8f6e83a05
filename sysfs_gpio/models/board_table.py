"""
Board Descriptor Table

Per-board lookup from numbering mode to {channel: ChannelDescriptor}.
Built once at startup (see board_config.BoardConfig) and never mutated.
"""

from typing import Dict, List, Mapping

from sysfs_gpio.constants import NumberingMode
from sysfs_gpio.models.channel_descriptor import Channel, ChannelDescriptor


class BoardDescriptorTable:
    """Immutable channel tables for every numbering mode a board supports"""

    def __init__(
        self,
        model: str,
        channels_by_mode: Mapping[NumberingMode, Mapping[Channel, ChannelDescriptor]],
    ):
        self.model = model
        self._channels_by_mode: Dict[NumberingMode, Dict[Channel, ChannelDescriptor]] = {
            mode: dict(channels)
            for mode, channels in channels_by_mode.items()
            if channels
        }

    @property
    def supported_modes(self) -> List[NumberingMode]:
        return [mode for mode in NumberingMode if mode in self._channels_by_mode]

    def supports(self, mode: NumberingMode) -> bool:
        return mode in self._channels_by_mode

    def channels_for(self, mode: NumberingMode) -> Dict[Channel, ChannelDescriptor]:
        """
        Get the channel table for a numbering mode.

        Returns a copy so callers cannot alter the board description.

        Raises:
            KeyError: If the board has no channels under this mode
        """
        return dict(self._channels_by_mode[mode])

    def __repr__(self) -> str:
        modes = ", ".join(mode.value for mode in self.supported_modes)
        return f"BoardDescriptorTable(model={self.model!r}, modes=[{modes}])"
