"""
Channel Resolver

Translates caller-facing channel numbers into kernel resolution records
under the currently active numbering mode. Pure lookup: resolving never
touches sysfs and never changes state.
"""

import logging
from typing import Dict, Iterable, List, Optional

from sysfs_gpio.constants import NumberingMode
from sysfs_gpio.errors import (
    InvalidChannelError,
    ModeNotSetError,
    NotGPIOCapableError,
    NotPWMCapableError,
)
from sysfs_gpio.models.channel_descriptor import Channel, ChannelDescriptor


class ChannelResolver:
    """Looks channels up in the table of the active numbering mode"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._mode: Optional[NumberingMode] = None
        self._channels: Dict[Channel, ChannelDescriptor] = {}

    @property
    def mode(self) -> Optional[NumberingMode]:
        return self._mode

    def activate(self, mode: NumberingMode, channels: Dict[Channel, ChannelDescriptor]) -> None:
        """Install the channel table for a newly selected mode"""
        self._mode = mode
        self._channels = dict(channels)
        self.logger.debug(f"Resolver using {mode.value} table ({len(channels)} channels)")

    def deactivate(self) -> None:
        self._mode = None
        self._channels = {}

    def _check_mode(self) -> None:
        if self._mode is None:
            raise ModeNotSetError(
                "Please set pin numbering mode using setmode(NumberingMode.BOARD), "
                "setmode(NumberingMode.BCM), setmode(NumberingMode.TEGRA_SOC) "
                "or setmode(NumberingMode.CVM)"
            )

    def _lookup(self, channel: Channel, need_gpio: bool, need_pwm: bool) -> ChannelDescriptor:
        descriptor = self._channels.get(channel)
        if descriptor is None:
            raise InvalidChannelError(f"The channel sent is invalid: {channel!r}")

        if need_gpio and not descriptor.is_gpio:
            raise NotGPIOCapableError(f"Channel {channel!r} is not a GPIO")

        if need_pwm and not descriptor.is_pwm:
            raise NotPWMCapableError(f"Channel {channel!r} is not a PWM")

        return descriptor

    def resolve(
        self,
        channel: Channel,
        need_gpio: bool = False,
        need_pwm: bool = False,
    ) -> ChannelDescriptor:
        """
        Resolve one channel.

        Raises:
            ModeNotSetError: No numbering mode is active
            InvalidChannelError: Channel unknown under the active mode
            NotGPIOCapableError: need_gpio and the channel has no GPIO line
            NotPWMCapableError: need_pwm and the channel has no PWM controller
        """
        self._check_mode()
        return self._lookup(channel, need_gpio, need_pwm)

    def resolve_many(
        self,
        channels: Iterable[Channel],
        need_gpio: bool = False,
        need_pwm: bool = False,
    ) -> List[ChannelDescriptor]:
        """
        Resolve channels in order. Fails on the first invalid entry, so a
        caller either gets every descriptor or none.
        """
        self._check_mode()
        return [self._lookup(channel, need_gpio, need_pwm) for channel in channels]
