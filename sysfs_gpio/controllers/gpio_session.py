"""
GPIO Session

The public face of the library: numbering mode selection, channel setup,
reads, writes and cleanup. A session owns all of its state (active mode,
resolved channel table, per-channel directions); there is no module-level
singleton, so two sessions never share anything but the kernel itself.

Usage:
    from sysfs_gpio import Direction, GPIOSession, Level, NumberingMode

    with GPIOSession(board_table) as gpio:
        gpio.setmode(NumberingMode.BOARD)
        gpio.setup([7, 11], Direction.OUT, initial=Level.LOW)
        gpio.output([7, 11], [Level.HIGH, Level.LOW])
    # cleanup() runs on exit and unexports both lines

Thread safety:
    Public methods take one internal lock; private helpers never take it, so
    a public method calling a helper cannot deadlock on itself.
"""

import logging
import threading
from typing import Any, Dict, Optional, Sequence, Union

from sysfs_gpio.constants import (
    DIRECTION_IN,
    DIRECTION_OUT,
    READABLE_DIRECTIONS,
    SETUP_DIRECTIONS,
    Direction,
    Level,
    NumberingMode,
    PullMode,
)
from sysfs_gpio.controllers.channel_resolver import ChannelResolver
from sysfs_gpio.controllers.channel_state import ChannelStateTracker
from sysfs_gpio.errors import (
    GPIOError,
    GPIOPermissionError,
    InvalidArgumentError,
    InvalidDirectionError,
    InvalidModeError,
    LengthMismatchError,
    ModeConflictError,
    NotSetUpError,
)
from sysfs_gpio.implementations.sysfs_driver import SysfsDriver
from sysfs_gpio.interfaces.line_watcher_interface import LineWatcherInterface
from sysfs_gpio.interfaces.sysfs_interface import SysfsInterface
from sysfs_gpio.models.board_table import BoardDescriptorTable
from sysfs_gpio.models.channel_descriptor import Channel, ChannelDescriptor
from sysfs_gpio.utils.sysfs_utils import (
    as_list,
    level_to_value,
    safe_gpio_cleanup,
    to_level,
    value_to_level,
)

ChannelArg = Union[Channel, Sequence[Channel]]


class GPIOSession:
    """
    One numbering-mode session over a board's GPIO channels.

    Args:
        board_table: Channel tables for the board this process runs on
        sysfs: Kernel backend (default: SysfsDriver on /sys/class/gpio)
        line_watcher: Optional edge watcher, told to stop on channel cleanup
        warnings: Emit advisory warnings (see setwarnings())
    """

    def __init__(
        self,
        board_table: BoardDescriptorTable,
        sysfs: Optional[SysfsInterface] = None,
        line_watcher: Optional[LineWatcherInterface] = None,
        warnings: bool = True,
    ):
        self.logger = logging.getLogger(__name__)
        self.board_table = board_table
        self.sysfs = sysfs if sysfs is not None else SysfsDriver()
        self.line_watcher = line_watcher

        self.resolver = ChannelResolver()
        self.channel_state = ChannelStateTracker()

        self._warnings = warnings
        self._lock = threading.Lock()

        self.logger.info(
            f"GPIO session created for {board_table.model} "
            f"(modes: {[m.value for m in board_table.supported_modes]})"
        )

    # =========================================================================
    # CONTEXT MANAGER
    # =========================================================================

    def __enter__(self) -> "GPIOSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self.getmode() is None:
            return

        if exc_type is not None:
            # Keep the original exception; cleanup errors are only logged
            safe_gpio_cleanup(self, logger=self.logger)
        else:
            self.cleanup()

    # =========================================================================
    # NUMBERING MODE / WARNINGS
    # =========================================================================

    def setwarnings(self, enabled: bool) -> None:
        """Enable or disable the advisory warnings of setup() and cleanup()"""
        with self._lock:
            self._warnings = bool(enabled)

    @property
    def warnings(self) -> bool:
        return self._warnings

    def setmode(self, mode: Union[NumberingMode, str]) -> None:
        """
        Select the numbering mode used to interpret channel arguments.

        Calling again with the active mode is a no-op.

        Raises:
            ModeConflictError: A different mode is already active
            InvalidModeError: Unknown mode, or the board has no channels for it
        """
        with self._lock:
            mode = self._coerce_mode(mode)
            current = self.resolver.mode

            if current is not None and current != mode:
                raise ModeConflictError(
                    f"A different mode has already been set ({current.value})"
                )

            if not self.board_table.supports(mode):
                raise InvalidModeError(
                    f"Board {self.board_table.model} has no channels in {mode.value} mode"
                )

            if current == mode:
                return

            self.resolver.activate(mode, self.board_table.channels_for(mode))
            self.logger.info(f"Numbering mode set to {mode.value}")

    def getmode(self) -> Optional[NumberingMode]:
        """Currently active numbering mode, or None"""
        return self.resolver.mode

    # Long-form aliases
    set_numbering_mode = setmode
    get_numbering_mode = getmode
    set_warnings = setwarnings

    @staticmethod
    def _coerce_mode(mode: Any) -> NumberingMode:
        if isinstance(mode, NumberingMode):
            return mode
        if isinstance(mode, str):
            try:
                return NumberingMode[mode.upper()]
            except KeyError:
                pass
        raise InvalidModeError(f"An invalid mode was passed to setmode(): {mode!r}")

    # =========================================================================
    # SETUP
    # =========================================================================

    def setup(
        self,
        channels: ChannelArg,
        direction: Direction,
        initial: Optional[Union[Level, bool, int]] = None,
        pull_up_down: Optional[PullMode] = None,
    ) -> None:
        """
        Set up one channel or a list of channels as inputs or outputs.

        Everything is validated before the first sysfs write. Channels that
        this process already set up are cleaned up first, so setup() can be
        called again with a different direction.

        Args:
            channels: Channel or list of channels
            direction: Direction.IN or Direction.OUT
            initial: Level written right after configuring an output
            pull_up_down: Accepted for compatibility; not applied

        Raises:
            GPIOPermissionError: export/unexport are not writable
            InvalidDirectionError: direction is not IN or OUT
            InvalidArgumentError: initial given for an input, or bad values
            SysfsIOError / ExportTimeoutError: kernel failures

        Channels processed before a kernel failure stay set up; there is no
        rollback.
        """
        with self._lock:
            if not self.sysfs.has_write_access():
                raise GPIOPermissionError(
                    "You do not have write access to the GPIO sysfs interface"
                )

            descriptors = self.resolver.resolve_many(as_list(channels), need_gpio=True)

            if direction not in SETUP_DIRECTIONS:
                raise InvalidDirectionError(
                    f"An invalid direction was passed to setup(): {direction!r}"
                )

            if direction == Direction.IN and initial is not None:
                raise InvalidArgumentError("initial parameter is not valid for inputs")

            initial_level = to_level(initial) if initial is not None else None

            if pull_up_down is not None:
                if not isinstance(pull_up_down, PullMode):
                    raise InvalidArgumentError(
                        f"Invalid value for pull_up_down: {pull_up_down!r}"
                    )
                self.logger.warning("setup() ignores the pull_up_down parameter")

            if self._warnings:
                self._warn_if_in_use(descriptors)

            for descriptor in descriptors:
                if descriptor.channel in self.channel_state:
                    self._cleanup_one(descriptor)

            for descriptor in descriptors:
                if direction == Direction.OUT:
                    self._setup_single_out(descriptor, initial_level)
                else:
                    self._setup_single_in(descriptor)

    def _warn_if_in_use(self, descriptors: Sequence[ChannelDescriptor]) -> None:
        for descriptor in descriptors:
            if descriptor.channel in self.channel_state:
                continue
            if self.sysfs.reported_direction(descriptor) is not None:
                self.logger.warning(
                    f"Channel {descriptor.channel!r} is already in use, continuing anyway. "
                    f"Use setwarnings(False) to disable warnings"
                )

    def _setup_single_out(self, descriptor: ChannelDescriptor, initial: Optional[Level]) -> None:
        self.sysfs.export(descriptor)
        self.sysfs.write_direction(descriptor, DIRECTION_OUT)

        if initial is not None:
            self.sysfs.write_value(descriptor, level_to_value(initial))

        self.channel_state.record(descriptor.channel, Direction.OUT)
        self.logger.debug(f"Channel {descriptor.channel!r} set up as OUTPUT")

    def _setup_single_in(self, descriptor: ChannelDescriptor) -> None:
        self.sysfs.export(descriptor)
        self.sysfs.write_direction(descriptor, DIRECTION_IN)

        self.channel_state.record(descriptor.channel, Direction.IN)
        self.logger.debug(f"Channel {descriptor.channel!r} set up as INPUT")

    # =========================================================================
    # INPUT / OUTPUT
    # =========================================================================

    def input(self, channel: Channel) -> Level:
        """
        Read the level of a channel set up as input or output.

        Raises:
            NotSetUpError: The channel was not set up by this session
        """
        with self._lock:
            descriptor = self.resolver.resolve(channel, need_gpio=True)

            if self.channel_state.get(descriptor.channel) not in READABLE_DIRECTIONS:
                raise NotSetUpError(f"You must setup() channel {channel!r} first")

            return value_to_level(self.sysfs.read_value(descriptor))

    def output(
        self,
        channels: ChannelArg,
        values: Union[Level, bool, int, Sequence[Union[Level, bool, int]]],
    ) -> None:
        """
        Write levels to output channels, one value per channel.

        All channels are checked before anything is written. A write failure
        part-way through leaves earlier channels at their new level.

        Raises:
            LengthMismatchError: len(values) != len(channels)
            NotSetUpError: A channel is not set up as an output
        """
        with self._lock:
            descriptors = self.resolver.resolve_many(as_list(channels), need_gpio=True)
            value_list = as_list(values)

            if len(value_list) != len(descriptors):
                raise LengthMismatchError(
                    f"Number of values ({len(value_list)}) != "
                    f"number of channels ({len(descriptors)})"
                )

            levels = [to_level(value) for value in value_list]

            for descriptor in descriptors:
                if self.channel_state.get(descriptor.channel) != Direction.OUT:
                    raise NotSetUpError(
                        f"Channel {descriptor.channel!r} has not been set up as an OUTPUT"
                    )

            for descriptor, level in zip(descriptors, levels):
                self.sysfs.write_value(descriptor, level_to_value(level))

    # =========================================================================
    # CLEANUP
    # =========================================================================

    def cleanup(self, channels: Optional[ChannelArg] = None) -> None:
        """
        Release channels set up by this session.

        Args:
            channels: Channels to release, or None for every channel. A full
                      cleanup also resets the numbering mode.

        Channels this session never set up are skipped silently.
        """
        with self._lock:
            if self.resolver.mode is None:
                if self._warnings:
                    self.logger.warning(
                        "No channels have been set up yet - nothing to clean up! "
                        "Try cleaning up at the end of your program instead!"
                    )
                return

            if channels is None:
                self._cleanup_all()
                return

            for descriptor in self.resolver.resolve_many(as_list(channels)):
                if descriptor.channel in self.channel_state:
                    self._cleanup_one(descriptor)

    def _cleanup_one(self, descriptor: ChannelDescriptor) -> None:
        direction = self.channel_state.get(descriptor.channel)

        if self.line_watcher is not None:
            self.line_watcher.unwatch(descriptor)

        if direction == Direction.HARD_PWM:
            # TODO: disable and unexport pwmN once PWM output is supported
            self.logger.debug(f"Channel {descriptor.channel!r} is PWM; not unexported")
        else:
            self.sysfs.unexport(descriptor)

        self.channel_state.forget(descriptor.channel)
        self.logger.debug(f"Channel {descriptor.channel!r} cleaned up")

    def _cleanup_all(self) -> None:
        channels = list(self.channel_state.channels())
        first_error: Optional[GPIOError] = None

        # One failing line must not keep the others exported
        for channel in channels:
            try:
                self._cleanup_one(self.resolver.resolve(channel))
            except GPIOError as e:
                self.logger.error(f"Failed to clean up channel {channel!r}: {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            # Mode stays active so the remaining records can be cleaned up later
            raise first_error

        mode = self.resolver.mode
        self.resolver.deactivate()
        self.logger.info(f"Cleaned up {len(channels)} channels, {mode.value} mode released")

    # =========================================================================
    # INTROSPECTION
    # =========================================================================

    def gpio_function(self, channel: Channel) -> Direction:
        """
        How the kernel currently has a channel configured.

        Unlike input()/output(), this reflects configuration made by any
        process, not just this session.
        """
        with self._lock:
            descriptor = self.resolver.resolve(channel)
            reported = self.sysfs.reported_direction(descriptor)
            return reported if reported is not None else Direction.UNKNOWN

    def configured_channels(self) -> Dict[Channel, Direction]:
        """Snapshot of channels set up by this session"""
        with self._lock:
            return self.channel_state.channels()
