"""
GPIO Utilities

Shared helper functions used by the session and the sysfs backends.
Extracted here to follow DRY (Don't Repeat Yourself) principle.
"""

import collections.abc
import logging
import os
import time
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Union

from sysfs_gpio.constants import Level
from sysfs_gpio.errors import GPIOError, InvalidArgumentError

if TYPE_CHECKING:
    from sysfs_gpio.controllers.gpio_session import GPIOSession


def as_list(items: Union[Any, Sequence[Any]]) -> List[Any]:
    """
    Normalize a single item or a sequence of items to a list.

    Strings count as single items, because TEGRA_SOC/CVM channels are names.

    Example:
        as_list(7)          # [7]
        as_list([7, 11])    # [7, 11]
        as_list("GP66")     # ["GP66"]
        as_list(range(7, 9))  # [7, 8]
    """
    if isinstance(items, collections.abc.Sequence) and not isinstance(items, str):
        return list(items)
    return [items]


def to_level(value: Union[Level, bool, int]) -> Level:
    """
    Convert a caller-supplied value to a Level.

    Accepts Level, bool, or the integers 0/1.

    Raises:
        InvalidArgumentError: For anything else
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, (bool, int)) and int(value) in (0, 1):
        return Level(int(value))
    raise InvalidArgumentError(f"Invalid level {value!r}; use Level.LOW or Level.HIGH")


def level_to_value(level: Level) -> str:
    """Level -> string written to a value node"""
    return "1" if level == Level.HIGH else "0"


def value_to_level(value: str) -> Level:
    """Value node contents -> Level ("0" is LOW, anything else HIGH)"""
    return Level.LOW if value.strip() == "0" else Level.HIGH


def wait_for(
    condition: Callable[[], bool],
    timeout: float,
    interval: float,
) -> bool:
    """
    Poll a condition until it holds or the timeout expires.

    Args:
        condition: Zero-argument predicate
        timeout: Maximum total wait in seconds
        interval: Sleep between checks in seconds

    Returns:
        True if the condition held, False on timeout
    """
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() >= deadline:
            return False
        time.sleep(interval)
    return True


def wait_for_path(path: str, timeout: float, interval: float) -> bool:
    """
    Wait for a filesystem path to appear.

    Example:
        wait_for_path("/sys/class/gpio/gpio348/value", 5.0, 0.01)
    """
    return wait_for(lambda: os.path.exists(path), timeout, interval)


def safe_gpio_cleanup(
    session: Optional["GPIOSession"],
    channels: Optional[Sequence[Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Clean up a session without letting GPIO errors escape.

    Meant for shutdown paths (signal handlers, finally blocks) where an error
    from one channel must not prevent the rest of the shutdown.

    Example:
        safe_gpio_cleanup(self.gpio, logger=self.logger)
    """
    if session is None:
        return

    try:
        session.cleanup(channels)
    except GPIOError as e:
        if logger:
            logger.error(f"Error during GPIO cleanup: {e}")
