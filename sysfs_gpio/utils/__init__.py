"""
Utilities Package

Exposes shared helper functions for GPIO operations.

Public API:
    - as_list: Normalize a channel/value argument to a list
    - to_level: Coerce Level/bool/int to Level
    - level_to_value / value_to_level: Level <-> value node strings
    - wait_for / wait_for_path: Bounded polling
    - safe_gpio_cleanup: Session cleanup that logs instead of raising
"""

from sysfs_gpio.utils.sysfs_utils import (
    as_list,
    level_to_value,
    safe_gpio_cleanup,
    to_level,
    value_to_level,
    wait_for,
    wait_for_path,
)

# Public API (sorted alphabetically)
__all__ = [
    "as_list",
    "level_to_value",
    "safe_gpio_cleanup",
    "to_level",
    "value_to_level",
    "wait_for",
    "wait_for_path",
]
