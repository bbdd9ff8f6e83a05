"""
GPIO Factory

Factory pattern for creating GPIO sessions.
Selects the real sysfs backend or the in-memory mock based on availability,
and loads the board description named in settings when none is given.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional

from config.settings import GPIO_BOARD_FILE, GPIO_WARNINGS
from sysfs_gpio.board_config import load_board_table
from sysfs_gpio.constants import DEFAULT_SYSFS_ROOT, EXPORT_NODE
from sysfs_gpio.controllers.gpio_session import GPIOSession
from sysfs_gpio.errors import BoardConfigError
from sysfs_gpio.implementations.mock_sysfs import MockSysfs
from sysfs_gpio.implementations.sysfs_driver import SysfsDriver
from sysfs_gpio.interfaces.sysfs_interface import SysfsInterface
from sysfs_gpio.models.board_table import BoardDescriptorTable

# Type aliases for better type hints
BackendMode = Literal["auto", "real", "mock"]


class GPIOFactory:
    """
    Factory for creating sysfs backends and sessions.

    Usage:
        # Auto-detect (real sysfs if present, mock otherwise)
        gpio = GPIOFactory.create_session()

        # Force mock mode (useful for testing)
        gpio = GPIOFactory.create_session(mode="mock", board_table=table)

        # Force real sysfs (raises error if not available)
        gpio = GPIOFactory.create_session(mode="real")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def is_sysfs_available(cls, root: str = DEFAULT_SYSFS_ROOT) -> bool:
        """Check whether the kernel exposes the sysfs GPIO interface"""
        return os.path.exists(os.path.join(root, EXPORT_NODE))

    @classmethod
    def create_sysfs(
        cls,
        mode: BackendMode = "auto",
        root: str = DEFAULT_SYSFS_ROOT,
    ) -> SysfsInterface:
        """
        Create a sysfs backend.

        Args:
            mode: "auto" (detect), "real" (force sysfs), "mock" (force simulation)
            root: GPIO class directory for the real backend

        Raises:
            RuntimeError: If mode="real" but the sysfs GPIO interface is missing
        """
        if mode == "mock":
            cls._logger.info("Creating mock sysfs (forced)")
            return MockSysfs()

        available = cls.is_sysfs_available(root)

        if mode == "real":
            if not available:
                raise RuntimeError(f"Real sysfs GPIO requested but {root} is not available")
            cls._logger.info(f"Creating sysfs driver on {root} (forced)")
            return SysfsDriver(root=root)

        # mode == "auto" - try real first, fall back to mock
        if available:
            cls._logger.info(f"Creating sysfs driver on {root} (auto-detected)")
            return SysfsDriver(root=root)

        cls._logger.warning(f"Sysfs GPIO not available at {root}, using mock sysfs")
        return MockSysfs()

    @classmethod
    def create_session(
        cls,
        mode: BackendMode = "auto",
        board_table: Optional[BoardDescriptorTable] = None,
        board_file: Optional[Path] = None,
        root: str = DEFAULT_SYSFS_ROOT,
    ) -> GPIOSession:
        """
        Create a GPIO session.

        Args:
            mode: Backend selection, see create_sysfs()
            board_table: Prebuilt board table (takes precedence)
            board_file: YAML board description (default: GPIO_BOARD_FILE)
            root: GPIO class directory for the real backend

        Raises:
            BoardConfigError: If no board description is available
        """
        if board_table is None:
            path = board_file or (Path(GPIO_BOARD_FILE) if GPIO_BOARD_FILE else None)
            if path is None:
                raise BoardConfigError(
                    "No board description: pass board_table/board_file or set GPIO_BOARD_FILE"
                )
            board_table = load_board_table(Path(path))

        sysfs = cls.create_sysfs(mode=mode, root=root)
        return GPIOSession(board_table, sysfs=sysfs, warnings=GPIO_WARNINGS)


# Convenience function for quick creation


def create_session(
    force_mock: bool = False,
    board_table: Optional[BoardDescriptorTable] = None,
) -> GPIOSession:
    """
    Quick session creation with simple mock override.

    Example:
        # Normal usage (board file from GPIO_BOARD_FILE)
        gpio = create_session()

        # Testing
        gpio = create_session(force_mock=True, board_table=table)
    """
    mode = "mock" if force_mock else "auto"
    return GPIOFactory.create_session(mode=mode, board_table=board_table)
