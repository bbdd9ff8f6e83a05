"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Machine-specific values (sysfs root, board file) belong in .env, NOT here
- Import these settings in modules: from config.settings import GPIO_SYSFS_ROOT
- Board pin tables live in YAML board files, never in this module
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# SYSFS GPIO INTERFACE
# =============================================================================

# Kernel GPIO control directory (export, unexport, gpioN/...)
GPIO_SYSFS_ROOT = os.getenv("GPIO_SYSFS_ROOT", "/sys/class/gpio")

# Device directories searched for GPIO/PWM controller nodes, colon separated
GPIO_SYSFS_DEVICE_ROOTS = os.getenv(
    "GPIO_SYSFS_DEVICE_ROOTS",
    "/sys/devices/:/sys/devices/platform/",
).split(":")

# Export readiness polling
GPIO_EXPORT_POLL_INTERVAL = float(os.getenv("GPIO_EXPORT_POLL_INTERVAL", "0.01"))  # seconds
GPIO_EXPORT_TIMEOUT = float(os.getenv("GPIO_EXPORT_TIMEOUT", "5.0"))  # seconds

# =============================================================================
# BOARD DESCRIPTION
# =============================================================================

# YAML board description used by the factory (empty = must be passed explicitly)
GPIO_BOARD_FILE = os.getenv("GPIO_BOARD_FILE", "")

# =============================================================================
# BEHAVIOUR
# =============================================================================

# Advisory warnings ("channel already in use", "nothing to clean up")
GPIO_WARNINGS = os.getenv("GPIO_WARNINGS", "true").lower() in ("1", "true", "yes")
