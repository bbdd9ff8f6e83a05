"""
Channel Models

Data classes describing how a caller-facing channel maps onto kernel GPIO
and PWM resources.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

# BOARD/BCM channels are integers, TEGRA_SOC/CVM channels are signal names
Channel = Union[int, str]


@dataclass(frozen=True)
class ChannelDescriptor:
    """
    Kernel resolution record for one channel under one numbering mode.

    The same physical pin appears once per numbering mode it is reachable
    under; all copies share the kernel identifiers.
    """

    channel: Channel
    gpio_chip_dir: str  # Empty string: no GPIO capability
    chip_gpio: int  # Line offset within the GPIO chip
    global_gpio: int  # Number written to export/unexport
    global_gpio_name: str  # Directory name under the sysfs root
    pwm_chip_dir: Optional[str] = None
    pwm_id: Optional[int] = None

    @property
    def is_gpio(self) -> bool:
        return self.gpio_chip_dir != ""

    @property
    def is_pwm(self) -> bool:
        return self.pwm_chip_dir is not None


@dataclass
class PinDefinition:
    """
    One row of a board description.

    Line offsets and exported names are keyed by the chip's ngpio count,
    because the same pin sits at different offsets on different kernel
    versions of the same board.
    """

    chip_sysfs: str  # GPIO controller name, e.g. "2200000.gpio" ("" = none)
    gpio: Dict[int, int]  # ngpio -> line offset within chip
    board: Optional[int] = None
    bcm: Optional[int] = None
    cvm: Optional[str] = None
    tegra_soc: Optional[str] = None
    name: Dict[int, str] = field(default_factory=dict)  # ngpio -> exported name
    pwm_chip_sysfs: Optional[str] = None
    pwm_id: Optional[int] = None
