"""
Board Description Loader

Reads a YAML board description and turns it into a BoardDescriptorTable.

File format:

    model: JETSON_ORIN
    gpio_chips:               # optional, otherwise probed under /sys/devices
      2200000.gpio: {base: 348, ngpio: 164}
    pwm_chips:                # optional, otherwise probed under /sys/devices
      3280000.pwm: /sys/devices/platform/3280000.pwm/pwm/pwmchip0
    pins:
      - chip: 2200000.gpio
        gpio: {164: 106}      # ngpio -> line offset (or a plain int)
        name: {164: PQ.06}    # ngpio -> exported name (optional)
        board: 7
        bcm: 4
        cvm: MCLK05
        tegra_soc: GP66
        pwm_chip: 3280000.pwm # optional
        pwm_id: 0             # optional

Chip base/ngpio values are looked up in sysfs when the file does not pin them,
so the same description works across kernel versions that number chips
differently.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from sysfs_gpio.constants import DEFAULT_DEVICE_ROOTS, NumberingMode
from sysfs_gpio.errors import BoardConfigError
from sysfs_gpio.models.board_table import BoardDescriptorTable
from sysfs_gpio.models.channel_descriptor import ChannelDescriptor, PinDefinition

# Pin definition key for each numbering mode
MODE_KEYS = {
    NumberingMode.BOARD: "board",
    NumberingMode.BCM: "bcm",
    NumberingMode.TEGRA_SOC: "tegra_soc",
    NumberingMode.CVM: "cvm",
}


class BoardConfig:
    """
    Board description with YAML file support.

    Usage:
        config = BoardConfig(Path("config/board.example.yaml"))
        table = config.build_table()
    """

    def __init__(
        self,
        config_path: Path,
        device_roots: Optional[Sequence[str]] = None,
    ):
        """
        Initialize board description.

        Args:
            config_path: Path to YAML board description
            device_roots: Directories searched for GPIO/PWM controllers
                          (None = settings default)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path)
        self.device_roots = list(device_roots or DEFAULT_DEVICE_ROOTS)

        self._config = self._load_config()
        self._pins = self._parse_pins(self._config["pins"])

        self.logger.info(
            f"Board description loaded from {self.config_path} "
            f"(model: {self.model}, {len(self._pins)} pins)"
        )

    def _load_config(self) -> Dict[str, Any]:
        """Load and validate the YAML file"""
        if not self.config_path.exists():
            raise BoardConfigError(f"Board description not found: {self.config_path}")

        try:
            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise BoardConfigError(
                f"Failed to read board description {self.config_path}: {e}"
            ) from e

        self._validate_config(config)
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate top-level structure"""
        if not isinstance(config, dict):
            raise BoardConfigError("Board description must be a mapping")

        if not config.get("model"):
            raise BoardConfigError("Board description has no 'model'")

        pins = config.get("pins")
        if not isinstance(pins, list) or not pins:
            raise BoardConfigError("Board description has no 'pins' list")

        for key in ("gpio_chips", "pwm_chips"):
            config[key] = config.get(key) or {}
            if not isinstance(config[key], dict):
                raise BoardConfigError(f"'{key}' must be a mapping of controller names")

    def _parse_pins(self, raw_pins: List[Dict[str, Any]]) -> List[PinDefinition]:
        pins = []
        for index, raw in enumerate(raw_pins):
            if not isinstance(raw, dict) or "gpio" not in raw:
                raise BoardConfigError(f"Pin entry {index} needs a 'gpio' field")

            gpio = raw["gpio"]
            if not isinstance(gpio, dict):
                gpio = {None: gpio}
            name = raw.get("name") or {}
            if not isinstance(name, dict):
                name = {None: name}

            try:
                gpio = {_ngpio_key(k): int(v) for k, v in gpio.items()}
                name = {_ngpio_key(k): str(v) for k, v in name.items()}
            except (TypeError, ValueError) as e:
                raise BoardConfigError(f"Pin entry {index} has a bad gpio/name map: {e}") from e

            pins.append(
                PinDefinition(
                    chip_sysfs=raw.get("chip") or "",
                    gpio=gpio,
                    name=name,
                    board=raw.get("board"),
                    bcm=raw.get("bcm"),
                    cvm=raw.get("cvm"),
                    tegra_soc=raw.get("tegra_soc"),
                    pwm_chip_sysfs=raw.get("pwm_chip"),
                    pwm_id=raw.get("pwm_id"),
                )
            )
        return pins

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def model(self) -> str:
        """Board model name"""
        return str(self._config["model"])

    @property
    def pin_definitions(self) -> List[PinDefinition]:
        return list(self._pins)

    # =========================================================================
    # TABLE CONSTRUCTION
    # =========================================================================

    def build_table(self) -> BoardDescriptorTable:
        """
        Resolve every pin against the kernel's chip numbering.

        Raises:
            BoardConfigError: If a GPIO controller cannot be found or a pin
                              has no line offset for the chip's ngpio
        """
        chips = self._resolve_gpio_chips()
        pwm_dirs = self._resolve_pwm_chips()

        channels_by_mode: Dict[NumberingMode, Dict[Any, ChannelDescriptor]] = {
            mode: {} for mode in NumberingMode
        }

        for pin in self._pins:
            if pin.chip_sysfs:
                chip_dir, base, ngpio = chips[pin.chip_sysfs]
                chip_gpio = _lookup_by_ngpio(pin.gpio, ngpio)
                if chip_gpio is None:
                    raise BoardConfigError(
                        f"Pin on {pin.chip_sysfs} has no line offset for ngpio={ngpio}"
                    )
                global_gpio = base + chip_gpio
                global_gpio_name = _lookup_by_ngpio(pin.name, ngpio) or f"gpio{global_gpio}"
            else:
                chip_dir, chip_gpio, global_gpio, global_gpio_name = "", 0, 0, ""

            pwm_chip_dir = None
            if pin.pwm_chip_sysfs:
                pwm_chip_dir = pwm_dirs.get(pin.pwm_chip_sysfs)

            for mode, key in MODE_KEYS.items():
                channel = getattr(pin, key)
                if channel is None:
                    continue
                channels_by_mode[mode][channel] = ChannelDescriptor(
                    channel=channel,
                    gpio_chip_dir=chip_dir,
                    chip_gpio=chip_gpio,
                    global_gpio=global_gpio,
                    global_gpio_name=global_gpio_name,
                    pwm_chip_dir=pwm_chip_dir,
                    pwm_id=pin.pwm_id if pwm_chip_dir else None,
                )

        table = BoardDescriptorTable(self.model, channels_by_mode)
        self.logger.debug(f"Built {table!r}")
        return table

    def _find_device_dir(self, name: str) -> Optional[str]:
        for root in self.device_roots:
            candidate = os.path.join(root, name)
            if os.path.exists(candidate):
                return candidate
        return None

    def _resolve_gpio_chips(self) -> Dict[str, tuple]:
        """Map chip name -> (chip dir, base, ngpio)"""
        overrides = self._config["gpio_chips"]
        chips = {}

        for name in sorted({p.chip_sysfs for p in self._pins if p.chip_sysfs}):
            override = overrides.get(name) or {}
            if not isinstance(override, dict):
                raise BoardConfigError(
                    f"gpio_chips entry for {name} must be a mapping with base/ngpio, got {override!r}"
                )
            chip_dir = override.get("dir") or self._find_device_dir(name)

            if "base" in override and "ngpio" in override:
                try:
                    base, ngpio = int(override["base"]), int(override["ngpio"])
                except (TypeError, ValueError) as e:
                    raise BoardConfigError(f"Bad base/ngpio for GPIO chip {name}: {e}") from e
                chips[name] = (chip_dir or name, base, ngpio)
                continue

            if chip_dir is None:
                raise BoardConfigError(f"Cannot find GPIO chip {name}")

            base, ngpio = self._read_chip_numbering(chip_dir)
            chips[name] = (chip_dir, base, ngpio)
            self.logger.debug(f"GPIO chip {name}: base={base}, ngpio={ngpio}")

        return chips

    def _read_chip_numbering(self, chip_dir: str) -> tuple:
        gpio_dir = Path(chip_dir) / "gpio"
        try:
            entries = sorted(p for p in gpio_dir.iterdir() if p.name.startswith("gpiochip"))
            if not entries:
                raise BoardConfigError(f"No gpiochip entry under {gpio_dir}")
            base = int((entries[0] / "base").read_text().strip())
            ngpio = int((entries[0] / "ngpio").read_text().strip())
        except (OSError, ValueError) as e:
            raise BoardConfigError(f"Cannot read chip numbering from {gpio_dir}: {e}") from e
        return base, ngpio

    def _resolve_pwm_chips(self) -> Dict[str, str]:
        """Map PWM controller name -> pwmchipN directory"""
        overrides = self._config["pwm_chips"]
        pwm_dirs = {}

        for name in sorted({p.pwm_chip_sysfs for p in self._pins if p.pwm_chip_sysfs}):
            if overrides.get(name):
                pwm_dirs[name] = str(overrides[name])
                continue

            # Some device trees leave PWM controllers disabled; hide PWM on those pins
            chip_dir = self._find_device_dir(name)
            if chip_dir is None:
                continue
            pwm_dir = Path(chip_dir) / "pwm"
            if not pwm_dir.is_dir():
                continue
            entries = sorted(p for p in pwm_dir.iterdir() if p.name.startswith("pwmchip"))
            if entries:
                pwm_dirs[name] = str(entries[0])

        if len(pwm_dirs) < len({p.pwm_chip_sysfs for p in self._pins if p.pwm_chip_sysfs}):
            self.logger.warning("Some PWM controllers are not present; PWM hidden on their pins")

        return pwm_dirs


def _ngpio_key(key: Any) -> Optional[int]:
    return None if key is None else int(key)


def _lookup_by_ngpio(values: Dict[Optional[int], Any], ngpio: int) -> Any:
    """Pick the entry for this ngpio, falling back to an unkeyed entry"""
    if ngpio in values:
        return values[ngpio]
    return values.get(None)


def load_board_table(
    config_path: Path,
    device_roots: Optional[Sequence[str]] = None,
) -> BoardDescriptorTable:
    """
    Quick table creation from a board file.

    Example:
        table = load_board_table(Path("config/board.example.yaml"))
    """
    return BoardConfig(config_path, device_roots=device_roots).build_table()
