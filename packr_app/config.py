"""Configuration helpers for the packing engine."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import List, Optional

from models.taxonomy import BagSize, validate_bag_size

DEFAULT_ESSENTIAL_KEYWORDS = ("undergarments", "sleepwear")


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class PackrConfig:
    """Configuration values for the packing engine.

    Bag capacities and garment dimensions are not part of this object; they
    are passed to the engine as immutable tables so they can be swapped
    independently.
    """

    environment: str | None = None
    log_level: str = "INFO"
    default_bag_size: BagSize = BagSize.CARRY_ON
    bag_safety_margin: float = 0.85
    essential_keywords: List[str] = field(default_factory=lambda: list(DEFAULT_ESSENTIAL_KEYWORDS))
    max_accessories_for_formal: int = 2

    def __post_init__(self) -> None:
        self.default_bag_size = validate_bag_size(self.default_bag_size)
        self.bag_safety_margin = float(self.bag_safety_margin)
        if not 0 < self.bag_safety_margin <= 1:
            raise ValueError(f"bag_safety_margin must be within (0, 1], got {self.bag_safety_margin}")
        self.max_accessories_for_formal = int(self.max_accessories_for_formal)
        if self.max_accessories_for_formal < 0:
            raise ValueError("max_accessories_for_formal cannot be negative")
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_env(cls) -> "PackrConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables win over values read from the file.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("PACKR_CONFIG_PATH")
        config_dir = Path(os.getenv("PACKR_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path: Optional[Path] = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        keywords = get_value("essential_keywords")
        return cls(
            environment=env_name,
            log_level=str(get_value("log_level", "INFO")),
            default_bag_size=str(get_value("default_bag_size", BagSize.CARRY_ON.value)),
            bag_safety_margin=float(get_value("bag_safety_margin", "0.85")),
            essential_keywords=_split_csv(keywords) if keywords is not None else list(DEFAULT_ESSENTIAL_KEYWORDS),
            max_accessories_for_formal=int(get_value("max_accessories_for_formal", "2")),
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
