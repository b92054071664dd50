"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import SECTIONS, DefaultConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """Load symbol-specific configuration overrides."""
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}

        return (symbols_config.get("symbols") or {}).get(symbol, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        symbol: str,
        request_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-request overrides (highest priority)
        2. Symbol-specific overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)
        for layer in (self.load_symbol_config(symbol), request_overrides or {}):
            config = _merge_layer(config, layer)
        return config


def _merge_layer(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Overlay one tier on another, recursing into nested sections."""
    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge_layer(current, value)
        else:
            merged[key] = value
    return merged


def config_from_dict(config: dict[str, Any]) -> DefaultConfig:
    """
    Rebuild a typed configuration from a merged dictionary.

    Missing sections or keys keep their defaults; YAML lists become tuples.
    The dictionary should be validated first, unknown keys raise TypeError.
    """
    sections = {}
    for name, params_cls in SECTIONS.items():
        values = dict(config.get(name) or {})
        for field in fields(params_cls):
            if isinstance(values.get(field.name), list):
                values[field.name] = tuple(values[field.name])
        sections[name] = params_cls(**values)
    return DefaultConfig(**sections)
