"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import CatalogError
from ..models.enums import InstrumentCategory
from ..models.instrument import NO_FIXED_RATE, Instrument
from .defaults import (
    DefaultConfig,
    ExchangeParams,
    LoggingParams,
    default_instrument_entries,
    get_default_config,
)
from .validation import CATEGORY_ALIASES, ConfigValidator, ValidationError

CONFIG_FILENAME = "exchange.yaml"


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

    def load_exchange_config(self) -> dict[str, Any]:
        """Load exchange configuration overrides from YAML."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}

        if not isinstance(file_config, dict):
            raise CatalogError(
                f"{CONFIG_FILENAME} must contain a mapping at the top level",
                errors=[ValidationError(
                    field=CONFIG_FILENAME,
                    message="Must be a mapping",
                    value=file_config
                )],
                context={"config_dir": str(self.config_dir)},
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. exchange.yaml in the config directory
        3. Built-in defaults (lowest priority)

        The instruments list is replaced as a whole, never merged entry by entry.
        """
        config = self._dataclass_to_dict(self.defaults)
        config["instruments"] = default_instrument_entries()

        config = self._deep_merge(config, self.load_exchange_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_exchange_params(self, config: Optional[dict[str, Any]] = None) -> ExchangeParams:
        """Build validated exchange parameters from merged configuration."""
        if config is None:
            config = self.merge_config()

        params = config.get("exchange", {})
        errors = ConfigValidator.validate_exchange_params(params)
        if errors:
            raise CatalogError(
                "Invalid exchange configuration",
                errors=errors,
                context={"config_dir": str(self.config_dir)},
            )

        return ExchangeParams(**params)

    def load_logging_params(self, config: Optional[dict[str, Any]] = None) -> LoggingParams:
        """Build validated logging parameters from merged configuration."""
        if config is None:
            config = self.merge_config()

        params = config.get("logging", {})
        errors = ConfigValidator.validate_logging_params(params)
        if errors:
            raise CatalogError(
                "Invalid logging configuration",
                errors=errors,
                context={"config_dir": str(self.config_dir)},
            )

        return LoggingParams(**params)

    def load_catalog(self, config: Optional[dict[str, Any]] = None) -> tuple[Instrument, ...]:
        """Build the validated instrument catalog from merged configuration."""
        if config is None:
            config = self.merge_config()

        return build_catalog(config.get("instruments", []))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_instrument(entry: dict[str, Any]) -> Instrument:
    """Convert a validated catalog entry into an Instrument."""
    category = InstrumentCategory(CATEGORY_ALIASES[str(entry["category"]).lower()])
    fixed_rate = entry.get("fixed_rate")

    return Instrument(
        symbol=entry["symbol"],
        category=category,
        par_value=entry["par_value"],
        last_dividend=entry["last_dividend"],
        fixed_rate=float(fixed_rate) if fixed_rate is not None else NO_FIXED_RATE,
    )


def build_catalog(entries: Any) -> tuple[Instrument, ...]:
    """
    Validate catalog entries and convert them into instruments.

    Raises:
        CatalogError: any entry is invalid or a symbol is repeated
    """
    errors = ConfigValidator.validate_catalog(entries)
    if errors:
        raise CatalogError(
            f"Instrument catalog has {len(errors)} invalid field(s)",
            errors=errors,
        )

    return tuple(build_instrument(entry) for entry in entries)
