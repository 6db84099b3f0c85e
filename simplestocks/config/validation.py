"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

# Accepted category spellings; "common" is the usual name for ordinary stock
CATEGORY_ALIASES = {
    "ordinary": "ordinary",
    "common": "ordinary",
    "preferred": "preferred",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates exchange parameters and instrument catalog entries."""

    @staticmethod
    def validate_exchange_params(params: Any) -> list[ValidationError]:
        """Validate exchange parameters."""
        if not isinstance(params, dict):
            return [ValidationError(
                field="exchange",
                message="Must be a mapping",
                value=params
            )]

        errors = []

        known = {"name", "default_window_minutes", "extended_window_minutes", "sample_price"}
        for unknown in sorted(set(params) - known):
            errors.append(ValidationError(
                field=unknown,
                message="Unknown exchange parameter",
                value=params[unknown]
            ))

        if "name" in params:
            value = params["name"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="name",
                    message="Must be a non-empty string",
                    value=value
                ))

        for window_field in ("default_window_minutes", "extended_window_minutes"):
            if window_field in params:
                value = params[window_field]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=window_field,
                        message="Must be a positive number of minutes",
                        value=value
                    ))

        if "sample_price" in params:
            value = params["sample_price"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="sample_price",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: Any) -> list[ValidationError]:
        """Validate logging parameters."""
        if not isinstance(params, dict):
            return [ValidationError(
                field="logging",
                message="Must be a mapping",
                value=params
            )]

        errors = []

        known = {"level", "format_json", "include_timestamp", "include_caller"}
        for unknown in sorted(set(params) - known):
            errors.append(ValidationError(
                field=f"logging.{unknown}",
                message="Unknown logging parameter",
                value=params[unknown]
            ))

        level = params.get("level")
        if level is not None and str(level).upper() not in LOG_LEVELS:
            errors.append(ValidationError(
                field="logging.level",
                message="Must be a standard logging level",
                value=level
            ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_instrument(entry: Any, position: int = 0) -> list[ValidationError]:
        """Validate a single instrument catalog entry."""
        prefix = f"instruments[{position}]"

        if not isinstance(entry, dict):
            return [ValidationError(
                field=prefix,
                message="Must be a mapping",
                value=entry
            )]

        errors = []

        symbol = entry.get("symbol")
        if not isinstance(symbol, str) or not symbol.strip():
            errors.append(ValidationError(
                field=f"{prefix}.symbol",
                message="Must be a non-empty string",
                value=symbol
            ))

        category = entry.get("category")
        normalized = CATEGORY_ALIASES.get(str(category).lower()) if category is not None else None
        if normalized is None:
            errors.append(ValidationError(
                field=f"{prefix}.category",
                message=f"Must be one of {sorted(CATEGORY_ALIASES)}",
                value=category
            ))

        for int_field in ("par_value", "last_dividend"):
            value = entry.get(int_field)
            if not _is_integer(value) or value < 0:
                errors.append(ValidationError(
                    field=f"{prefix}.{int_field}",
                    message="Must be a non-negative integer",
                    value=value
                ))

        fixed_rate = entry.get("fixed_rate")
        if normalized == "preferred":
            if not _is_number(fixed_rate) or fixed_rate < 0:
                errors.append(ValidationError(
                    field=f"{prefix}.fixed_rate",
                    message="Preferred instruments need a non-negative fixed rate",
                    value=fixed_rate
                ))
        elif fixed_rate is not None and fixed_rate != -1:
            errors.append(ValidationError(
                field=f"{prefix}.fixed_rate",
                message="Only preferred instruments carry a fixed rate",
                value=fixed_rate
            ))

        return errors

    @staticmethod
    def validate_catalog(entries: Any) -> list[ValidationError]:
        """Validate the full instrument catalog, including symbol uniqueness."""
        if not isinstance(entries, list):
            return [ValidationError(
                field="instruments",
                message="Must be a list of instrument entries",
                value=entries
            )]

        errors = []
        seen: set[str] = set()

        for position, entry in enumerate(entries):
            errors.extend(ConfigValidator.validate_instrument(entry, position))

            symbol = entry.get("symbol") if isinstance(entry, dict) else None
            if isinstance(symbol, str):
                if symbol in seen:
                    errors.append(ValidationError(
                        field=f"instruments[{position}].symbol",
                        message="Duplicate symbol",
                        value=symbol
                    ))
                seen.add(symbol)

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "exchange" in config:
            errors.extend(ConfigValidator.validate_exchange_params(config["exchange"]))

        if "instruments" in config:
            errors.extend(ConfigValidator.validate_catalog(config["instruments"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
