"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import SECTIONS

SMOOTHING_TYPES = ("SMA", "EMA", "SMA + Bollinger Bands")
EXTREMA_PERIODS = ("week", "month", "year")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_known_keys(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections and keys the engine does not know about."""
        errors = []

        for section, values in config.items():
            if section not in SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=values
                ))
                continue
            if not isinstance(values, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Section must be a mapping",
                    value=values
                ))
                continue
            known = {f.name for f in fields(SECTIONS[section])}
            for key in values:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=values[key]
                    ))

        return errors

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average parameters."""
        errors = []

        for name in ("sma_periods", "ema_periods"):
            if name in params:
                value = params[name]
                if not isinstance(value, (list, tuple)) or not all(_is_positive_int(v) for v in value):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a list of positive integers",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        errors = []

        for name in ("period", "smoothing_length"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        if "smoothing_type" in params and params["smoothing_type"] not in SMOOTHING_TYPES:
            errors.append(ValidationError(
                field="smoothing_type",
                message=f"Must be one of {', '.join(SMOOTHING_TYPES)}",
                value=params["smoothing_type"]
            ))

        if "band_multiplier" in params:
            value = params["band_multiplier"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="band_multiplier",
                    message="Must be a non-negative number",
                    value=value
                ))

        for name in ("oversold", "overbought"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        oversold = params.get("oversold")
        overbought = params.get("overbought")
        if _is_number(oversold) and _is_number(overbought) and oversold >= overbought:
            errors.append(ValidationError(
                field="oversold",
                message="Must be below overbought",
                value=oversold
            ))

        return errors

    @staticmethod
    def validate_divergence_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate divergence parameters."""
        errors = []

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        for name in ("lookback_left", "lookback_right"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_fast_slow(params: dict[str, Any], fast_key: str, slow_key: str,
                           extra_keys: tuple[str, ...] = ()) -> list[ValidationError]:
        """Validate a fast/slow period pair (MACD, golden/death cross)."""
        errors = []

        for name in (fast_key, slow_key) + extra_keys:
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        fast = params.get(fast_key)
        slow = params.get(slow_key)
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field=fast_key,
                message=f"Must be smaller than {slow_key}",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_bollinger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Bollinger band parameters."""
        errors = []

        if "period" in params and not _is_positive_int(params["period"]):
            errors.append(ValidationError(
                field="period",
                message="Must be a positive integer",
                value=params["period"]
            ))

        if "devs" in params:
            value = params["devs"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="devs",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_extrema_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate period extrema parameters."""
        errors = []

        if "periods" in params:
            value = params["periods"]
            if not isinstance(value, (list, tuple)) or not all(v in EXTREMA_PERIODS for v in value):
                errors.append(ValidationError(
                    field="periods",
                    message=f"Must be a list drawn from {', '.join(EXTREMA_PERIODS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "max_points" in params:
            value = params["max_points"]
            if not _is_positive_int(value) or value < 2:
                errors.append(ValidationError(
                    field="max_points",
                    message="Must be an integer >= 2",
                    value=value
                ))

        if "date_format" in params and not isinstance(params["date_format"], str):
            errors.append(ValidationError(
                field="date_format",
                message="Must be a strftime format string",
                value=params["date_format"]
            ))

        return errors

    @staticmethod
    def validate_analysis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate whole-request parameters."""
        errors = []

        if "min_points" in params:
            value = params["min_points"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="min_points",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "enforce_min_points" in params and not isinstance(params["enforce_min_points"], bool):
            errors.append(ValidationError(
                field="enforce_min_points",
                message="Must be a boolean",
                value=params["enforce_min_points"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_known_keys(config)
        if errors:
            return errors

        if "moving_average" in config:
            errors.extend(ConfigValidator.validate_moving_average_params(config["moving_average"]))

        if "rsi" in config:
            errors.extend(ConfigValidator.validate_rsi_params(config["rsi"]))

        if "divergence" in config:
            errors.extend(ConfigValidator.validate_divergence_params(config["divergence"]))

        if "macd" in config:
            errors.extend(ConfigValidator.validate_fast_slow(
                config["macd"], "fast", "slow", extra_keys=("signal",)
            ))

        if "bollinger" in config:
            errors.extend(ConfigValidator.validate_bollinger_params(config["bollinger"]))

        if "cross" in config:
            errors.extend(ConfigValidator.validate_fast_slow(
                config["cross"], "fast_period", "slow_period"
            ))

        if "extrema" in config:
            errors.extend(ConfigValidator.validate_extrema_params(config["extrema"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "analysis" in config:
            errors.extend(ConfigValidator.validate_analysis_params(config["analysis"]))

        return errors
