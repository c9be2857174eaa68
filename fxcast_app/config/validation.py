"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_currency_code(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 3 and value.isalpha() and value.isupper()


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate history synthesis and classification parameters."""
        errors = []

        # Series lengths: a trend needs two points, a projection at least one
        if "history_days" in params:
            value = params["history_days"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                errors.append(ValidationError(
                    field="history_days",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        if "horizon_days" in params:
            value = params["horizon_days"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="horizon_days",
                    message="Must be a positive integer",
                    value=value
                ))

        for name in ("daily_volatility", "drift_range"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value >= 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number below 1",
                        value=value
                    ))

        if "stable_threshold_pct" in params:
            value = params["stable_threshold_pct"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="stable_threshold_pct",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "min_fit_points" in params:
            value = params["min_fit_points"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                errors.append(ValidationError(
                    field="min_fit_points",
                    message="Must be an integer of at least 2",
                    value=value
                ))
            elif isinstance(params.get("history_days"), int) and value > params["history_days"]:
                errors.append(ValidationError(
                    field="min_fit_points",
                    message=f"Must not exceed history_days ({params['history_days']})",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate base currency and supported currency list."""
        errors = []

        if "base_currency" in params:
            value = params["base_currency"]
            if not _is_currency_code(value):
                errors.append(ValidationError(
                    field="base_currency",
                    message="Must be a 3-letter uppercase ISO currency code",
                    value=value
                ))

        if "supported" in params:
            value = params["supported"]
            if not isinstance(value, (list, tuple)) or not value:
                errors.append(ValidationError(
                    field="supported",
                    message="Must be a non-empty list of currency codes",
                    value=value
                ))
            else:
                invalid = [code for code in value if not _is_currency_code(code)]
                if invalid:
                    errors.append(ValidationError(
                        field="supported",
                        message="Entries must be 3-letter uppercase ISO currency codes",
                        value=invalid
                    ))
                elif len(set(value)) != len(value):
                    errors.append(ValidationError(
                        field="supported",
                        message="Must not contain duplicates",
                        value=value
                    ))
                elif params.get("base_currency") in value:
                    errors.append(ValidationError(
                        field="supported",
                        message="Must not contain the base currency",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_rate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate live rate endpoint parameters."""
        errors = []

        if "api_url" in params:
            value = params["api_url"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="api_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        sections = {
            "forecast": ConfigValidator.validate_forecast_params,
            "currencies": ConfigValidator.validate_currency_params,
            "rate_source": ConfigValidator.validate_rate_source_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validate(config[section]))

        return errors
