"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_symbology_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate symbology parameters."""
        errors = []

        if "path" in params:
            value = params["path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="path",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "passthrough" in params:
            value = params["passthrough"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="passthrough",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "symbology": ConfigValidator.validate_symbology_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in validators.items():
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
