"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_recipe_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate recipe repository parameters."""
        errors = []

        for field in ("group_id", "artifact_id"):
            if field in params:
                value = params[field]
                if _is_blank(value):
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a non-empty string",
                        value=value
                    ))
                elif any(sep in value for sep in (":", "/", "\\")) or any(c.isspace() for c in value):
                    errors.append(ValidationError(
                        field=field,
                        message="Must not contain ':', path separators or whitespace",
                        value=value
                    ))

        if "default_version" in params and _is_blank(params["default_version"]):
            errors.append(ValidationError(
                field="default_version",
                message="Must be a non-empty string",
                value=params["default_version"]
            ))

        if "location" in params:
            value = params["location"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="location",
                    message="Must be a string",
                    value=value
                ))
            elif ".." in value.replace("\\", "/").split("/"):
                errors.append(ValidationError(
                    field="location",
                    message="Must not escape the bundle root",
                    value=value
                ))

        if "properties_file" in params and _is_blank(params["properties_file"]):
            errors.append(ValidationError(
                field="properties_file",
                message="Must be a non-empty string",
                value=params["properties_file"]
            ))

        return errors

    @staticmethod
    def validate_plugin_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate default plugin version parameters."""
        errors = []

        for field in ("maven_rewrite_plugin_version", "gradle_rewrite_plugin_version"):
            if field in params and _is_blank(params[field]):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a non-empty version string",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, validate in (
            ("recipes", ConfigValidator.validate_recipe_params),
            ("plugins", ConfigValidator.validate_plugin_params),
        ):
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

        unknown = set(config) - {"recipes", "plugins"}
        for section in sorted(unknown):
            errors.append(ValidationError(
                field=section,
                message="Unknown configuration section",
                value=config[section]
            ))

        return errors
