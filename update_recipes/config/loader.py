"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields, is_dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import InvalidConfigurationError
from .defaults import (
    DefaultConfig,
    PluginVersionParams,
    RecipeRepositoryParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILE_NAME = "update-recipes.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_file: Optional[Path]
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_file: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        return cls(
            config_file=Path(config_file) if config_file is not None else None,
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file, if any."""
        if self.config_file is None or not self.config_file.exists():
            return {}

        with open(self.config_file, encoding="utf-8") as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise InvalidConfigurationError(
                f"Configuration file must contain a mapping: {self.config_file}",
                context={"config_file": str(self.config_file)},
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Configuration file overrides
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the typed configuration."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
            raise InvalidConfigurationError(
                "Invalid recipe configuration: " + "; ".join(error_msgs),
                errors=errors,
            )

        return DefaultConfig(
            recipes=self._build(RecipeRepositoryParams, config.get("recipes", {})),
            plugins=self._build(PluginVersionParams, config.get("plugins", {})),
        )

    def _build(self, params_cls: type, values: dict[str, Any]) -> Any:
        """Instantiate a params dataclass, rejecting unknown keys."""
        known = {f.name for f in fields(params_cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown {params_cls.__name__} keys: {', '.join(unknown)}",
                context={"unknown_keys": unknown},
            )
        return params_cls(**values)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if is_dataclass(obj):
            result = {}
            for field in fields(obj):
                value = getattr(obj, field.name)
                if is_dataclass(value):
                    result[field.name] = self._dataclass_to_dict(value)
                else:
                    result[field.name] = value
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
