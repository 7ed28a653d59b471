"""Configuration loader with defaults, file and caller override precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging import configure_logging
from ..symbology import PassthroughSymbology, Symbology, SymbologyTable
from .defaults import BridgeConfig, LoggingParams, SymbologyParams, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "bridge.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: BridgeConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load bridge.yaml overrides, empty if the file does not exist."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not read {config_file}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_file} must contain a mapping")

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. bridge.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_settings(self, overrides: Optional[dict[str, Any]] = None) -> BridgeConfig:
        """
        Merge and validate configuration into a BridgeConfig.

        Raises:
            ConfigurationError: If any merged value fails validation
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigurationError(f"Invalid bridge configuration: {details}", errors=errors)

        return BridgeConfig(
            symbology=self._build_params(SymbologyParams, config["symbology"]),
            logging=self._build_params(LoggingParams, config["logging"]),
        )

    def create_symbology(self, settings: BridgeConfig) -> Symbology:
        """
        Build the symbology described by settings.

        Raises:
            SymbologyLoadError: If the mapping file cannot be read
        """
        if settings.symbology.passthrough:
            return PassthroughSymbology()

        path = Path(settings.symbology.path)
        if not path.is_absolute():
            path = self.config_dir / path
        return SymbologyTable.load(path)

    def apply_logging(self, settings: BridgeConfig) -> None:
        """Configure structlog from the logging section of settings."""
        configure_logging(
            level=settings.logging.level,
            format_json=settings.logging.format_json,
            include_timestamp=settings.logging.include_timestamp,
            include_caller=settings.logging.include_caller,
        )

    @staticmethod
    def _build_params(params_cls: type, values: dict[str, Any]) -> Any:
        known = {f.name for f in fields(params_cls)}
        return params_cls(**{k: v for k, v in values.items() if k in known})

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
