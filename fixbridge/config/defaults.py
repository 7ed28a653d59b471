"""Default configuration parameters for the translation layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SymbologyParams:
    """Symbology source parameters."""
    path: str = "symbology.conf"     # Mapping file, relative to the config dir
    passthrough: bool = False        # Skip the file and translate nothing


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class BridgeConfig:
    """Complete default configuration."""
    symbology: SymbologyParams
    logging: LoggingParams


def get_default_config() -> BridgeConfig:
    """Get the default configuration instance."""
    return BridgeConfig(
        symbology=SymbologyParams(),
        logging=LoggingParams(),
    )
