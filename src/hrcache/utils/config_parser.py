import json
from dataclasses import dataclass, field

from hrcache.utils.exceptions import ConfigError


@dataclass
class CacheConfig:
    default_duration_ms: int = 5 * 60 * 1000

    def __post_init__(self):
        value = self.default_duration_ms
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(
                f"default_duration_ms must be a non-negative integer, got {self.default_duration_ms!r}"
            )


@dataclass
class LoggingConfig:
    config_path: str = "config/logging.yaml"
    level: str = "INFO"


@dataclass
class AppConfig:
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: str = "config/config.json") -> AppConfig:
    """Load application configuration from a JSON file."""
    try:
        with open(config_path, "r") as f:
            data = json.load(f)
        cache = CacheConfig(**data.get("cache", {}))
        logging_config = LoggingConfig(**data.get("logging", {}))
        return AppConfig(cache=cache, logging=logging_config)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")
    except json.JSONDecodeError:
        raise ConfigError(f"Invalid JSON in configuration file: {config_path}")
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigError(f"Configuration validation error: {e}")
