import logging
import logging.config
from pathlib import Path
from typing import Union

import yaml

from hrcache.utils.config_parser import LoggingConfig


class LoggingConfiguration:
    """Logging setup from a YAML dictConfig file."""

    @staticmethod
    def setup_logging(
        config_path: str = "config/logging.yaml",
        default_level: Union[int, str] = logging.INFO,
    ) -> bool:
        """Configure logging from a YAML file.

        Returns True when the file was applied, False when falling back to
        ``logging.basicConfig``.
        """
        path = Path(config_path)
        if not path.exists():
            logging.basicConfig(level=default_level)
            logging.warning(
                f"Logging config file not found at {config_path}. Falling back to basic configuration."
            )
            return False

        try:
            with open(path, "rt") as f:
                config = yaml.safe_load(f.read())
            logging.config.dictConfig(config)
        except Exception as e:
            logging.basicConfig(level=default_level)
            logging.warning(f"Failed to load logging config from {config_path}. Error: {e}")
            return False

        return True

    @classmethod
    def from_config(cls, config: LoggingConfig) -> bool:
        return cls.setup_logging(config.config_path, config.level.upper())
