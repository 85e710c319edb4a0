# File: src/growl/services/config_loader.py

import logging
import os
import yaml
from pydantic import ValidationError
from ..domain import Config
from ..const import CONFIG_FILE, DEFAULT_CONFIG_YAML, LOGGER_NAME
from ..errors import ConfigError

logger = logging.getLogger(LOGGER_NAME)


class ConfigLoader:
    """Reads growl.yaml into a Config, and scaffolds new ones."""

    def load(self, path: str = CONFIG_FILE) -> Config:
        if not os.path.exists(path):
            raise ConfigError(f"{path} not found. Generate one with growl init")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML syntax in {path}: {e}")

        logger.debug(f"Loaded config from {os.path.abspath(path)}")
        return self._parse(data, path)

    def _parse(self, data, path: str) -> Config:
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must be a mapping with 'shell', 'env' and 'commands' keys")

        try:
            config = Config.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}:\n{e}")

        self._warn_duplicates(config)
        return config

    def _warn_duplicates(self, config: Config):
        seen = set()
        for cmd in config.commands:
            if cmd.name in seen:
                logger.debug(f"Command '{cmd.name}' is defined more than once; the first definition wins.")
            seen.add(cmd.name)

    def init(self, path: str = CONFIG_FILE) -> str:
        if os.path.exists(path):
            raise ConfigError(f"{path} already exists")

        with open(path, 'w', encoding='utf-8') as f:
            f.write(DEFAULT_CONFIG_YAML)
        logger.debug(f"Wrote default config to {path}")
        return path
