"""
API key storage for checkpwn.

The key is read from the HIBP_API_KEY environment variable, falling back
to ~/.config/checkpwn/checkpwn.yml.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from checkpwn.errors import ConfigurationMissing

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "checkpwn"
CONFIG_FILE_NAME = "checkpwn.yml"
API_KEY_ENV_VAR = "HIBP_API_KEY"
CONFIG_DIR_ENV_VAR = "CHECKPWN_CONFIG_DIR"


def get_config_path() -> Path:
    """Path of the checkpwn configuration file."""
    config_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    if config_dir:
        return Path(config_dir) / CONFIG_FILE_NAME
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class CheckpwnConfig:
    """Configuration for checkpwn."""

    api_key: str = ""

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "CheckpwnConfig":
        """Load configuration from a YAML file.

        Raises:
            ConfigurationMissing: file missing, unreadable or without api_key
        """
        path = Path(path) if path else get_config_path()

        try:
            data = yaml.safe_load(path.read_text())
        except FileNotFoundError as e:
            raise ConfigurationMissing(
                f"No configuration found at {path}. Run 'checkpwn register <api_key>' first."
            ) from e
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationMissing(f"Failed to read configuration {path}: {e}") from e

        if not isinstance(data, dict) or not data.get("api_key"):
            raise ConfigurationMissing(f"Configuration {path} does not contain an api_key")

        return cls(api_key=str(data["api_key"]).strip())

    @classmethod
    def load(cls, path: str | Path | None = None) -> "CheckpwnConfig":
        """Load configuration, preferring the environment over the file."""
        api_key = os.environ.get(API_KEY_ENV_VAR)
        if api_key:
            logger.debug(f"Using API key from {API_KEY_ENV_VAR}")
            return cls(api_key=api_key.strip())
        return cls.from_file(path)

    def save(self, path: str | Path | None = None) -> Path:
        """Write configuration to a YAML file.

        Returns:
            Path written to
        """
        path = Path(path) if path else get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as handle:
            handle.write(yaml.safe_dump({"api_key": self.api_key}, default_flow_style=False))

        # O_CREAT only applies the mode to new files
        try:
            path.chmod(0o600)
        except OSError:
            logger.warning(f"Could not restrict permissions on {path}")
        logger.info(f"Saved configuration to {path}")
        return path
