"""
Config Store
============
Loads and saves config.json in the per-user config directory.

Philosophy:
    - load() never raises. Missing, unreadable, corrupt or schema-invalid
      files all read as an empty AppConfig, which sends the user to setup.
    - save() is the only writer and runs once, after discovery succeeds.
      Write failures propagate as OSError so setup can show them.
    - Single user, single process: no locking.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from daily.core.config import CONFIG_DIR
from daily.core.constants import CONFIG_FILE_NAME
from daily.models.app_config import AppConfig

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the AppConfig JSON document."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else CONFIG_DIR
        self.path = self.config_dir / CONFIG_FILE_NAME

    def load(self) -> AppConfig:
        """
        Read the persisted config.

        Returns
        -------
        AppConfig
            The stored config, or an empty one if there is nothing usable.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No config at %s, setup required", self.path)
            return AppConfig()
        except OSError as e:
            logger.warning("Could not read config %s: %s", self.path, e)
            return AppConfig()
        except UnicodeDecodeError as e:
            logger.warning("Config %s is not UTF-8 text, ignoring: %s", self.path, e)
            return AppConfig()

        try:
            return AppConfig.model_validate(json.loads(raw))
        except json.JSONDecodeError as e:
            logger.warning("Config %s is not valid JSON, ignoring: %s", self.path, e)
        except ValidationError as e:
            logger.warning("Config %s has an unexpected shape, ignoring: %s", self.path, e)
        return AppConfig()

    def save(self, config: AppConfig) -> Path:
        """
        Write config.json, creating the directory if needed.

        The document is written to a temporary file in the same directory
        and moved into place, so a failed write never leaves a truncated
        config behind.

        Raises
        ------
        OSError
            If the directory cannot be created or the file cannot be written.
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(config.model_dump(), indent=2)

        fd, tmp_path = tempfile.mkstemp(dir=self.config_dir, prefix=".config-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.info("Saved config to %s", self.path)
        return self.path
