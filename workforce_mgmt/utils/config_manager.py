"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..models.config import WorkforceConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the per-project workforce configuration."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = data_dir
        self.config_file = data_dir / CONFIG_FILE_NAME

    def get_config(self) -> Optional[WorkforceConfig]:
        """Load configuration, or None if missing or unreadable."""
        if not self.config_file.exists():
            return None
        try:
            data = json.loads(self.config_file.read_text())
            return WorkforceConfig.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring invalid config file {self.config_file}: {e}")
            return None

    def get_or_default(self) -> WorkforceConfig:
        """Load configuration, falling back to defaults."""
        return self.get_config() or WorkforceConfig()

    def save_config(self, config: WorkforceConfig) -> None:
        """Save configuration."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2))

    def update(self, **fields) -> WorkforceConfig:
        """Update configuration fields and save.

        Raises:
            ValidationError: If a field value is invalid
            KeyError: If a field does not exist
        """
        config = self.get_or_default()
        data = config.model_dump()
        for key, value in fields.items():
            if key not in data:
                raise KeyError(key)
            data[key] = value
        config = WorkforceConfig.model_validate(data)
        self.save_config(config)
        return config
