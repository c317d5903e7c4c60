"""Configuration settings for the application."""

import copy
import os
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .logging_utils import get_logger

# Default configuration structure
DEFAULT_CONFIG = {
    'editor': {
        'new_column_prefix': 'Column',
        'default_filename': 'Untitled.csv',
        'confirm_unsaved': True
    },
    'logging': {
        'level': 'INFO'
    },
    'recent_files': [],  # Most recent first
    'max_recent_files': 10
}

CONFIG_DIR_ENV = 'SIMPLECSV_CONFIG_DIR'


class Config:
    """Configuration manager."""

    def __init__(self, config_dir: Optional[Path] = None, logger: Optional[logging.Logger] = None):
        """Initialize configuration."""
        self.logger = logger or get_logger("simplecsv.config")
        env_dir = os.environ.get(CONFIG_DIR_ENV)
        if config_dir is not None:
            self.config_dir = Path(config_dir)
        elif env_dir:
            self.config_dir = Path(env_dir)
        else:
            self.config_dir = Path.home() / '.config' / 'simplecsv'
        self.config_file = self.config_dir / 'config.json'
        self.config = {}  # Start empty, load will merge with defaults
        self.load_config()
        self._ensure_defaults()

    def _ensure_defaults(self):
        """Ensure all default keys exist in the loaded config."""
        changed = False
        for key, default_value in DEFAULT_CONFIG.items():
            if key not in self.config:
                self.config[key] = copy.deepcopy(default_value)
                changed = True
            elif isinstance(default_value, (dict, list)) and not isinstance(self.config[key], type(default_value)):
                self.logger.warning(f"Config entry '{key}' has the wrong type. Using defaults for it.")
                self.config[key] = copy.deepcopy(default_value)
                changed = True
            elif isinstance(default_value, dict):
                # Nested defaults too
                for sub_key, sub_default_value in default_value.items():
                    if sub_key not in self.config[key]:
                        self.config[key][sub_key] = sub_default_value
                        changed = True
        if changed:
            self.save_config()

    def load_config(self):
        """Load configuration from file."""
        try:
            if self.config_file.exists():
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    self.config = loaded
                else:
                    self.logger.warning("Config file is not a JSON object. Starting with defaults.")
                    self.config = copy.deepcopy(DEFAULT_CONFIG)
            else:
                self.config = copy.deepcopy(DEFAULT_CONFIG)
        except json.JSONDecodeError:
            self.logger.warning("Error decoding config file. Starting with defaults.")
            self.config = copy.deepcopy(DEFAULT_CONFIG)
        except OSError as e:
            self.logger.warning(f"Error loading config: {e}. Starting with defaults.")
            self.config = copy.deepcopy(DEFAULT_CONFIG)

    def save_config(self):
        """Save configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4)
        except OSError as e:
            self.logger.error(f"Error saving config: {e}")

    def get_editor_config(self) -> Dict:
        """Get editor configuration."""
        return self.config.get('editor', DEFAULT_CONFIG['editor'])

    def set_editor_config(self, **kwargs):
        """Set editor configuration parameters."""
        if 'editor' not in self.config:
            self.config['editor'] = {}
        self.config['editor'].update(kwargs)
        self.save_config()

    def get_log_level(self) -> str:
        return self.config.get('logging', {}).get('level', DEFAULT_CONFIG['logging']['level'])

    # --- Recent files ---

    def get_recent_files(self) -> List[str]:
        """Get recently opened files, most recent first."""
        return list(self.config.get('recent_files', []))

    def add_recent_file(self, path) -> None:
        """Move `path` to the front of the recent list, trimming to max_recent_files."""
        entry = str(Path(path))
        recent = [p for p in self.get_recent_files() if p != entry]
        recent.insert(0, entry)
        limit = self.config.get('max_recent_files', DEFAULT_CONFIG['max_recent_files'])
        self.config['recent_files'] = recent[:limit]
        self.save_config()

    def clear_recent_files(self) -> None:
        self.config['recent_files'] = []
        self.save_config()
