"""
Configuration loader for the WorkOS SDK.
Reads an optional JSON file and .env files; environment variables always win.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HTTP_CONFIG = {
    "connection_pool_size": 20,
    "connect_timeout": 10,
    "read_timeout": 30,
    "keep_alive": True,
    "verify_ssl": True,
}


class ConfigLoader:
    """Loads and validates configuration from JSON and .env files."""

    def __init__(self, config_file: Optional[str] = None, env_file: Optional[str] = ".env"):
        """
        Initialize config loader.

        Args:
            config_file: Path to an optional JSON configuration file
            env_file: Path to a .env file; missing files are skipped
        """
        self.config_file = config_file
        self.env_file = env_file
        self.config: Dict[str, Any] = {}
        self._load_environment_config()
        self._load_config()
        self._validate_config()

    def _load_environment_config(self):
        """Load variables from the .env file without overriding the real environment."""
        if not self.env_file:
            return
        env_path = Path(self.env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logger.debug("Loaded env config from %s", env_path)

    def _load_config(self):
        """Load configuration from JSON file."""
        if not self.config_file:
            return
        config_path = Path(self.config_file)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                self.config = json.load(f)
            logger.debug("Loaded configuration from: %s", config_path)
        except FileNotFoundError:
            raise ValueError(f"Configuration file {config_path} not found")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

    def _validate_config(self):
        """Validate section types."""
        if not isinstance(self.config, dict):
            raise ValueError("Configuration root must be a JSON object")
        for section in ("workos", "http", "logging"):
            if section in self.config and not isinstance(self.config[section], dict):
                raise ValueError(f"Configuration section '{section}' must be an object")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., "http.read_timeout")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value = self.config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_http_config(self) -> Dict[str, Any]:
        """Get transport settings merged over defaults."""
        merged = dict(DEFAULT_HTTP_CONFIG)
        merged.update(self.get("http", {}) or {})
        return merged

    def get_log_level(self) -> str:
        return os.getenv("WORKOS_LOG_LEVEL") or self.get("logging.level", "WARNING")

    def is_debug_mode(self) -> bool:
        return bool(self.get("logging.debug", False))

    def setup_logging(self):
        """Setup logging for the ``workos_sdk`` logger tree."""
        level = getattr(logging, str(self.get_log_level()).upper(), logging.WARNING)
        debug = self.is_debug_mode()
        if debug:
            level = logging.DEBUG

        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s" if debug else "%(levelname)s - %(message)s"

        sdk_logger = logging.getLogger("workos_sdk")
        if not sdk_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(format_str))
            sdk_logger.addHandler(handler)
        sdk_logger.setLevel(level)
        return sdk_logger
