"""
Settings management

Loads YAML settings files with per-environment overlays
"""
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from hdr_pipeline.core.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError


class Config:
    """
    Settings manager

    Usage:
        config = Config()  # default: development environment
        config = Config(env="production")

        temp_path = config.get("toolchain.temp_path")
        pfilt = config.get("tools.pfilt", default="pfilt")
    """

    ENV_PREFIX = "HDR_"
    DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

    _instance: "Config | None" = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs) -> "Config":
        """Singleton"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, env: str | None = None, config_dir: Path | None = None):
        if Config._initialized:
            return

        load_dotenv()

        # argument > environment variable > default
        self.env = env or os.getenv("HDR_ENV", "development")

        # argument > HDR_CONFIG_DIR > settings shipped inside the package
        self.config_dir = Path(config_dir or os.getenv("HDR_CONFIG_DIR") or self.DEFAULT_CONFIG_DIR)

        self._config: dict[str, Any] = {}
        self._load_config()

        Config._initialized = True

    def _load_config(self) -> None:
        """Load base settings, then the environment overlay"""
        base_config_path = self.config_dir / "settings.yaml"
        if base_config_path.exists():
            self._config = self._load_yaml(base_config_path)
        else:
            raise ConfigNotFoundError(
                f"Base settings file not found: {base_config_path}"
            )

        env_config_path = self.config_dir / f"settings.{self.env}.yaml"
        if env_config_path.exists():
            env_config = self._load_yaml(env_config_path)
            self._deep_merge(self._config, env_config)

        self._apply_env_overrides()

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error: {path}", {"error": str(e)})

    def _deep_merge(self, base: dict, override: dict) -> None:
        """Recursive dict merge, override wins"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self) -> None:
        """Override settings from HDR_ variables"""
        for key, value in os.environ.items():
            if key.startswith(self.ENV_PREFIX) and "__" in key:
                # HDR_TOOLCHAIN__TEMP_PATH -> toolchain.temp_path
                config_key = key[len(self.ENV_PREFIX):].lower().replace("__", ".")
                self._set_nested(config_key, value)

    def _set_nested(self, key: str, value: Any) -> None:
        keys = key.split(".")
        current = self._config

        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting using dot notation

        Args:
            key: setting key (e.g. "toolchain.temp_path")
            default: value returned when the key is missing

        Returns:
            setting value or default
        """
        keys = key.split(".")
        current = self._config

        for k in keys:
            if isinstance(current, dict) and k in current:
                current = current[k]
            else:
                return default

        return current

    def get_required(self, key: str) -> Any:
        """
        Look up a setting that must exist

        Raises:
            ConfigValidationError: the key is missing
        """
        value = self.get(key)
        if value is None:
            raise ConfigValidationError(f"Required setting missing: {key}")
        return value

    def get_section(self, section: str) -> dict[str, Any]:
        return self.get(section, {})

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (for tests)"""
        cls._instance = None
        cls._initialized = False


def get_config() -> Config:
    """Return the Config instance"""
    return Config()
