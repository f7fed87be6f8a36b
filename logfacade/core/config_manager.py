import os
from typing import Dict, Any, Optional

import yaml

from .error_handling import ErrorContext, ErrorLogger, ErrorType
from .logging import logger
from ..utils.deep_merge import deep_merge

CONFIG_FILENAME = "logfacade.yaml"
INSTALL_TARGETS = ("auto", "module", "global", "interactive")

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": None,
    "isolate_subscriber_errors": True,
    "install_target": "module",
}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigManager:
    def __init__(self, config_dir: str = "config", environ: Optional[Dict[str, str]] = None):
        self.config_dir = config_dir
        self.config_path = os.path.join(config_dir, CONFIG_FILENAME)
        self._environ = os.environ if environ is None else environ
        self.config = self._load_config()

        logger.debug("Configuration manager initialized", config={
            "config_dir": config_dir,
            "config_exists": os.path.exists(self.config_path),
            "log_level": self.log_level,
            "install_target": self.install_target,
        })

    def _load_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug(f"Configuration file not found: {self.config_path}")
            return {}
        except yaml.YAMLError as e:
            ErrorLogger.log_error(
                error_type=ErrorType.CONFIG_ERROR,
                context=ErrorContext(config_path=self.config_path),
                original_exception=e
            )
            return {}

        section = data.get("logfacade", {}) if isinstance(data, dict) else {}
        if not isinstance(section, dict):
            ErrorLogger.log_error(
                error_type=ErrorType.CONFIG_ERROR,
                context=ErrorContext(
                    config_path=self.config_path,
                    error_details="'logfacade' section must be a mapping"
                )
            )
            return {}
        return section

    def _env_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        env = self._environ
        if env.get("LOG_LEVEL"):
            overrides["log_level"] = env["LOG_LEVEL"]
        if env.get("LOG_FILE"):
            overrides["log_file"] = env["LOG_FILE"]
        if env.get("LOGFACADE_ISOLATE_SUBSCRIBERS"):
            overrides["isolate_subscriber_errors"] = _env_flag(env["LOGFACADE_ISOLATE_SUBSCRIBERS"])
        if env.get("LOGFACADE_INSTALL_TARGET"):
            overrides["install_target"] = env["LOGFACADE_INSTALL_TARGET"]
        return overrides

    def _load_config(self) -> Dict[str, Any]:
        config = deep_merge(DEFAULT_CONFIG, self._load_file())
        config = deep_merge(config, self._env_overrides())

        config["log_level"] = str(config["log_level"]).upper()
        config["install_target"] = str(config["install_target"]).lower()
        if config["install_target"] not in INSTALL_TARGETS:
            ErrorLogger.log_error(
                error_type=ErrorType.CONFIG_ERROR,
                context=ErrorContext(
                    error_details=f"unknown install_target '{config['install_target']}'"
                )
            )
            config["install_target"] = DEFAULT_CONFIG["install_target"]
        return config

    def get_config(self) -> Dict[str, Any]:
        return self.config

    @property
    def log_level(self) -> str:
        return self.config["log_level"]

    @property
    def log_file(self) -> Optional[str]:
        return self.config["log_file"]

    @property
    def isolate_subscriber_errors(self) -> bool:
        """True when one failing subscriber must not stop the rest of a batch"""
        return bool(self.config["isolate_subscriber_errors"])

    @property
    def install_target(self) -> str:
        return self.config["install_target"]

    def reload_config(self):
        logger.info("Reloading configuration", config={
            "operation": "reload_config",
            "config_dir": self.config_dir
        })
        self.config = self._load_config()
