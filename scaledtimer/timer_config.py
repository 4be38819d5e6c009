"""
TimerConfig - YAML-backed configuration for ElapsedTimer

This module provides the configuration surface for timers:
- Loads settings from a YAML file, creating a default file when missing
- Validates sections and rejects invalid scale values before they reach a timer
- Persists updated settings back to disk
- Builds a configured ElapsedTimer
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .elapsed_timer import ElapsedTimer, ScaleMode, TrackingMode
from .exceptions import ConfigurationError
from .global_scale import validate_scale
from .timing_base import ScaleProviderBase, TimerBase

DEFAULT_CONFIG: Dict[str, Any] = {
    "timer": {
        "autostart": False,
        "pause_on_reset": True,
        "tracking_mode": "DELTA_ACCUMULATION",
    },
    "scale": {
        "use_global_scale": True,
        "use_custom_scale": False,
        "custom_scale": 1.0,
    },
    "format": {
        "include_milliseconds": True,
        "delimiter": ":",
    },
}


class TimerConfig:
    """
    File-backed timer configuration.

    Usage:
        config = TimerConfig("timer.yaml")
        timer = config.create_timer()
        timer.start()
    """

    def __init__(self, config_path: str):
        """
        Load configuration, writing defaults if the file does not exist.

        Args:
            config_path: Path to YAML configuration file

        Raises:
            ConfigurationError: If the file cannot be parsed or is invalid
        """
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file or create default."""
        if not self.config_path.exists():
            logger.warning(
                f"Configuration file not found, creating default: {self.config_path}"
            )
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            self.save()
            return

        logger.info(f"Loading timer configuration from {self.config_path}")
        try:
            with open(self.config_path, "r") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML configuration: {e}")
            raise ConfigurationError(f"Configuration parsing error: {e}")
        except OSError as e:
            logger.error(f"Failed to read configuration: {e}")
            raise ConfigurationError(f"Configuration loading error: {e}")

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self.config_path}"
            )
        self.config = loaded
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate loaded configuration structure and values."""
        for section in ("timer", "scale"):
            if not isinstance(self.config.get(section), dict):
                raise ConfigurationError(
                    f"Missing required configuration section: {section}"
                )
        # Format section is optional
        if self.config.get("format") is None:
            self.config["format"] = copy.deepcopy(DEFAULT_CONFIG["format"])
        if not isinstance(self.config["format"], dict):
            raise ConfigurationError("Configuration section format must be a mapping")

        timer_cfg = self.config["timer"]
        mode_name = timer_cfg.get("tracking_mode", "DELTA_ACCUMULATION")
        if not isinstance(mode_name, str) or mode_name not in TrackingMode.__members__:
            raise ConfigurationError(f"Unknown tracking mode: {mode_name!r}")

        for key in ("autostart", "pause_on_reset"):
            if not isinstance(timer_cfg.get(key, False), bool):
                raise ConfigurationError(f"timer.{key} must be true or false")

        scale_cfg = self.config["scale"]
        for key in ("use_global_scale", "use_custom_scale"):
            if not isinstance(scale_cfg.get(key, False), bool):
                raise ConfigurationError(f"scale.{key} must be true or false")
        validate_scale(scale_cfg.get("custom_scale", 1.0), "scale.custom_scale")

        fmt = self.config["format"]
        if not isinstance(fmt.get("include_milliseconds", True), bool):
            raise ConfigurationError("format.include_milliseconds must be true or false")
        if not isinstance(fmt.get("delimiter", ":"), str):
            raise ConfigurationError("format.delimiter must be a string")

    def save(self) -> None:
        """Save current configuration to YAML file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(self.config, f, default_flow_style=False, indent=2)
            logger.info(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")
            raise ConfigurationError(f"Configuration save error: {e}")

    def update(self, updates: Dict[str, Dict[str, Any]], persist: bool = True) -> None:
        """
        Merge section updates, validate, and optionally save.

        Args:
            updates: e.g. {"scale": {"custom_scale": 2.0}}
            persist: Write the merged configuration to disk

        Raises:
            ConfigurationError: If the merged configuration is invalid; the
                previous configuration is kept
        """
        previous = copy.deepcopy(self.config)
        for section, values in updates.items():
            if not isinstance(values, dict):
                self.config = previous
                raise ConfigurationError(f"Update for section {section} must be a mapping")
            self.config.setdefault(section, {}).update(values)
        try:
            self._validate_config()
        except ConfigurationError:
            self.config = previous
            raise
        if persist:
            self.save()

    # Typed views
    def get_tracking_mode(self) -> TrackingMode:
        return TrackingMode[self.config["timer"].get("tracking_mode", "DELTA_ACCUMULATION")]

    def get_scale_mode(self) -> ScaleMode:
        scale_cfg = self.config["scale"]
        mode = ScaleMode.NONE
        if scale_cfg.get("use_global_scale", False):
            mode |= ScaleMode.GLOBAL
        if scale_cfg.get("use_custom_scale", False):
            mode |= ScaleMode.CUSTOM
        return mode

    def get_custom_scale(self) -> float:
        return float(self.config["scale"].get("custom_scale", 1.0))

    def get_format_options(self) -> Dict[str, Any]:
        fmt = self.config["format"]
        return {
            "include_milliseconds": fmt.get("include_milliseconds", True),
            "delimiter": fmt.get("delimiter", ":"),
        }

    def create_timer(
        self,
        timer: Optional[TimerBase] = None,
        scale_provider: Optional[ScaleProviderBase] = None,
    ) -> ElapsedTimer:
        """Build an ElapsedTimer from this configuration."""
        timer_cfg = self.config["timer"]
        elapsed_timer = ElapsedTimer(
            tracking_mode=self.get_tracking_mode(),
            scale_mode=self.get_scale_mode(),
            custom_scale=self.get_custom_scale(),
            autostart=timer_cfg.get("autostart", False),
            pause_on_reset=timer_cfg.get("pause_on_reset", True),
            timer=timer,
            scale_provider=scale_provider,
        )
        logger.info(f"Timer created from configuration: {elapsed_timer!r}")
        return elapsed_timer
