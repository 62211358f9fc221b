"""Logging for the hero engine, split into per-component channels."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from cpudefense.engine.settings import load_settings

# One channel per component of the hero engine.
DEFAULT_CHANNELS = {
    "heroes": True,
    "economy": True,
    "leave": True,
    "persistence": True,
}

ChannelSetting = Union[bool, str]


def _level_from_name(name: object, default: int) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


@dataclass
class LoggerConfig:
    """Global level plus, per channel, whether it is on and its own level.

    In ``settings.json`` a ``logChannels`` entry is either a flag or a level
    name; a level name switches the channel on at that level.
    """

    level: int = logging.INFO
    channels: Dict[str, bool] = field(default_factory=lambda: DEFAULT_CHANNELS.copy())
    channel_levels: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        data = load_settings(settings_path)
        level = _level_from_name(data.get("logLevel", "INFO"), logging.INFO)
        channels = DEFAULT_CHANNELS.copy()
        channel_levels: Dict[str, int] = {}
        raw: Dict[str, ChannelSetting] = data.get("logChannels") or {}
        for name, value in raw.items():
            if isinstance(value, str):
                channels[name] = True
                channel_levels[name] = _level_from_name(value, level)
            else:
                channels[name] = bool(value)
        return cls(level=level, channels=channels, channel_levels=channel_levels)


class ChannelLogger:
    """Forwards records to ``cpudefense.<channel>`` while the channel is on."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._logger = logger
        self._enabled = enabled
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def _log(self, level: int, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)


class GameLogger:
    """Hands out the channel loggers used by the registry and its parts."""

    def __init__(self, config: LoggerConfig) -> None:
        logging.basicConfig(
            level=config.level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            stream=sys.stdout,
        )
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in config.channels.items():
            channel = self.channel(name)
            channel.enabled = enabled
            if name in config.channel_levels:
                logging.getLogger(f"cpudefense.{name}").setLevel(config.channel_levels[name])

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Unknown channels start disabled until explicitly enabled.
            self._channels[name] = ChannelLogger(
                name,
                logging.getLogger(f"cpudefense.{name}"),
                False,
            )
        return self._channels[name]


def init_logger(settings_path: Optional[Path] = None) -> GameLogger:
    """Initialise a logger from settings.json."""

    settings_path = settings_path or Path("settings.json")
    config = LoggerConfig.from_settings(settings_path)
    return GameLogger(config)


__all__ = ["GameLogger", "LoggerConfig", "ChannelLogger", "DEFAULT_CHANNELS", "init_logger"]
