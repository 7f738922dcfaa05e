import json
import logging
import os
from dataclasses import asdict

from dotenv import find_dotenv, load_dotenv

from .timer_engine import ConfigError, Settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.expanduser("~/.config/pomodoro-deck/config.json")


def get_config_path():
    """Config file location; POMODORO_DECK_CONFIG (environment or .env) overrides the default."""
    load_dotenv(find_dotenv(usecwd=True))
    return os.path.expanduser(os.getenv("POMODORO_DECK_CONFIG", DEFAULT_CONFIG_PATH))


def get_log_level():
    """Log level from POMODORO_DECK_LOG_LEVEL; unknown names fall back to INFO."""
    name = os.getenv("POMODORO_DECK_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown POMODORO_DECK_LOG_LEVEL %r, using INFO", name)
        return logging.INFO
    return level


def load_config(path=None):
    """Loads the configuration from the JSON file."""
    path = path or get_config_path()
    if os.path.exists(path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: top level is not an object", path)
            return {}
        return data
    return {}


def save_config(data, path=None):
    """Saves the given data to the JSON configuration file."""
    path = path or get_config_path()
    try:
        # Ensure the directory exists
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        logger.error("Error saving config file %s: %s", path, e)


def settings_from_config(config):
    """
    Builds Settings from the "timer" section of a config dict.
    Missing keys fall back to the defaults; bad values raise ConfigError.
    """
    timer = config.get("timer", {})
    if not isinstance(timer, dict):
        raise ConfigError("'timer' must be an object")

    values = asdict(Settings())
    for key in values:
        if key in timer:
            values[key] = timer[key]
    return Settings(**values)


def load_settings(path=None):
    """
    Reads the timer settings at startup, writing the defaults out on first run.
    """
    path = path or get_config_path()
    if not os.path.exists(path):
        save_config({"timer": asdict(Settings())}, path)
        logger.info("Wrote default timer settings to %s", path)
        return Settings()
    return settings_from_config(load_config(path))
