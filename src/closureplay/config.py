import os
from configparser import MissingSectionHeaderError
from pathlib import Path

from kivy.config import ConfigParser
from kivy.logger import Logger as logger

APP_NAME = "closureplay"

USER_CONFIG_PATH = Path.home() / ".config" / APP_NAME / "config.ini"
GLOBAL_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.ini"

ENV_OVERRIDES = {
    "CLOSUREPLAY_DEFAULT_STEP": ("counter", "default_step"),
    "CLOSUREPLAY_BITS": ("counter", "bits"),
    "CLOSUREPLAY_OVERFLOW": ("counter", "overflow"),
}


def load_config() -> ConfigParser:
    config = ConfigParser()

    # default values
    config.setdefaults(
        "logging",
        {
            "level": "DEBUG",
        },
    )

    # bits = 0 keeps totals unbounded
    config.setdefaults(
        "counter",
        {
            "default_step": "1",
            "bits": "0",
            "overflow": "error",
        },
    )

    # read global config (in repo root or installed path)
    if GLOBAL_CONFIG_PATH.exists():
        try:
            config.read(str(GLOBAL_CONFIG_PATH))
            logger.info(f"ClosurePlay: Global config found at {GLOBAL_CONFIG_PATH}")
        except MissingSectionHeaderError:
            logger.warning(f"ClosurePlay: Ignoring malformed global config at {GLOBAL_CONFIG_PATH}")

    # read user config
    if USER_CONFIG_PATH.exists():
        try:
            config.read(str(USER_CONFIG_PATH))
            logger.info(f"ClosurePlay: User config found at {USER_CONFIG_PATH}")
        except MissingSectionHeaderError:
            logger.warning(f"ClosurePlay: Ignoring malformed user config at {USER_CONFIG_PATH}")

    # environment overrides
    for env_name, (section, option) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config.set(section, option, value)

    return config
