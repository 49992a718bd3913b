"""
Kernel configuration: optional JSON file merged over defaults.
"""
import json
import logging

from .diagnostics import diagnostics
from .logger import get_logger

DEFAULTS = {
    "logger_name": "armath",
    "log_level": "INFO",
    # Vector.check_2d() raises instead of logging when not told otherwise
    "halt_on_non_2d": True,
}

_settings = dict(DEFAULTS)

# child of the "armath" logger, which owns the handler
logger = logging.getLogger(__name__)


def load_config(path: str = "armath.json") -> dict:
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.info(f"Config file '{path}' not found, using defaults.")
        return {}


def configure(config=None, sink=None) -> dict:
    """
    Apply ``config`` over the defaults and install ``sink`` if given.
    Unknown keys are ignored. Returns a copy of the active settings.
    """
    settings = dict(DEFAULTS)
    for key, value in (config or {}).items():
        if key in DEFAULTS:
            settings[key] = value
        else:
            logger.debug(f"Ignoring unknown config key '{key}'")

    get_logger(settings["logger_name"], settings["log_level"])

    diagnostics.logger_name = settings["logger_name"]
    if sink is not None:
        diagnostics.set_sink(sink)

    _settings.clear()
    _settings.update(settings)
    return dict(_settings)


def get_setting(key: str):
    return _settings[key]
