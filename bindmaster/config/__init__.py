"""Units, presets, settings and logging for BindMaster"""

from bindmaster.config.units import Unit, MarkSizes, MARK_SIZES, POINTS_PER_UNIT
from bindmaster.config.presets import PRESETS, DEFAULT_PRESET
from bindmaster.config.settings import Settings, load_settings
from bindmaster.config.logging_config import setup_logger

__all__ = [
    "Unit",
    "MarkSizes",
    "MARK_SIZES",
    "POINTS_PER_UNIT",
    "PRESETS",
    "DEFAULT_PRESET",
    "Settings",
    "load_settings",
    "setup_logger",
]
