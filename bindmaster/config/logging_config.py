"""
Logging setup for BindMaster.

Usage:
    from bindmaster.config.logging_config import setup_logger
    logger = setup_logger(__name__)
"""
import logging

from bindmaster.config.settings import load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "bindmaster"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:
        return root

    level = load_settings().log_level
    root.setLevel(getattr(logging, level, logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)
    return root


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get a logger under the ``bindmaster`` hierarchy.

    Args:
        name: Module name. Names outside the package are nested under it.

    Returns:
        Configured logging.Logger instance.
    """
    _configure_root()
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
