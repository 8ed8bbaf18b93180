"""Utility for loading configurations."""
import copy
import logging
import os
from rxform.config.app_config import *
from rxform.config.presets import VALIDATION_PRESETS

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigLoader:
    """Loads and provides access to project configurations."""
    def get_config(self):
        """Get application configuration.

        Environment variables ``RXFORM_LOG_LEVEL``, ``RXFORM_LOG_DIR`` and
        ``RXFORM_LOG_TO_FILE`` override the logging defaults.

        Returns:
            dict: Configuration dictionary.
        """
        try:
            log_dir = os.getenv("RXFORM_LOG_DIR", LOG_DIR)
            log_to_file = os.getenv("RXFORM_LOG_TO_FILE")
            config = {
                "LOG_DIR": log_dir,
                "LOG_FILE": os.path.join(log_dir, os.path.basename(LOG_FILE)),
                "LOG_LEVEL": os.getenv("RXFORM_LOG_LEVEL", LOG_LEVEL),
                "LOG_TO_FILE": LOG_TO_FILE if log_to_file is None else log_to_file.strip().lower() in _TRUE_VALUES,
                "DEFAULT_ALLOW_DECIMALS": DEFAULT_ALLOW_DECIMALS,
                "DEFAULT_ALLOW_NEGATIVE": DEFAULT_ALLOW_NEGATIVE,
                "DEFAULT_MAX_DECIMALS": DEFAULT_MAX_DECIMALS,
                "PHONE_MAX_DIGITS": PHONE_MAX_DIGITS,
                "INPUT_FIELDS": copy.deepcopy(INPUT_FIELDS)
            }
            logger.debug("Loaded application configuration")
            return config
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise

    def get_presets(self):
        """Get the validation preset table.

        Returns:
            dict: Preset name to option dictionary.
        """
        try:
            logger.debug("Loaded validation presets")
            return copy.deepcopy(VALIDATION_PRESETS)
        except Exception as e:
            logger.error(f"Failed to load validation presets: {e}")
            raise
