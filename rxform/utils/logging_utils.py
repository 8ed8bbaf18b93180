"""Utility for configuring logging."""
import logging
import os
from rxform.utils.config_loader import ConfigLoader

def setup_logging():
    """Configure logging for the application."""
    config_loader = ConfigLoader()
    config = config_loader.get_config()

    log_level = getattr(logging, config["LOG_LEVEL"].upper(), logging.INFO)

    handlers = [logging.StreamHandler()]
    if config["LOG_TO_FILE"]:
        os.makedirs(config["LOG_DIR"], exist_ok=True)
        handlers.insert(0, logging.FileHandler(config["LOG_FILE"]))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers
    )
    logging.getLogger(__name__).info("Logging configured")
