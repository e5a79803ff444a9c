#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
from typing import Optional

LOGGER_NAME = "soft_rasterizer"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'soft_rasterizer' package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls (tests, re-entry through main()) must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
