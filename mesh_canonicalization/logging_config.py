# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

"""
Logging setup for applications and scripts using the package.
The library itself only creates loggers and never configures them.
"""

import logging
import sys

PACKAGE_LOGGER = "mesh_canonicalization"

def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the 'mesh_canonicalization' logger namespace.

    level: logging level (e.g. logging.DEBUG, logging.INFO)
    log_file: optional path to also save the log to
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate lines when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
