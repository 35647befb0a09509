from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main_logger() -> logging.Logger:
    """
    Create the catalog logger with console and file handlers.

    Handlers are only attached the first time, so importing this module
    repeatedly never duplicates log lines.

    Returns:
        logging.Logger: Logger used for catalog activity (template loads, runs, failures).
    """
    logger = logging.getLogger("claims_query_catalog")
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        file_handler = logging.FileHandler("claims_query_catalog.log")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    return logger


def debug_logger() -> logging.Logger:
    """
    Create the debug logger that records rendered SQL and binding details.

    Returns:
        logging.Logger: File-only logger at DEBUG level.
    """
    logger = logging.getLogger("claims_query_catalog.debug")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not logger.handlers:
        file_handler = logging.FileHandler("claims_query_catalog_debug.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger.addHandler(file_handler)

    return logger


logger = main_logger()
d_logger = debug_logger()
