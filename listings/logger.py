"""Logging configuration for the listing converters."""
import logging


def setup_logging(verbose: bool = False):
    """
    Configure the root logger.

    Diagnostics go to stderr so they never mix with the summary line on stdout.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
