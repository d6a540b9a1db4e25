import logging
import sys


def setup_logging(level="WARNING", format_string='%(asctime)s - %(name)s - %(levelname)s - %(message)s'):
    """Configures basic logging to stderr (stdout carries calculator output)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr
    )
