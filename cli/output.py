"""Shared output helper for CLI commands."""

import json
from logger import get_logger

logger = get_logger()


def emit(data) -> None:
    """Log a read projection (dict or list of dicts) as indented JSON."""
    logger.info(json.dumps(data, indent=2, ensure_ascii=False))
