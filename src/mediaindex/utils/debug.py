"""Logging setup for mediaindex.

Modules log through ``logging.getLogger(__name__)``; the handler installed here
on the ``mediaindex`` logger formats their records. Debug output is controlled
by the MEDIAINDEX_DEBUG environment variable.
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("MEDIAINDEX_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("mediaindex")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger
