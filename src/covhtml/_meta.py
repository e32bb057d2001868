from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("covhtml")

logger = logging.getLogger("covhtml")

__all__ = ["__version__", "logger"]
