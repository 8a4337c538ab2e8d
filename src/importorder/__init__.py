"""
Order groups of import statements: standard library, general third-party,
company and project imports.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('importorder')

# relative
from .order import format_order, parse
from .sequence import merge, sequence, sequence_legacy
from .errors import OrderConfigError, OrderError, UnknownGroupError
from .groups import (DEFAULT_ORDER, DEFAULT_ORDER_STRING, NO_SEPARATOR_PAIR,
                     ImportGroup)


# ---------------------------------------------------------------------------- #
# version
try:
    __version__ = version('importorder')
except PackageNotFoundError:
    __version__ = '0.0.0'
