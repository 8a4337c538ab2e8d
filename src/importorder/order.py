"""
Parse import order configuration strings like "std,general,company,project"
into an ordered tuple of `ImportGroup`s.
"""

# third-party
from loguru import logger

# relative
from .groups import DEFAULT_ORDER_STRING, ImportGroup
from .errors import OrderConfigError, UnknownGroupError


# ---------------------------------------------------------------------------- #
N_GROUPS = len(ImportGroup)


# ---------------------------------------------------------------------------- #

def unduplicate(items):
    """Filter duplicate items, keeping the first occurrence of each."""

    seen = set()
    for item in items:
        if item not in seen:
            yield item

        seen.add(item)


def parse(config=''):
    """
    Convert a comma-separated configuration string into an import order.

    Parameters
    ----------
    config : str, optional
        Group names separated by commas, eg: "std,company,project,general".
        Repeated names are dropped before whitespace around the names is
        stripped, so " std" and "std" count as different names. An empty (or
        blank) string yields the default order.

    Returns
    -------
    tuple of ImportGroup
        The four import groups in the requested order.

    Raises
    ------
    OrderConfigError
        If the configuration does not contain exactly four distinct names.
    UnknownGroupError
        If any name is not one of the recognized import groups.
    """

    if not (config or '').strip():
        logger.debug('Empty import order config, using default: {!r}.',
                     DEFAULT_ORDER_STRING)
        config = DEFAULT_ORDER_STRING

    tokens = list(unduplicate(config.split(',')))
    if len(tokens) != N_GROUPS:
        raise OrderConfigError()

    order = []
    for token in map(str.strip, tokens):
        if (group := ImportGroup.resolve(token)) is None:
            raise UnknownGroupError(token)

        order.append(group)

    # names that only differ in surrounding whitespace
    if len(set(order)) != N_GROUPS:
        raise OrderConfigError()

    order = tuple(order)
    logger.debug('Parsed import order {!r} from config {!r}.',
                 format_order(order), config)
    return order


def format_order(order):
    """Write an import order as a configuration string."""
    return ','.join(str(ImportGroup(group)) for group in order)
