"""
Load import order settings from yaml config files and the environment.
"""

# std
import os
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path

# relative
from .order import parse
from .errors import UnknownGroupError
from .groups import NO_SEPARATOR_PAIR, ImportGroup


# ---------------------------------------------------------------------------- #
CACHE = {}

PACKAGE = 'importorder'
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME
ENV_ORDER = 'IMPORTORDER_ORDER'


# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    path = Path(filename)
    if path not in CACHE:
        if not path.exists():
            raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

        CACHE[path] = load_yaml(path)

    return CACHE[path]


def user_config_file():
    return user_config_path(PACKAGE) / FILENAME


def load_config(filename=None):
    """
    Load the configuration, with settings from the user config file (if any)
    taking precedence over the packaged defaults.
    """

    config = dict(load(DEFAULTS))

    path = Path(filename) if filename else user_config_file()
    if path.exists():
        logger.debug("Found config file for package: {!r} at '{}'.", PACKAGE, path)
        config.update(load(path))
    elif filename:
        raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

    return config


# ---------------------------------------------------------------------------- #

def resolve_order_string(order=None, filename=None):
    """
    Get the import order configuration string. An explicit `order` takes
    precedence over the environment variable, which takes precedence over the
    config file.
    """

    if order:
        logger.debug('Using import order from caller: {!r}.', order)
        return order

    if order := os.environ.get(ENV_ORDER, '').strip():
        logger.debug('Using import order from environment variable {}: {!r}.',
                     ENV_ORDER, order)
        return order

    order = load_config(filename).get('order') or ''
    if isinstance(order, (list, tuple)):
        order = ','.join(map(str, order))

    logger.debug('Using import order from config: {!r}.', order)
    return str(order)


def resolve_order(order=None, filename=None):
    return parse(resolve_order_string(order, filename))


def resolve_no_separator(filename=None):
    """Get the set of groups that are not separated by blank lines."""

    names = load_config(filename).get('no_separator')
    if names is None:
        return NO_SEPARATOR_PAIR

    groups = set()
    for name in names:
        if (group := ImportGroup.resolve(str(name).strip())) is None:
            raise UnknownGroupError(name)
        groups.add(group)

    return frozenset(groups)
