"""
Merge the four groups of import statements into a single block of lines, with
blank lines separating the groups.
"""

# third-party
from loguru import logger

# relative
from .groups import DEFAULT_ORDER, NO_SEPARATOR_PAIR, ImportGroup


# ---------------------------------------------------------------------------- #
SEPARATOR = ''


# ---------------------------------------------------------------------------- #

def _dispatch(std, general, company, project):
    return {ImportGroup.STD:     std,
            ImportGroup.GENERAL: general,
            ImportGroup.COMPANY: company,
            ImportGroup.PROJECT: project}


def _should_separate(group, previous, no_separator):
    return not (group in no_separator and previous in no_separator)


def sequence(order, std=(), general=(), company=(), project=(), *,
             no_separator=NO_SEPARATOR_PAIR):
    """
    Concatenate the import groups in the requested order.

    An empty string is inserted between consecutive groups, except where both
    groups are members of `no_separator` (by default "company" and "project").
    The lines within each group are kept in the order they are given.

    Parameters
    ----------
    order : sequence of ImportGroup or str
        The group order. The default order is used if empty or None.
    std, general, company, project : sequence of str
        Import statements belonging to each group.
    no_separator : set of ImportGroup, optional
        Groups that are written without blank lines between them when they are
        adjacent.

    Returns
    -------
    list of str
        Import lines interspersed with empty separator strings.
    """

    if not order:
        order = DEFAULT_ORDER

    no_separator = {ImportGroup.resolve(group) for group in no_separator}
    no_separator.discard(None)

    groups = _dispatch(std, general, company, project)
    result = []
    previous = None
    for i, group in enumerate(map(ImportGroup.resolve, order)):
        if i and _should_separate(group, previous, no_separator):
            result.append(SEPARATOR)

        if group is None:
            logger.debug('Skipping unrecognized import group at position {}.', i)

        result.extend(groups.get(group, ()))
        previous = group

    return result


def sequence_legacy(order, std, general, company, project):
    """
    Reorder the four import groups without merging them. The caller is
    responsible for joining the results.
    """

    if not order:
        return std, general, company, project

    groups = _dispatch(std, general, company, project)
    return tuple(groups.get(ImportGroup.resolve(group), []) for group in order)


def merge(order, std=(), general=(), company=(), project=(), **kws):
    """Write the ordered import block as a single string."""
    return '\n'.join(sequence(order, std, general, company, project, **kws))
