"""
Import group identifiers and the ordering constants shared by the parser and
the sequencer.
"""

# std
from enum import Enum


# ---------------------------------------------------------------------------- #

class ImportGroup(str, Enum):
    """
    The four categories an import statement can belong to. The member value is
    the token used in configuration strings.
    """

    STD = 'std'             # standard library: os, re, itertools...
    GENERAL = 'general'     # general purpose third-party libraries
    COMPANY = 'company'     # packages belonging to the same organization
    PROJECT = 'project'     # packages inside the current project

    def __str__(self):
        return self.value

    @classmethod
    def resolve(cls, obj):
        """Get the member for `obj`, or None if it is not a recognized group."""
        if isinstance(obj, cls):
            return obj

        try:
            return cls(obj)
        except ValueError:
            return None


# ---------------------------------------------------------------------------- #
DEFAULT_ORDER = (ImportGroup.STD,
                 ImportGroup.GENERAL,
                 ImportGroup.COMPANY,
                 ImportGroup.PROJECT)

DEFAULT_ORDER_STRING = ','.join(map(str, DEFAULT_ORDER))

# Adjacent groups that are written without a blank line between them
NO_SEPARATOR_PAIR = frozenset({ImportGroup.COMPANY, ImportGroup.PROJECT})
