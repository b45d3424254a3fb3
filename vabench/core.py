"""
Assorted utility functions.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""


def reraise(exception, message, exception_class=None):
    """
    Re-raise `exception` with `message` appended to its first argument,
    optionally converting it to `exception_class`.
    """
    args = list(exception.args) or [""]
    args[0] = "%s%s" % (args[0], message)
    if exception_class is None:
        exception.args = tuple(args)
        raise exception
    raise exception_class(*args) from exception
