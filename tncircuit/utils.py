"""Misc utility functions.
"""
from importlib.util import find_spec


try:
    import cytoolz
    concat = cytoolz.concat
    frequencies = cytoolz.frequencies
except ImportError:
    import toolz
    concat = toolz.concat
    frequencies = toolz.frequencies


_CHECK_OPT_MSG = "Option `{}` should be one of {}, but got '{}'."


def check_opt(name, value, valid):
    """Check whether ``value`` takes one of ``valid`` options, and raise an
    informative error if not.
    """
    if value not in valid:
        raise ValueError(_CHECK_OPT_MSG.format(name, valid, value))


def find_library(x):
    """Check if library is installed.

    Parameters
    ----------
    x : str
        Name of library

    Returns
    -------
    bool
        If library is available.
    """
    return find_spec(x) is not None


def raise_cant_find_library_function(x, extra_msg=None):
    """Return function to flag up a missing necessary library.

    This is simplify the task of flagging optional dependencies only at the
    point at which they are needed, and not earlier.

    Parameters
    ----------
    x : str
        Name of library
    extra_msg : str, optional
        Make the function print this message as well, for additional
        information.

    Returns
    -------
    callable
        A mock function that when called, raises an import error specifying
        the required library.
    """

    def function_that_will_raise(*_, **__):
        error_msg = f"The library {x} is not installed. "
        if extra_msg is not None:
            error_msg += extra_msg
        raise ImportError(error_msg)

    return function_that_will_raise


FOUND_TQDM = find_library('tqdm')
if FOUND_TQDM:
    from tqdm import tqdm

    def progbar(*args, **kwargs):
        kwargs.setdefault('ascii', True)
        return tqdm(*args, **kwargs)

else:  # pragma: no cover
    extra_msg = "This is needed to show progress bars."
    progbar = raise_cant_find_library_function("tqdm", extra_msg)


def split_label(label):
    """Split a label such as ``'node_12'`` into its kind and integer suffix,
    the suffix being ``None`` if not numeric.

    Examples
    --------

        >>> split_label('index_7')
        ('index', 7)

        >>> split_label('gate')
        ('gate', None)

    """
    kind, sep, suffix = str(label).rpartition('_')
    if not sep:
        return str(label), None
    try:
        return kind, int(suffix)
    except ValueError:
        return str(label), None


def prod(xs):
    """Product of all elements in ``xs``, ``1`` if empty.
    """
    p = 1
    for x in xs:
        p *= x
    return p
