"""Core settings and accelerated helpers.
"""

import os
import functools

import numba as nb


# --------------------------------------------------------------------------- #
#                               Global Settings                               #
# --------------------------------------------------------------------------- #

_NUMBA_CACHE = {
    'True': True, 'False': False,
}[os.environ.get('TNCIRCUIT_NUMBA_CACHE', 'True')]

njit = functools.partial(nb.njit, cache=_NUMBA_CACHE)
"""Numba no-python jit, but obeying cache setting."""

DEFAULT_SVD_THRESHOLD = float(
    os.environ.get('TNCIRCUIT_SVD_THRESHOLD', '1e-15'))
"""Singular values at or below this are dropped when splitting tensors."""

DEFAULT_DTYPE = os.environ.get('TNCIRCUIT_DTYPE', 'complex128')
"""Data type of generated gates and basis states."""


def get_default_threshold(threshold=None):
    """Resolve ``threshold``, falling back to the configured default.
    """
    if threshold is None:
        return DEFAULT_SVD_THRESHOLD
    return float(threshold)
