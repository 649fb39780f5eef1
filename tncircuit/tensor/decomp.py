"""Functions for splitting tensors with truncated singular value
decompositions.
"""

import warnings

import numpy as np
import scipy.linalg as scla
from autoray import compose, do, reshape, shape

from ..core import njit, get_default_threshold
from ..utils import prod
from .errors import TensorNetworkCircuitError


# some convenience functions for multiplying diagonals


@compose
def rdmul(x, d):
    """Right-multiplication a matrix by a vector representing a diagonal."""
    return x * d[None, :]


@compose
def ldmul(d, x):
    """Left-multiplication a matrix by a vector representing a diagonal."""
    return x * d[:, None]


@compose
def svd_thin(x):
    """Thin singular value decomposition of matrix ``x``, returning ``U, s,
    VH``.
    """
    return do("linalg.svd", x, full_matrices=False)


@svd_thin.register("numpy")
def svd_thin_numpy(x):
    try:
        return np.linalg.svd(x, full_matrices=False)

    except np.linalg.LinAlgError:  # pragma: no cover
        warnings.warn("Numpy SVD failed, trying again with different driver.")
        return scla.svd(x, full_matrices=False, lapack_driver='gesvd')


@compose
def count_svals_above(s, threshold):
    """Count the number of singular values strictly greater than
    ``threshold``.
    """
    return int(do("count_nonzero", s > threshold))


@count_svals_above.register("numpy")
def count_svals_above_numpy(s, threshold):
    return int(_count_svals_above_numba(s, threshold))


@njit  # pragma: no cover
def _count_svals_above_numba(s, threshold):
    n_chi = 0
    for i in range(s.size):
        if s[i] > threshold:
            n_chi += 1
    return n_chi


def sort_svd_result(U, s, VH):
    """Make sure the singular values, and the matching singular vectors, are
    in descending order. Most routines already return them like this, in
    which case the inputs are returned untouched.
    """
    if bool(do("any", do("isnan", s))):
        raise TensorNetworkCircuitError(
            "The singular value decomposition produced NaN singular values.")

    if shape(s)[0] < 2:
        return U, s, VH

    if bool(do("all", s[:-1] >= s[1:])):
        return U, s, VH

    warnings.warn("Singular values were not returned in descending order, "
                  "sorting them explicitly.")
    order = do("argsort", -s)
    return U[:, order], s[order], VH[order, :]


def svd_truncated(x, threshold=None):
    """Truncated svd of raw matrix ``x``, absorbing the square root of the
    kept singular values into both sides.

    Parameters
    ----------
    x : array_like
        The matrix to decompose.
    threshold : float, optional
        Only singular values strictly greater than this are kept.

    Returns
    -------
    left : array
        ``U[:, :chi] @ diag(sqrt(s[:chi]))``, shape ``(m, chi)``.
    right : array
        ``diag(sqrt(s[:chi])) @ VH[:chi, :]``, shape ``(chi, n)``.
    """
    threshold = get_default_threshold(threshold)

    U, s, VH = sort_svd_result(*svd_thin(x))
    n_chi = count_svals_above(s, threshold)

    if n_chi == 0:
        warnings.warn(
            f"All singular values are at or below the threshold {threshold}, "
            "the resulting bond has dimension zero.")

    s = do("sqrt", s[:n_chi])
    return rdmul(U[:, :n_chi], s), ldmul(s, VH[:n_chi, :])


def split_array(x, left_axes, right_axes, threshold=None):
    """Split the array ``x`` into two arrays joined by a new bond.

    The axes ``left_axes`` (in the given order) end up on the left array,
    followed by the new bond as its last axis. The new bond is the first axis
    of the right array, followed by ``right_axes`` (in the given order).
    Contracting the bond of the two arrays reproduces ``x``, with its axes
    permuted to ``(*left_axes, *right_axes)``, up to the truncation.

    Parameters
    ----------
    x : array_like
        The array to split.
    left_axes : sequence of int
        Which axes of ``x`` go to the left array.
    right_axes : sequence of int
        Which axes of ``x`` go to the right array.
    threshold : float, optional
        Singular value cutoff, see :func:`svd_truncated`.

    Returns
    -------
    left, right : array
    """
    left_axes, right_axes = tuple(left_axes), tuple(right_axes)
    dims = tuple(shape(x))
    left_dims = tuple(dims[i] for i in left_axes)
    right_dims = tuple(dims[i] for i in right_axes)

    x = do("transpose", x, left_axes + right_axes)
    x = reshape(x, (prod(left_dims), prod(right_dims)))

    left, right = svd_truncated(x, threshold=threshold)
    n_chi = shape(right)[0]

    left = reshape(left, left_dims + (n_chi,))
    right = reshape(right, (n_chi,) + right_dims)
    return left, right
