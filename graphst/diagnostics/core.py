"""Invariant checks for adjacency matrices."""

from __future__ import annotations

import numpy as np

from ..exceptions import MalformedMatrixError


def is_square(mat: np.ndarray) -> bool:
    """
    Check whether an array is a 2-D square matrix.

    Parameters
    ----------
    mat:
        Array to inspect.

    Returns
    -------
    bool
        True if mat has shape (n, n), False otherwise.
    """
    try:
        mat = np.asarray(mat)
    except ValueError:
        # ragged nested sequences
        return False
    return mat.ndim == 2 and mat.shape[0] == mat.shape[1]


def is_symmetric(mat: np.ndarray, atol: float = 0.0) -> bool:
    """
    Check whether a matrix equals its transpose.

    Parameters
    ----------
    mat:
        Array with shape (n, n).
    atol:
        Absolute tolerance. The default of 0.0 demands exact equality,
        which is what UndirectedGraph maintains.

    Returns
    -------
    bool
        True if mat is square and symmetric within the tolerance.
    """
    if not is_square(mat):
        return False
    mat = np.asarray(mat)
    if atol == 0.0:
        return bool(np.array_equal(mat, mat.T, equal_nan=True))
    return bool(np.allclose(mat, mat.T, atol=atol, rtol=0.0, equal_nan=True))


def assert_square(mat: np.ndarray) -> None:
    """
    Assert that an array is a 2-D square matrix.

    Raises
    ------
    MalformedMatrixError
        If mat is not square.
    """
    if is_square(mat):
        return
    try:
        shape = np.shape(mat)
    except ValueError:
        shape = "ragged"
    raise MalformedMatrixError(f"Adjacency matrix is not square: shape {shape}")


def assert_symmetric(mat: np.ndarray, atol: float = 0.0) -> None:
    """
    Assert that a matrix is square and symmetric.

    Parameters
    ----------
    mat:
        Array with shape (n, n).
    atol:
        Absolute tolerance for the comparison.

    Raises
    ------
    MalformedMatrixError
        If the matrix is not square, or if some mat[i, j] != mat[j, i]. The
        message names the first offending pair in row-major order.
    """
    assert_square(mat)
    mat = np.asarray(mat)
    if is_symmetric(mat, atol=atol):
        return

    diff = np.abs(mat - mat.T) > atol
    # NaN never compares equal to itself
    diff |= np.isnan(mat) != np.isnan(mat.T)
    i, j = (int(k) for k in np.argwhere(diff)[0])
    raise MalformedMatrixError(
        f"Adjacency matrix is not symmetric: "
        f"m[{i}][{j}]={mat[i, j]} but m[{j}][{i}]={mat[j, i]}"
    )
