import logging

import numpy as np

import Parameters
from basis_numba import compute_M_matrix_numba

LOGGER = logging.getLogger(__name__)


class ShapeMismatch(ValueError):
    """Input vector length does not match the columns of poly_terms."""


def _as_poly_terms(poly_terms, n_variables):
    E = np.asarray(poly_terms)
    # [] means no monomials at all
    if E.ndim == 1 and E.size == 0:
        return E.reshape(0, n_variables)
    if E.ndim != 2:
        raise ShapeMismatch(f"'poly_terms' must be a 2-D matrix, got {E.ndim} dimension(s)")
    return E


# Raw polynomial expansion of a single point
def raw_to_poly(x, poly_terms):
    """
    ans[0] = 1, ans[i+1] = prod_j x[j]**poly_terms[i, j].
    Zero exponents are skipped, so 0**0 is never evaluated.
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise ShapeMismatch(f"'x' must be a vector, got {x.ndim} dimension(s)")
    E = _as_poly_terms(poly_terms, x.shape[0])
    n_poly, n_variables = E.shape

    if x.shape[0] != n_variables:
        raise ShapeMismatch(
            f"'x' has {x.shape[0]} elements but 'poly_terms' has {n_variables} columns")

    # 1 is the identity for the products below
    ans = np.ones(n_poly + 1)
    for i in range(n_poly):
        powers = E[i]
        for j in range(n_variables):
            if powers[j] > 0:
                ans[i + 1] *= x[j] ** powers[j]
    return ans


# Compute M matrix (one expansion per row of X)
def compute_M_matrix(X, poly_terms, use_numba=None):
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X[None, :]
    if X.ndim != 2:
        raise ShapeMismatch(f"'X' must be a matrix of points, got {X.ndim} dimension(s)")
    E = _as_poly_terms(poly_terms, X.shape[1])
    n, d = X.shape[0], E.shape[0] + 1

    if X.shape[1] != E.shape[1]:
        raise ShapeMismatch(
            f"'X' has {X.shape[1]} columns but 'poly_terms' has {E.shape[1]} columns")

    if use_numba is None:
        use_numba = Parameters.use_numba and n >= Parameters.min_rows_numba
    if use_numba:
        LOGGER.debug("numba path: %d points, %d terms", n, d)
        return compute_M_matrix_numba(X, E)

    LOGGER.debug("numpy path: %d points, %d terms", n, d)
    M = np.ones((n, d))
    for i, powers in enumerate(E):
        nu = np.flatnonzero(powers > 0)
        if len(nu) == 0:
            continue
        M[:, i + 1] = np.prod(X[:, nu] ** powers[nu], axis=1)
    return M


def _factor_label(name, p):
    if p == 1:
        return name
    return f"{name}^{p}"


# Labels for every entry of the expansion, constant first
def term_labels(poly_terms, var_names=None):
    E = np.asarray(poly_terms)
    if E.ndim == 1 and E.size == 0:
        return ["1"]
    if E.ndim != 2:
        raise ShapeMismatch(f"'poly_terms' must be a 2-D matrix, got {E.ndim} dimension(s)")
    n_variables = E.shape[1]
    if var_names is None:
        var_names = [f"x{j+1}" for j in range(n_variables)]
    elif len(var_names) != n_variables:
        raise ShapeMismatch(
            f"{len(var_names)} variable names given but 'poly_terms' has {n_variables} columns")

    labels = ["1"]
    for powers in E:
        term_str = "*".join(_factor_label(name, p) for name, p in zip(var_names, powers.tolist()) if p > 0)
        labels.append(term_str or "1")
    return labels
