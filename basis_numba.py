import logging

import numpy as np
from numba import njit, prange

import Parameters

LOGGER = logging.getLogger(__name__)


@njit(parallel=Parameters.numba_parallel, fastmath=Parameters.numba_fastmath)
def _expand_rows(X, poly_terms):
    n_samples = X.shape[0]
    n_poly, n_variables = poly_terms.shape
    M = np.ones((n_samples, n_poly + 1))
    for s in prange(n_samples):
        for i in range(n_poly):
            prod = 1.0
            for j in range(n_variables):
                # zero exponent: identity factor
                if poly_terms[i, j] > 0:
                    prod *= X[s, j] ** poly_terms[i, j]
            M[s, i + 1] = prod
    return M


# 외부에서 호출할 때는 wrapper를 사용
def compute_M_matrix_numba(X, poly_terms):
    """
    Numba version of polybasis.compute_M_matrix.
    X: (n, v) points, poly_terms: (m, v) exponents. Returns (n, m + 1).
    """
    # numba가 이해할 수 있게 float64 배열로 변환
    X = np.ascontiguousarray(X, dtype=np.float64)
    poly_terms = np.ascontiguousarray(poly_terms, dtype=np.float64)
    LOGGER.debug("kernel dispatch: X %s, poly_terms %s", X.shape, poly_terms.shape)
    return _expand_rows(X, poly_terms)
