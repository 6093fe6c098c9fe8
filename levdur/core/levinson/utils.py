import numpy as np
import numpy.linalg as ln
from scipy.linalg import toeplitz

from ..errors import SingularNormalMatrixError


def solve_normal_equations(autocorrelation, num_order):
    """Solve autocorrelation normal equations without recursion.

    Args:
        autocorrelation (numpy array): Autocorrelation r(0), ..., r(M) (at least M+1 values).
        num_order (int): Order of the linear predictor (M).

    Returns:
        numpy array: M+1 coefficients (1, a(1), ..., a(M)) solving
            R a = -r with the M x M Toeplitz matrix R = toeplitz(r(0), ..., r(M-1)).

    """
    r = np.asarray(autocorrelation, dtype=np.float64)
    a = np.zeros(num_order + 1)
    a[0] = 1.0
    if num_order == 0:
        return a

    R = toeplitz(r[:num_order])
    if np.all(R == 0.0) or not np.isfinite(ln.cond(R)):
        raise SingularNormalMatrixError('normal matrix is singular')

    try:
        a[1:] = ln.solve(R, -r[1:num_order + 1])
    except ln.LinAlgError as e:
        raise SingularNormalMatrixError('normal matrix is singular: %s' % e) from e
    return a


def is_stable(reflection_coefficients):
    """Return True if all reflection coefficients are inside the unit circle."""
    k = np.asarray(reflection_coefficients, dtype=np.float64)
    return bool(np.all(np.abs(k) < 1.0))
