import numpy as np

from ..errors import SingularNormalMatrixError, UnstableLpcError
from ..matrix import Matrix

from logging import getLogger
logger = getLogger('LevinsonDurbin')


class ReverseLevinsonDurbinBuffer:

    def __init__(self):
        # u[m] holds (1, a(1), ..., a(m)) of order m; e[m] the prediction error energy of order m
        self.u = Matrix()
        self.e = np.zeros(0)

    def prepare(self, length):
        if self.u.shape != (length, length):
            self.u.resize(length, length)
            self.e = np.zeros(length)
        else:
            self.u.fill_zero()
            self.e[:] = 0.0

    @property
    def energy(self):
        """Prediction error energy of order 0, i.e. r(0), of the latest run."""
        return self.e[0] if self.e.size else 0.0


class ReverseLevinsonDurbinRecursion:

    def __init__(self, num_order, epsilon=0.0):
        """Reconstruct an autocorrelation sequence from linear predictive coefficients.

        Args:
            num_order (int): Order of the linear predictive coefficients (M).
            epsilon (float): Minimum value of the determinant of the normal matrix.

        """
        if isinstance(num_order, bool) or not isinstance(num_order, (int, np.integer)) or num_order < 0:
            raise ValueError('order must be a non-negative integer: %r' % (num_order,))
        if not epsilon >= 0.0:
            raise ValueError('epsilon must be a non-negative number: %r' % (epsilon,))

        self.num_order = int(num_order)
        self.epsilon = float(epsilon)

    def run(self, linear_predictive_coefficients, buffer=None, energy=None):
        """Run the Levinson-Durbin recursion backwards.

        The first coefficient is read as the gain sqrt(e(M)) unless `energy` is given,
        so LPC with a unity first coefficient yields the autocorrelation of unit final energy.

        Args:
            linear_predictive_coefficients (numpy array): M+1 coefficients (gain, a(1), ..., a(M)).
            buffer (ReverseLevinsonDurbinBuffer): Scratch memory. A new one is used if not given.
            energy (float): Final prediction error energy e(M), optional.

        Returns:
            numpy array: M+1 autocorrelation values r(0), ..., r(M).

        Raises:
            UnstableLpcError: A reflection coefficient is not inside the unit circle.
            SingularNormalMatrixError: A prediction error energy is smaller than epsilon.

        """
        lpc = np.asarray(linear_predictive_coefficients, dtype=np.float64)
        length = self.num_order + 1
        if lpc.shape != (length,):
            raise ValueError('linear predictive coefficients must have %d values, got shape %s'
                             % (length, lpc.shape))

        if buffer is None:
            buffer = ReverseLevinsonDurbinBuffer()
        buffer.prepare(length)

        u = buffer.u
        e = buffer.e
        M = self.num_order

        u[M, 0] = 1.0
        u[M][1:] = lpc[1:]
        e[M] = lpc[0] * lpc[0] if energy is None else energy
        self.__check_energy(e[M], M)

        # step down: a(m) -> a(m-1)
        for m in range(M, 0, -1):
            a = u[m]
            k = a[m]
            if 1.0 <= abs(k):
                logger.debug('|k(%d)| = %f is not less than 1' % (m, abs(k)))
                raise UnstableLpcError('reflection coefficient k(%d) = %g is not inside the unit circle'
                                       % (m, k))

            d = 1.0 - k * k
            prev = u[m - 1]
            prev[0] = 1.0
            prev[1:m] = (a[1:m] - k * a[m - 1:0:-1]) / d

            e[m - 1] = e[m] / d
            self.__check_energy(e[m - 1], m - 1)

        # step up: r(m) = -(k(m) e(m-1) + a(1) r(m-1) + ... + a(m-1) r(1)) with a of order m-1
        r = np.zeros(length)
        r[0] = e[0]
        for m in range(1, length):
            r[m] = -(u[m, m] * e[m - 1] + np.dot(u[m - 1][1:m], r[m - 1:0:-1]))

        return r

    def __check_energy(self, e, m):
        if e == 0.0 or abs(e) < self.epsilon:
            raise SingularNormalMatrixError('prediction error energy e(%d) = %g is below %g'
                                            % (m, e, self.epsilon))
