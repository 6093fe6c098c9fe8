import numpy as np

from ..errors import SingularNormalMatrixError

from logging import getLogger
logger = getLogger('LevinsonDurbin')


class LevinsonDurbinBuffer:

    def __init__(self):
        """Scratch memory of the Levinson-Durbin recursion.

        A buffer is reused frame by frame; its contents have no meaning between calls,
        except that `reflection_coefficients` and `energy` describe the latest run.

        """
        self.a = np.zeros(0)
        self.c = np.zeros(0)
        self.reflection_coefficients = np.zeros(0)
        self.energy = 0.0

    def prepare(self, length):
        if self.a.size != length:
            self.a = np.zeros(length)
            self.c = np.zeros(length)
            self.reflection_coefficients = np.zeros(length)
        else:
            self.a[:] = 0.0
            self.c[:] = 0.0
            self.reflection_coefficients[:] = 0.0
        self.energy = 0.0


class LevinsonDurbinRecursion:

    def __init__(self, num_order, epsilon=0.0, gain=False):
        """Solve autocorrelation normal equations by the Levinson-Durbin recursion.

        Args:
            num_order (int): Order of the autocorrelation (M).
            epsilon (float): Minimum value of the determinant of the normal matrix.
            gain (bool): Put sqrt of the final prediction error energy into the first coefficient
                instead of 1.

        """
        if isinstance(num_order, bool) or not isinstance(num_order, (int, np.integer)) or num_order < 0:
            raise ValueError('order must be a non-negative integer: %r' % (num_order,))
        if not epsilon >= 0.0:
            raise ValueError('epsilon must be a non-negative number: %r' % (epsilon,))

        self.num_order = int(num_order)
        self.epsilon = float(epsilon)
        self.gain = gain

    def run(self, autocorrelation, buffer=None):
        """Compute linear predictive coefficients from an autocorrelation sequence.

        Args:
            autocorrelation (numpy array): M+1 autocorrelation values r(0), ..., r(M).
            buffer (LevinsonDurbinBuffer): Scratch memory. A new one is used if not given.

        Returns:
            (numpy array, bool): M+1 coefficients (1 or gain, a(1), ..., a(M)) and
                whether all reflection coefficients are inside the unit circle.

        Raises:
            SingularNormalMatrixError: Prediction error energy is smaller than epsilon.

        """
        r = np.asarray(autocorrelation, dtype=np.float64)
        length = self.num_order + 1
        if r.shape != (length,):
            raise ValueError('autocorrelation must have %d values, got shape %s' % (length, r.shape))

        if buffer is None:
            buffer = LevinsonDurbinBuffer()
        buffer.prepare(length)

        a = buffer.a
        c = buffer.c
        k = buffer.reflection_coefficients

        is_stable = True
        e = float(r[0])
        if abs(e) < self.epsilon:
            raise SingularNormalMatrixError('r(0) = %g is below %g' % (e, self.epsilon))

        a[0] = 1.0
        for m in range(1, length):
            self.__check_energy(e, m - 1)

            # k(m) = -(r(m) + a(1) r(m-1) + ... + a(m-1) r(1)) / e(m-1)
            g = r[m] + np.dot(a[1:m], r[m - 1:0:-1])
            k[m] = -g / e

            if 1.0 <= abs(k[m]):
                is_stable = False
                logger.debug('|k(%d)| = %f is not less than 1' % (m, abs(k[m])))

            # c keeps the coefficients of order m-1 while a is updated
            c[1:m] = a[1:m]
            a[1:m] = c[1:m] + k[m] * c[m - 1:0:-1]
            a[m] = k[m]

            e *= (1.0 - k[m] * k[m])

        buffer.energy = e

        lpc = a.copy()
        if self.gain:
            self.__check_energy(e, self.num_order)
            # e(M) is negative for an unstable frame
            lpc[0] = np.sqrt(abs(e))

        return lpc, is_stable

    def __check_energy(self, e, m):
        if e == 0.0 or abs(e) < self.epsilon:
            logger.debug('e(%d) = %g is below the minimum value of the determinant %g' % (m, e, self.epsilon))
            raise SingularNormalMatrixError('prediction error energy e(%d) = %g is below %g'
                                            % (m, e, self.epsilon))
