from abc import ABCMeta, abstractmethod
from enum import IntEnum

import numpy as np

from .errors import StreamError


class InputSourceInterface(metaclass=ABCMeta):
    """Something that produces fixed-size frames of float64 values on demand."""

    @abstractmethod
    def get_size(self):
        """Return the number of values in one frame."""

    @abstractmethod
    def get(self):
        """Return the next frame as a numpy array, or None if there is no more frame."""

    def __iter__(self):
        while True:
            frame = self.get()
            if frame is None:
                return
            yield frame


class InputSourceFromArray(InputSourceInterface):

    def __init__(self, array, read_size, zero_padding=False):
        """Read consecutive frames from an array.

        Args:
            array (sequence of float): Source values.
            read_size (int): Number of values in one frame.
            zero_padding (bool): Pad the last incomplete frame with zeros instead of dropping it.

        """
        self.array = np.asarray(array, dtype=np.float64).ravel()
        if read_size <= 0:
            raise ValueError('read size must be positive: %d' % read_size)
        if self.array.size == 0:
            raise ValueError('array must not be empty')

        self.read_size = read_size
        self.zero_padding = zero_padding
        self.position = 0

    def get_size(self):
        return self.read_size

    def get(self):
        rest = self.array.size - self.position
        if rest <= 0 or (rest < self.read_size and not self.zero_padding):
            return None

        frame = np.zeros(self.read_size)
        n = min(rest, self.read_size)
        frame[:n] = self.array[self.position:self.position + n]
        self.position += n
        return frame


class InputSourceFromStream(InputSourceInterface):

    itemsize = np.dtype(np.float64).itemsize

    def __init__(self, stream, read_size, zero_padding=False):
        """Read frames of native float64 values from a binary stream.

        Args:
            stream (file object): Binary stream, e.g. a file opened with 'rb' or stdin's buffer.
            read_size (int): Number of values in one frame.
            zero_padding (bool): Pad the last incomplete frame with zeros instead of failing.

        """
        if read_size <= 0:
            raise ValueError('read size must be positive: %d' % read_size)

        self.stream = stream
        self.read_size = read_size
        self.zero_padding = zero_padding

    def get_size(self):
        return self.read_size

    def get(self):
        num_bytes = self.read_size * self.itemsize
        try:
            data = self.stream.read(num_bytes)
        except (OSError, ValueError) as e:
            raise StreamError('failed to read a frame: %s' % e) from e

        if not data:
            return None

        # a pipe may return fewer bytes than requested before the end of stream
        while len(data) < num_bytes:
            try:
                chunk = self.stream.read(num_bytes - len(data))
            except (OSError, ValueError) as e:
                raise StreamError('failed to read a frame: %s' % e) from e
            if not chunk:
                break
            data += chunk

        if len(data) % self.itemsize != 0:
            raise StreamError('stream ends in the middle of a value (%d bytes)' % len(data))

        frame = np.zeros(self.read_size)
        values = np.frombuffer(data, dtype=np.float64)
        if values.size < self.read_size and not self.zero_padding:
            raise StreamError('incomplete frame: expected %d values, got %d'
                              % (self.read_size, values.size))
        frame[:values.size] = values
        return frame


class FilterGainType(IntEnum):
    LINEAR = 0
    LOG = 1
    UNITY = 2
    UNITY_FOR_ALL_ZERO_FILTER = 3


class InputSourcePreprocessingForFilterGain(InputSourceInterface):

    def __init__(self, gain_type, source):
        """Rewrite the gain term (first value) of frames read from another source.

        Args:
            gain_type (FilterGainType): How to interpret the gain term.
                LINEAR: keep it.
                LOG: it is a log gain; replace it by its exponential.
                UNITY: replace it by 1.
                UNITY_FOR_ALL_ZERO_FILTER: divide the other coefficients by it, then set it to 1.
            source (InputSourceInterface): Wrapped source.

        """
        if source is None:
            raise ValueError('source must be given')

        self.gain_type = FilterGainType(gain_type)
        self.source = source

    def get_size(self):
        return self.source.get_size()

    def get(self):
        frame = self.source.get()
        if frame is None:
            return None

        if self.gain_type == FilterGainType.LOG:
            frame[0] = np.exp(frame[0])
        elif self.gain_type == FilterGainType.UNITY:
            frame[0] = 1.0
        elif self.gain_type == FilterGainType.UNITY_FOR_ALL_ZERO_FILTER:
            if frame[0] == 0.0:
                raise ZeroDivisionError('gain of an all-zero filter must not be 0')
            frame[1:] /= frame[0]
            frame[0] = 1.0

        return frame
