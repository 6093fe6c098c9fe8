import numpy as np

from .errors import DimensionMismatchError


class Matrix:

    def __init__(self, num_row=0, num_column=0, vector=None):
        """Dense matrix backed by one flat array.

        Element (i, j) lives at `i * num_column + j` of the owned storage.

        Args:
            num_row (int): Number of rows.
            num_column (int): Number of columns.
            vector (sequence of float): `num_row * num_column` values in row-major order, optional.

        """
        self.__check_shape(num_row, num_column)
        self.__num_row = num_row
        self.__num_column = num_column

        if vector is None:
            self.__data = np.zeros(num_row * num_column)
        else:
            data = np.array(vector, dtype=np.float64).ravel()
            if data.size != num_row * num_column:
                raise ValueError('vector must have %d values, got %d'
                                 % (num_row * num_column, data.size))
            self.__data = data

    @property
    def num_row(self):
        return self.__num_row

    @property
    def num_column(self):
        return self.__num_column

    @property
    def shape(self):
        return self.__num_row, self.__num_column

    def resize(self, num_row, num_column):
        """Reallocate the storage. All elements are set to zero.

        Rows obtained before resizing no longer refer to this matrix.

        """
        self.__check_shape(num_row, num_column)
        self.__num_row = num_row
        self.__num_column = num_column
        self.__data = np.zeros(num_row * num_column)

    def at(self, row, column):
        return self.__data[self.__offset(row, column)]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.at(*key)

        # row view into the owned storage
        self.__check_row(key)
        start = key * self.__num_column
        return self.__data[start:start + self.__num_column]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            self.__data[self.__offset(*key)] = value
        else:
            self[key][:] = value

    def fill_zero(self):
        self.__data[:] = 0.0

    def __add__(self, other):
        self.__check_same_shape(other, '+')
        return Matrix(self.__num_row, self.__num_column, self.__data + other.__data)

    def __sub__(self, other):
        self.__check_same_shape(other, '-')
        return Matrix(self.__num_row, self.__num_column, self.__data - other.__data)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.__num_column != other.__num_row:
            raise DimensionMismatchError('cannot multiply %dx%d by %dx%d'
                                         % (self.__num_row, self.__num_column,
                                            other.__num_row, other.__num_column))
        product = np.dot(self.to_array(), other.to_array())
        return Matrix(self.__num_row, other.__num_column, product)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.__data, other.__data)

    def transpose(self, transposed_matrix=None):
        """Transpose the matrix.

        Args:
            transposed_matrix (Matrix): Output matrix, resized if needed. A new one if not given.

        Returns:
            Matrix: The transposed matrix.

        """
        if transposed_matrix is None:
            transposed_matrix = Matrix()
        if transposed_matrix is self:
            raise ValueError('output of transpose must be another matrix')

        if transposed_matrix.shape != (self.__num_column, self.__num_row):
            transposed_matrix.resize(self.__num_column, self.__num_row)
        transposed_matrix.__data[:] = self.to_array().T.ravel()
        return transposed_matrix

    def get_submatrix(self, row_offset, num_row_of_submatrix,
                      column_offset, num_column_of_submatrix, submatrix=None):
        """Extract a block of the matrix.

        Args:
            row_offset (int): First row of the block.
            num_row_of_submatrix (int): Number of rows of the block.
            column_offset (int): First column of the block.
            num_column_of_submatrix (int): Number of columns of the block.
            submatrix (Matrix): Output matrix, resized if needed. A new one if not given.

        Returns:
            Matrix: The block.

        """
        if (row_offset < 0 or num_row_of_submatrix < 0 or
                self.__num_row < row_offset + num_row_of_submatrix):
            raise IndexError('rows %d..%d are out of range of %d rows'
                             % (row_offset, row_offset + num_row_of_submatrix, self.__num_row))
        if (column_offset < 0 or num_column_of_submatrix < 0 or
                self.__num_column < column_offset + num_column_of_submatrix):
            raise IndexError('columns %d..%d are out of range of %d columns'
                             % (column_offset, column_offset + num_column_of_submatrix,
                                self.__num_column))

        if submatrix is None:
            submatrix = Matrix()
        if submatrix is self:
            raise ValueError('output of get_submatrix must be another matrix')

        if submatrix.shape != (num_row_of_submatrix, num_column_of_submatrix):
            submatrix.resize(num_row_of_submatrix, num_column_of_submatrix)
        block = self.to_array()[row_offset:row_offset + num_row_of_submatrix,
                                column_offset:column_offset + num_column_of_submatrix]
        submatrix.__data[:] = block.ravel()
        return submatrix

    def to_array(self):
        return self.__data.reshape(self.__num_row, self.__num_column).copy()

    def copy(self):
        return Matrix(self.__num_row, self.__num_column, self.__data)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self):
        return 'Matrix(%d, %d, %r)' % (self.__num_row, self.__num_column, self.__data.tolist())

    def __offset(self, row, column):
        self.__check_row(row)
        if not 0 <= column < self.__num_column:
            raise IndexError('column %d is out of range of %d columns' % (column, self.__num_column))
        return row * self.__num_column + column

    def __check_row(self, row):
        if not 0 <= row < self.__num_row:
            raise IndexError('row %d is out of range of %d rows' % (row, self.__num_row))

    def __check_same_shape(self, other, op):
        if not isinstance(other, Matrix):
            raise TypeError('unsupported operand for %s: %r' % (op, type(other).__name__))
        if self.shape != other.shape:
            raise DimensionMismatchError('cannot apply %s to %dx%d and %dx%d'
                                         % (op, self.__num_row, self.__num_column,
                                            other.__num_row, other.__num_column))

    @staticmethod
    def __check_shape(num_row, num_column):
        if num_row < 0 or num_column < 0:
            raise ValueError('matrix size must be non-negative: %dx%d' % (num_row, num_column))
